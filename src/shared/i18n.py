"""Translation lookup.

Catalogs are plain tables, usually loaded from the ``i18n`` section of the
configuration file::

    [i18n.de.client]
    "Your order {order_id}" = "Ihre Bestellung {order_id}"
    "{count} item" = ["{count} Artikel", "{count} Artikel"]

A string value is a single translation; a two-element list holds the singular
and plural forms.
"""

from collections.abc import Mapping

from shared.config import Config


class Translator:
    def __init__(self, catalogs: Mapping | None = None):
        self._catalogs = dict(catalogs or {})

    @classmethod
    def from_config(cls, config: Config) -> "Translator":
        return cls(config.get("i18n", {}))

    def _candidates(self, language: str | None) -> list[str]:
        if not language:
            return []
        language = language.replace("-", "_")
        base = language.split("_", 1)[0]
        return [language] if base == language else [language, base]

    def translate(
        self,
        language: str | None,
        domain: str,
        singular: str,
        plural: str | None = None,
        number: int = 1,
    ) -> str:
        """Translate ``singular`` (or ``plural`` when ``number`` != 1) in ``domain``.

        Falls back from a regional language (``de_CH``) to its base (``de``) and
        finally to the untranslated message id.
        """
        use_plural = plural is not None and number != 1

        for candidate in self._candidates(language):
            entry = self._catalogs.get(candidate, {}).get(domain, {}).get(singular)
            if entry is None:
                continue
            if isinstance(entry, str):
                return entry
            if entry:
                forms = list(entry)
                return forms[1] if use_plural and len(forms) > 1 else forms[0]

        return plural if use_plural else singular
