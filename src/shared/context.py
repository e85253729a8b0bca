"""Request/job context passed explicitly to jobs and HTML clients.

The context is immutable: per-request variations (recipient language, logged
in customer) are derived copies made with ``with_locale`` and ``with_user``.

Entry points that take no arguments (command handlers, HTTP routes) obtain the
process context through ``get_context()``.
"""

from dataclasses import dataclass, field, replace

from notifications.channel import get_mailer
from notifications.channel.email_port import MailPort
from shared.config import Config
from shared.i18n import Translator


@dataclass(frozen=True)
class Locale:
    site: str = "default"
    language: str = "en"
    currency: str = "EUR"


@dataclass(frozen=True)
class Context:
    config: Config
    mailer: MailPort
    translator: Translator = field(default_factory=Translator)
    locale: Locale = field(default_factory=Locale)
    user_id: str | None = None

    @classmethod
    def default(cls, config: Config | None = None) -> "Context":
        """Build the process context from configuration."""
        config = config or Config.load()
        return cls(
            config=config,
            mailer=get_mailer(config.get("notifications/mail/adapter", "fake")),
            translator=Translator.from_config(config),
            locale=Locale(
                site=config.get("locale/site", "default"),
                language=config.get("locale/language", "en"),
                currency=config.get("locale/currency", "EUR"),
            ),
        )

    def translate(self, domain: str, singular: str, plural: str | None = None, number: int = 1) -> str:
        return self.translator.translate(self.locale.language, domain, singular, plural, number)

    def with_locale(self, **changes) -> "Context":
        return replace(self, locale=replace(self.locale, **changes))

    def with_user(self, user_id: str | None) -> "Context":
        return replace(self, user_id=user_id)


_context: Context | None = None


def get_context() -> Context:
    """Return the process context, building it from configuration on first use."""
    global _context
    if _context is None:
        _context = Context.default()
    return _context


def set_context(context: Context) -> None:
    global _context
    _context = context


def reset_context() -> None:
    """Forget the process context (useful for testing)."""
    global _context
    _context = None
