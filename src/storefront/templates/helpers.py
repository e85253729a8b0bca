"""Escaping and markup helpers shared by the templates."""

from html import escape


def enc_html(value) -> str:
    return escape("" if value is None else str(value), quote=False)


def enc_attr(value) -> str:
    return escape("" if value is None else str(value), quote=True)


def error_list(view, key: str) -> str:
    errors = view.errors(key)
    if not errors:
        return ""
    items = "".join(f'<li class="error-item">{enc_html(error)}</li>' for error in errors)
    return f'<ul class="error-list">{items}</ul>'


def pagination(view, prefix: str, page_param: str, path: str, extra: dict | None = None) -> str:
    """Previous/next page links for the values ``<prefix>_page_*``."""
    current = view.get(f"{prefix}_page_curr", 1)
    last = view.get(f"{prefix}_page_last", 1)
    if last <= 1:
        return ""

    def page_link(page, label, css):
        href = view.link(path, {**(extra or {}), page_param: page})
        return f'<a class="{css}" href="{enc_attr(href)}">{enc_html(label)}</a>'

    links = []
    if current > 1:
        links.append(page_link(view.get(f"{prefix}_page_prev"), view.translate("client", "Previous"), "prev"))
    links.append(f'<span class="current">{current} / {last}</span>')
    if current < last:
        links.append(page_link(view.get(f"{prefix}_page_next"), view.translate("client", "Next"), "next"))

    return f'<nav class="pagination">{"".join(links)}</nav>'
