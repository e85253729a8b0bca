"""Page layout — wraps a rendered client into a complete HTML document."""

from storefront.templates.helpers import enc_attr


class StandardPageTemplate:
    name = "common/page-standard"

    @staticmethod
    def render(view) -> str:
        language = enc_attr(view.context.locale.language)
        return (
            "<!DOCTYPE html>\n"
            f'<html lang="{language}">\n'
            f'<head><meta charset="utf-8">{view.get("page_header", "")}</head>\n'
            f'<body>{view.get("page_body", "")}</body>\n'
            "</html>\n"
        )
