"""Templates of the catalog sections."""

from storefront.templates.helpers import enc_attr, enc_html


def _product_link(view, product, position):
    params = {
        "d_name": product.url_name,
        "d_prodid": str(product.id),
        "d_pos": position,
        "f_sort": view.get("navigator_sort"),
    }
    return view.link("catalog/detail", params)


class NavigatorHeaderTemplate:
    name = "catalog/stage/navigator/header-standard"

    @staticmethod
    def render(view) -> str:
        links = []
        if view.get("navigator_prev"):
            href = _product_link(view, view.get("navigator_prev"), view.get("navigator_position") - 1)
            links.append(f'<link rel="prev" href="{enc_attr(href)}">')
        if view.get("navigator_next"):
            href = _product_link(view, view.get("navigator_next"), view.get("navigator_position") + 1)
            links.append(f'<link rel="next" href="{enc_attr(href)}">')
        return "".join(links)


class NavigatorBodyTemplate:
    name = "catalog/stage/navigator/body-standard"

    @staticmethod
    def render(view) -> str:
        prev_product = view.get("navigator_prev")
        next_product = view.get("navigator_next")
        if not (prev_product or next_product):
            return ""

        position = view.get("navigator_position")
        links = []
        if prev_product:
            href = _product_link(view, prev_product, position - 1)
            links.append(
                f'<a class="prev" href="{enc_attr(href)}" rel="prev">'
                f"{enc_html(view.translate('client', 'Previous'))}</a>"
            )
        if next_product:
            href = _product_link(view, next_product, position + 1)
            links.append(
                f'<a class="next" href="{enc_attr(href)}" rel="next">'
                f"{enc_html(view.translate('client', 'Next'))}</a>"
            )

        return f'<div class="catalog-stage-navigator">{"".join(links)}</div>'
