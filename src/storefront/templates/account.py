"""Templates of the customer account sections."""

from storefront.templates.helpers import enc_attr, enc_html, error_list, pagination


class FavoriteHeaderTemplate:
    name = "account/favorite/header-standard"

    @staticmethod
    def render(view) -> str:
        return '<meta name="robots" content="noindex">'


class FavoriteBodyTemplate:
    name = "account/favorite/body-standard"

    @staticmethod
    def render(view) -> str:
        action = enc_attr(view.link("account/favorite"))
        items = []

        for product in view.get("favorite_items", []):
            href = view.link("catalog/detail", {"d_name": product.url_name, "d_prodid": str(product.id)})
            items.append(
                '<li class="favorite-item">'
                f'<a class="product" href="{enc_attr(href)}">{enc_html(product.label)}</a>'
                f'<span class="price">{enc_html(view.number(product.price))}</span>'
                f'<form method="POST" action="{action}">'
                '<input type="hidden" name="fav_action" value="delete">'
                f'<input type="hidden" name="fav_id" value="{enc_attr(product.id)}">'
                f'<button type="submit">{enc_html(view.translate("client", "Remove"))}</button>'
                "</form>"
                "</li>"
            )

        if items:
            content = f'<ul class="favorite-items">{"".join(items)}</ul>'
        else:
            content = f'<p class="empty">{enc_html(view.translate("client", "No favorite products yet"))}</p>'

        return (
            '<section class="account-favorite">'
            f'<h2 class="header">{enc_html(view.translate("client", "Favorite products"))}</h2>'
            f"{error_list(view, 'favorite_errors')}"
            f"{content}"
            f"{pagination(view, 'favorite', 'fav_page', 'account/favorite')}"
            "</section>"
        )


class ReviewHeaderTemplate:
    name = "account/review/header-standard"

    @staticmethod
    def render(view) -> str:
        return '<meta name="robots" content="noindex">'


class ReviewBodyTemplate:
    name = "account/review/body-standard"

    @staticmethod
    def render(view) -> str:
        products = view.get("review_products", {})
        items = []

        for review in view.get("review_items", []):
            product = products.get(str(review.product_id))
            label = product.label if product else str(review.product_id)
            items.append(
                f'<li class="review-item review-{enc_attr(review.status.lower())}">'
                f'<span class="product">{enc_html(label)}</span>'
                f'<span class="rating">{review.rating} / 5</span>'
                f'<p class="comment">{enc_html(review.comment)}</p>'
                "</li>"
            )

        if items:
            content = f'<ul class="review-items">{"".join(items)}</ul>'
        else:
            content = f'<p class="empty">{enc_html(view.translate("client", "No reviews yet"))}</p>'

        return (
            '<section class="account-review">'
            f'<h2 class="header">{enc_html(view.translate("client", "Your reviews"))}</h2>'
            f"{error_list(view, 'review_errors')}"
            f"{content}"
            f'<form method="POST" action="{enc_attr(view.link("account/review"))}">'
            '<input type="text" name="review_product">'
            '<input type="number" name="review_rating" min="0" max="5">'
            '<textarea name="review_comment"></textarea>'
            f'<button type="submit">{enc_html(view.translate("client", "Submit review"))}</button>'
            "</form>"
            f"{pagination(view, 'review', 'review_page', 'account/review')}"
            "</section>"
        )
