"""FastAPI routes for the storefront — HTML pages rendered by clients.

The logged-in customer is taken from the ``X-Customer-Id`` header set by the
authenticating proxy.
"""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from shared.context import get_context
from storefront.api.schemas import FavoriteActionRequest, ReviewRequest
from storefront.clients import create_client, render
from storefront.view import View

router = APIRouter(tags=["storefront"])


def _request_view(request: Request, extra: dict | None = None, method: str = "GET") -> View:
    context = get_context().with_user(request.headers.get("X-Customer-Id"))
    params = {key: value for key, value in request.query_params.items()}
    return View(context=context, params={**params, **(extra or {})}, method=method)


def _page(path: str, view: View) -> HTMLResponse:
    page = render(create_client(view.context, path), view)
    layout = view.config("client/html/common/template-page", "common/page-standard")
    html = page.view.with_values(page_header=page.header, page_body=page.body).render(layout)
    return HTMLResponse(content=html)


@router.get("/account/favorite", response_class=HTMLResponse)
async def favorite_page(request: Request):
    return _page("account/favorite", _request_view(request))


@router.post("/account/favorite", response_class=HTMLResponse)
async def update_favorites(request: Request, body: FavoriteActionRequest):
    return _page("account/favorite", _request_view(request, body.model_dump(), method="POST"))


@router.get("/account/review", response_class=HTMLResponse)
async def review_page(request: Request):
    return _page("account/review", _request_view(request))


@router.post("/account/review", response_class=HTMLResponse)
async def submit_review(request: Request, body: ReviewRequest):
    return _page("account/review", _request_view(request, body.model_dump(), method="POST"))


@router.get("/catalog/navigator", response_class=HTMLResponse)
async def catalog_navigator(request: Request):
    return _page("catalog/stage/navigator", _request_view(request))
