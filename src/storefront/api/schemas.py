"""Pydantic request schemas for the storefront pages."""

from typing import Literal

from pydantic import BaseModel, Field


class FavoriteActionRequest(BaseModel):
    fav_action: Literal["add", "delete"]
    fav_id: list[str] = Field(min_length=1)


class ReviewRequest(BaseModel):
    review_product: str
    review_rating: int
    review_comment: str | None = None
