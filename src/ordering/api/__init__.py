"""Ordering domain API package."""

from ordering.api.routes import job_router, order_router

__all__ = ["job_router", "order_router"]
