# SPDX-License-Identifier: Apache-2.0
# Copyright 2024-2026 CAB Ingénierie / Christophe ABOULICAM
"""FastAPI integration for the transform filter.

Usage:
    entries_filter = TransformFilter(actions={"list_entries": "entry", "*": "entry"})

    @app.api_route("/entries", methods=["GET", "HEAD"])
    @transform_action(entries_filter)
    async def list_entries(request: Request):
        return ArrayDataProvider(load_entries(), Pagination(page=1, page_size=20))

The endpoint name is the action id unless one is given explicitly.
"""

import functools
import inspect
from typing import Any, Callable

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from ..errors import MissingRequestParameterError
from ..filters.context import RequestContext
from ..filters.providers import DataProvider
from ..filters.transform_filter import TransformFilter


class StarletteRequestContext(RequestContext):
    """RequestContext over a Starlette/FastAPI request."""

    def __init__(self, request: Request):
        self.request = request

    def get(self, name: str) -> str | None:
        return self.request.query_params.get(name)

    def is_head(self) -> bool:
        return self.request.method == "HEAD"


def pagination_headers(provider: DataProvider) -> dict[str, str]:
    """X-Pagination-* headers for a paginated provider, empty otherwise."""
    pagination = provider.get_pagination()
    if pagination is None:
        return {}
    total = provider.get_total_count()
    return {
        "X-Pagination-Total-Count": str(total),
        "X-Pagination-Page-Count": str(pagination.page_count(total)),
        "X-Pagination-Current-Page": str(pagination.page),
        "X-Pagination-Per-Page": str(pagination.page_size),
    }


def transform_action(
    transform_filter: TransformFilter,
    action_id: str | None = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorate an endpoint so its return value goes through ``transform_filter``.

    The endpoint must accept a ``request`` parameter.
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        signature = inspect.signature(func)
        if "request" not in signature.parameters:
            raise MissingRequestParameterError(
                f"Endpoint '{func.__name__}' needs a 'request: Request' parameter to be transformed"
            )
        action = action_id or func.__name__

        def finish(result: Any, args: tuple, kwargs: dict) -> Any:
            request = signature.bind_partial(*args, **kwargs).arguments["request"]
            payload = transform_filter.after_action(action, result, StarletteRequestContext(request))
            if isinstance(result, DataProvider) and payload is not result:
                headers = pagination_headers(result)
                if headers:
                    return JSONResponse(content=jsonable_encoder(payload), headers=headers)
            return payload

        if inspect.iscoroutinefunction(func):
            @functools.wraps(func)
            async def async_wrapper(*args, **kwargs):
                result = await func(*args, **kwargs)
                return finish(result, args, kwargs)

            return async_wrapper

        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs):
            result = func(*args, **kwargs)
            return finish(result, args, kwargs)

        return sync_wrapper

    return decorator
