"""
Lazy pagination over the Jobo API.

One loop drives every paged endpoint: fetch a page, yield its items,
then ask a step function for the next request (or None to stop).
Cursor-based endpoints (feed, expired IDs) and page-number endpoints
(search) only differ in that step function.

The iterators are async generators: single-pass, one fetch in flight,
items yielded in server order. Stopping consumption (``break``,
``aclose()``, task cancellation) stops further fetches.
"""

from __future__ import annotations

import logging
from typing import (
    Any,
    AsyncIterator,
    Awaitable,
    Callable,
    Optional,
    Protocol,
    Sequence,
    TypeVar,
)

from pydantic import BaseModel

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R", bound=BaseModel)


class CursorPage(Protocol):
    """A page from a cursor-paginated endpoint."""

    @property
    def items(self) -> Sequence[Any]: ...

    next_cursor: Optional[str]
    has_more: bool


class PagedResult(Protocol):
    """A page from a page-number-paginated endpoint."""

    @property
    def items(self) -> Sequence[Any]: ...

    total_items: int
    page: int
    page_size: int
    total_pages: int


def _page_items(page: Any) -> Sequence[Any]:
    return page.items


async def paginate(
    fetch: Callable[[R], Awaitable[Any]],
    request: R,
    next_request: Callable[[R, Any], Optional[R]],
    items: Callable[[Any], Sequence[T]] = _page_items,
) -> AsyncIterator[T]:
    """
    Generic pagination loop.

    Args:
        fetch: Coroutine function issuing one request and returning a page
        request: First request to send
        next_request: Given the request just sent and its page, returns the
            next request, or None once the server signals the end
        items: Extracts the ordered items from a page

    Yields:
        Items of every page, in order
    """
    current: Optional[R] = request
    while current is not None:
        page = await fetch(current)
        page_items = items(page)
        logger.debug("Fetched page with %d items", len(page_items))
        for item in page_items:
            yield item
        current = next_request(current, page)


def next_cursor_request(request: R, page: CursorPage) -> Optional[R]:
    """Step function for cursor pagination."""
    if not page.has_more:
        return None
    if page.next_cursor is None:
        # has_more without a cursor would restart from the first page forever
        logger.warning("Server reported has_more without a next_cursor; stopping pagination")
        return None
    return request.model_copy(update={"cursor": page.next_cursor})


def next_page_request(request: R, page: PagedResult) -> Optional[R]:
    """Step function for page-number pagination."""
    current = request.page
    if current >= page.total_pages:
        return None
    return request.model_copy(update={"page": current + 1})


def iter_cursor(
    fetch: Callable[[R], Awaitable[CursorPage]],
    request: R,
    items: Callable[[Any], Sequence[T]] = _page_items,
) -> AsyncIterator[T]:
    """Iterate a cursor-paginated endpoint, starting without a cursor."""
    first = request.model_copy(update={"cursor": None})
    return paginate(fetch, first, next_cursor_request, items)


def iter_pages(
    fetch: Callable[[R], Awaitable[PagedResult]],
    request: R,
    items: Callable[[Any], Sequence[T]] = _page_items,
) -> AsyncIterator[T]:
    """Iterate a page-number-paginated endpoint, starting at page 1."""
    first = request.model_copy(update={"page": 1})
    return paginate(fetch, first, next_page_request, items)
