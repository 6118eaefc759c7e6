import math

from models import ListFilters, PageLink, Pagination

from .codec import ListingCodec


def total_pages(count: int, page_size: int) -> int:
    """Number of pages for `count` items; an empty listing still has one page."""
    if count <= 0 or page_size <= 0:
        return 1
    return math.ceil(count / page_size)


def page_bounds(page: int, page_size: int) -> tuple[int, int]:
    """(offset, limit) for a 1-based page."""
    return (max(page, 1) - 1) * page_size, page_size


def page_window(current: int, total: int) -> list[int | None]:
    """
    Page numbers shown in the storefront pager.

    Always the first and last page plus the neighbours of the current one.
    A gap right next to that window is shown as a single None (an ellipsis);
    pages further away are dropped.

        page_window(5, 9) -> [1, None, 4, 5, 6, None, 9]
    """
    window: list[int | None] = []
    for number in range(1, total + 1):
        if number in (1, total) or current - 1 <= number <= current + 1:
            window.append(number)
        elif number in (current - 2, current + 2):
            window.append(None)
    return window


def build_pagination(
    filters: ListFilters,
    codec: ListingCodec,
    total_items: int,
    page_size: int,
    *,
    items_on_page: int,
) -> Pagination:
    pages = total_pages(total_items, page_size)
    current = filters.page
    offset, _ = page_bounds(current, page_size)

    links = [
        PageLink(number=None)
        if number is None
        else PageLink(
            number=number,
            url=codec.page_url(filters, number),
            current=number == current,
        )
        for number in page_window(current, pages)
    ]

    return Pagination(
        current_page=current,
        total_pages=pages,
        total_items=total_items,
        page_size=page_size,
        first_item=offset + 1 if items_on_page else 0,
        last_item=min(offset + items_on_page, total_items),
        previous_url=codec.page_url(filters, current - 1) if current > 1 else None,
        next_url=codec.page_url(filters, current + 1) if current < pages else None,
        pages=links,
    )
