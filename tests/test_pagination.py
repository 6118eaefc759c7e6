"""Tests for page-count math and the storefront pager."""

import unittest

from backend.listing.codec import PRODUCT_LISTING
from backend.listing.pagination import build_pagination, page_bounds, page_window, total_pages
from models import ProductFilters


class TestPageMath(unittest.TestCase):
    def test_total_pages(self) -> None:
        self.assertEqual(total_pages(0, 12), 1)
        self.assertEqual(total_pages(12, 12), 1)
        self.assertEqual(total_pages(13, 12), 2)
        self.assertEqual(total_pages(25, 10), 3)

    def test_page_bounds(self) -> None:
        self.assertEqual(page_bounds(1, 12), (0, 12))
        self.assertEqual(page_bounds(3, 12), (24, 12))
        self.assertEqual(page_bounds(0, 10), (0, 10))


class TestPageWindow(unittest.TestCase):
    def test_single_page(self) -> None:
        self.assertEqual(page_window(1, 1), [1])

    def test_short_listing_shows_every_page(self) -> None:
        self.assertEqual(page_window(2, 3), [1, 2, 3])
        self.assertEqual(page_window(3, 5), [1, 2, 3, 4, 5])

    def test_ellipsis_on_both_sides(self) -> None:
        self.assertEqual(page_window(5, 9), [1, None, 4, 5, 6, None, 9])

    def test_ellipsis_at_the_end_only(self) -> None:
        self.assertEqual(page_window(1, 6), [1, 2, None, 6])


class TestBuildPagination(unittest.TestCase):
    def test_middle_page(self) -> None:
        filters = ProductFilters(category="laminas", page=2)

        pagination = build_pagination(filters, PRODUCT_LISTING, 30, 12, items_on_page=12)

        self.assertEqual(pagination.total_pages, 3)
        self.assertEqual(pagination.first_item, 13)
        self.assertEqual(pagination.last_item, 24)
        self.assertEqual(pagination.previous_url, "/mundo-grimmiz/categoria/laminas")
        self.assertEqual(pagination.next_url, "/mundo-grimmiz/categoria/laminas/pagina/3")
        self.assertEqual([link.number for link in pagination.pages], [1, 2, 3])
        self.assertEqual([link.current for link in pagination.pages], [False, True, False])

    def test_ellipsis_links_have_no_url(self) -> None:
        pagination = build_pagination(ProductFilters(page=5), PRODUCT_LISTING, 100, 10, items_on_page=10)

        gaps = [link for link in pagination.pages if link.number is None]
        self.assertEqual(len(gaps), 2)
        self.assertTrue(all(link.url is None for link in gaps))

    def test_empty_listing(self) -> None:
        pagination = build_pagination(ProductFilters(), PRODUCT_LISTING, 0, 12, items_on_page=0)

        self.assertEqual(pagination.total_pages, 1)
        self.assertEqual(pagination.first_item, 0)
        self.assertEqual(pagination.last_item, 0)
        self.assertIsNone(pagination.previous_url)
        self.assertIsNone(pagination.next_url)


if __name__ == "__main__":
    unittest.main()
