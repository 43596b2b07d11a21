"""Tests for navigation shell and display helpers"""
import pytest

from storefront.core.formatting import format_inr
from storefront.core.navigation import NAV_ENTRIES, build_header, build_nav, is_active
from storefront.database.catalog import COMPANY


@pytest.mark.parametrize("path,target,expected", [
    ("/parts", "/parts", True),
    ("/parts/p2", "/parts", True),
    ("/training/t1", "/training", True),
    ("/", "/parts", False),
    ("/cart", "/contact", False),
])
def test_is_active(path, target, expected):
    assert is_active(path, target) is expected


def test_build_nav_marks_current_section():
    nav = build_nav("/parts/p1")

    assert [link.path for link in nav] == [entry.path for entry in NAV_ENTRIES]
    assert [link.label for link in nav if link.active] == ["Parts & Tools"]


def test_home_highlights_nothing():
    assert not any(link.active for link in build_nav("/"))


def test_header_badge():
    assert build_header("/", 0, COMPANY).show_badge is False

    header = build_header("/cart", 3, COMPANY)
    assert header.show_badge is True
    assert header.cart_count == 3
    assert header.company.phone == "+91 98765 43210"


@pytest.mark.parametrize("amount,expected", [
    (0, "₹0"),
    (950, "₹950"),
    (1450, "₹1,450"),
    (24500, "₹24,500"),
    (73500, "₹73,500"),
    (123456, "₹1,23,456"),
    (12345678, "₹1,23,45,678"),
    (-6500, "-₹6,500"),
])
def test_format_inr(amount, expected):
    assert format_inr(amount) == expected
