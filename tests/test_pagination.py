"""
Tests for page/per_page parsing
"""

import pytest
from fastapi import HTTPException

from fixup.core.pagination import MSG_INVALID_PAGE, MSG_INVALID_PER_PAGE, parse_limit_and_offset

MAX_PER_PAGE = 50
DEFAULT_PER_PAGE = 10


def parse(page, per_page=None):
    return parse_limit_and_offset(page, per_page, MAX_PER_PAGE, DEFAULT_PER_PAGE)


def test_first_page_with_default_per_page():
    assert parse("1") == (DEFAULT_PER_PAGE, 0)


def test_offset_grows_with_page():
    assert parse("3", "20") == (20, 40)


@pytest.mark.parametrize("per_page", ["0", "51", ""])
def test_per_page_falls_back_to_default(per_page):
    assert parse("2", per_page) == (DEFAULT_PER_PAGE, DEFAULT_PER_PAGE)


@pytest.mark.parametrize("page", [None, "", "abc", "0", "-1"])
def test_invalid_page(page):
    with pytest.raises(HTTPException) as exc:
        parse(page, "5")
    assert exc.value.status_code == 400
    assert exc.value.detail == MSG_INVALID_PAGE


@pytest.mark.parametrize("per_page", ["-1", "ten"])
def test_invalid_per_page(per_page):
    with pytest.raises(HTTPException) as exc:
        parse("1", per_page)
    assert exc.value.status_code == 400
    assert exc.value.detail == MSG_INVALID_PER_PAGE


@pytest.mark.parametrize("page", ["1_0", " 2", "2 ", "٣", "100000000000000000000", "9223372036854775808"])
def test_page_must_be_plain_int64(page):
    with pytest.raises(HTTPException) as exc:
        parse(page)
    assert exc.value.status_code == 400
    assert exc.value.detail == MSG_INVALID_PAGE


@pytest.mark.parametrize("per_page", ["1_0", " 5", "٥", "99999999999999999999"])
def test_per_page_must_be_plain_int64(per_page):
    with pytest.raises(HTTPException) as exc:
        parse("1", per_page)
    assert exc.value.detail == MSG_INVALID_PER_PAGE


def test_signed_page_is_accepted():
    assert parse("+2", "5") == (5, 5)


def test_offset_beyond_int64():
    with pytest.raises(HTTPException) as exc:
        parse("9223372036854775807", "20")
    assert exc.value.detail == MSG_INVALID_PAGE


def test_largest_page_with_single_item_pages():
    assert parse("9223372036854775807", "1") == (1, 9223372036854775806)
