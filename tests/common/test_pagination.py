from __future__ import annotations

import pytest

from user_registry.common.pagination import Page, PageRequest, Sort
from user_registry.core.exceptions import ValidationError

SORTABLE = ("id", "firstname", "email")


def test_defaults_when_no_args():
    request = PageRequest.from_args({}, sortable=SORTABLE)
    assert request == PageRequest(page=0, size=20, sort=Sort("id", False))
    assert request.offset == 0


def test_size_is_capped():
    request = PageRequest.from_args({"page": "2", "size": "5000"}, sortable=SORTABLE, max_size=1000)
    assert request.size == 1000
    assert request.offset == 2000


@pytest.mark.parametrize(
    "args",
    [
        {"page": "-1"},
        {"size": "0"},
        {"page": "abc"},
        {"sort": "password"},
        {"sort": "email,sideways"},
        {"page": "100000000000000000000"},
    ],
)
def test_invalid_paging_args_are_rejected(args):
    with pytest.raises(ValidationError):
        PageRequest.from_args(args, sortable=SORTABLE)


def test_sort_parse_direction():
    assert Sort.parse("email,desc", SORTABLE) == Sort("email", True)
    assert Sort.parse("firstname", SORTABLE) == Sort("firstname", False)
    assert str(Sort("email", True)) == "email,desc"


def test_page_totals_and_neighbours():
    page = Page(content=["a", "b"], request=PageRequest(page=1, size=2), total_elements=5)
    assert page.total_pages == 3
    assert page.has_previous
    assert page.has_next

    last = Page(content=["e"], request=PageRequest(page=2, size=2), total_elements=5)
    assert not last.has_next


def test_empty_page():
    page = Page(content=[], request=PageRequest(), total_elements=0)
    assert page.total_pages == 0
    assert page.is_empty()
    assert not page.has_next
    assert not page.has_previous


def test_largest_offset_that_fits_is_accepted():
    request = PageRequest.from_args({"page": str((2**63 - 1) // 20), "size": "20"}, sortable=SORTABLE)
    assert request.offset <= 2**63 - 1
