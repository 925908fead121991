"""Tests for page slicing and the stateful paginator."""

import pytest

from catdistribution.catalog.pagination import Paginator, paginate, total_pages_for

from conftest import make_cat


def _cats(n):
    return [make_cat(f"Cat{i}", i % 20) for i in range(n)]


def test_ten_records_page_size_nine():
    cats = _cats(10)
    first = paginate(cats, 9, 1)
    assert first.total_pages == 2
    assert len(first.items) == 9
    second = paginate(cats, 9, 2)
    assert second.page == 2
    assert [c.name for c in second.items] == ["Cat9"]


def test_empty_collection_has_one_page():
    result = paginate([], 9, 3)
    assert result.total_pages == 1
    assert result.page == 1
    assert result.items == []


def test_page_past_end_is_clamped():
    result = paginate(_cats(5), 2, 10)
    assert result.page == 3
    assert [c.name for c in result.items] == ["Cat4"]


@pytest.mark.parametrize("count", [0, 1, 8, 9, 10, 27])
@pytest.mark.parametrize("page", [-3, 0, 1, 2, 5, 100])
def test_page_always_in_range(count, page):
    result = paginate(_cats(count), 9, page)
    assert 1 <= result.page <= result.total_pages
    assert result.total == count


@pytest.mark.parametrize("page_size", [0, -1])
def test_non_positive_page_size_rejected(page_size):
    with pytest.raises(ValueError):
        paginate(_cats(3), page_size, 1)
    with pytest.raises(ValueError):
        Paginator(page_size)


def test_total_pages_for():
    assert total_pages_for(0, 9) == 1
    assert total_pages_for(9, 9) == 1
    assert total_pages_for(10, 9) == 2


class TestPaginator:
    def test_apply_stores_clamped_page(self):
        p = Paginator(3)
        p.change_page(4)
        result = p.apply(_cats(12))
        assert result.page == 4
        # a filter shrinks the collection to one page
        result = p.apply(_cats(2))
        assert result.page == 1
        assert p.current_page == 1

    def test_page_size_change_resets_page(self):
        p = Paginator(3)
        p.change_page(3)
        p.change_page_size(6)
        assert p.page_size == 6
        assert p.current_page == 1

    def test_search_term_change_resets_page(self):
        p = Paginator(3)
        p.change_page(2)
        p.track_search_term("")
        assert p.current_page == 2
        p.track_search_term("tom")
        assert p.current_page == 1
        p.change_page(2)
        p.track_search_term("tom")
        assert p.current_page == 2
