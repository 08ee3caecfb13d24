import pytest

from app.graphql.types import PageQueryOptions, PaginateOptions
from app.schemas.pagination import Pagination


def test_defaults():
    pagination = Pagination.resolve()
    assert (pagination.page, pagination.limit, pagination.skip) == (1, 10, 0)


@pytest.mark.parametrize(
    "page,limit,expected_skip",
    [
        (1, 10, 0),
        (2, 5, 5),
        (3, 7, 14),
    ],
)
def test_skip(page, limit, expected_skip):
    assert Pagination.resolve(page=page, limit=limit).skip == expected_skip


def test_zero_means_default():
    pagination = Pagination.resolve(page=0, limit=0)
    assert (pagination.page, pagination.limit) == (1, 10)


def test_negative_values_clamped():
    pagination = Pagination.resolve(page=-3, limit=-1)
    assert (pagination.page, pagination.limit) == (1, 1)


def test_direct_construction_rejects_out_of_range():
    with pytest.raises(ValueError):
        Pagination(page=0, limit=10)


def test_from_graphql_options():
    assert PageQueryOptions.to_pagination(None) == Pagination()
    assert PageQueryOptions.to_pagination(PageQueryOptions()) == Pagination()

    options = PageQueryOptions(paginate=PaginateOptions(limit=25))
    assert PageQueryOptions.to_pagination(options) == Pagination(page=1, limit=25)

    options = PageQueryOptions(paginate=PaginateOptions(page=4, limit=None))
    assert PageQueryOptions.to_pagination(options) == Pagination(page=4, limit=10)
