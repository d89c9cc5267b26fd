from rest_framework.request import Request
from rest_framework.test import APIRequestFactory

from pager.pagination import CrumbPageNumberPagination


def paginate(url, items, page_size=10):
    request = Request(APIRequestFactory().get(url))
    paginator = CrumbPageNumberPagination()
    paginator.page_size = page_size
    page = paginator.paginate_queryset(items, request)
    return paginator.get_paginated_response(list(page)).data


def test_crumbs_in_paginated_response():
    data = paginate("/items/?page=2&q=x", list(range(45)))
    assert data["count"] == 45
    assert data["page_count"] == 5
    assert data["results"] == list(range(10, 20))
    crumbs = [c for c in data["crumbs"] if c["is_crumb"]]
    assert [c["page_number"] for c in crumbs] == [1, 2, 3, 4, 5]
    assert crumbs[0]["href"] == "/items/?q=x&page=1"
    assert data["next"] == "http://testserver/items/?page=3&q=x"


def test_single_page_has_no_crumbs():
    data = paginate("/items/", list(range(3)))
    assert data["page_count"] == 1
    assert data["crumbs"] == []
