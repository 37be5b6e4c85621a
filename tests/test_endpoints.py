"""
Tests for URL composition and query-string building.
"""

from pixela.api.endpoints import PixelaEndpoints, build_query

BASE = "https://pixe.la/v1/users/alice"


def make_endpoints(base_url="https://pixe.la"):
    return PixelaEndpoints(base_url, "v1", "alice")


def test_user_urls():
    endpoints = make_endpoints()

    assert endpoints.users() == "https://pixe.la/v1/users"
    assert endpoints.user() == BASE


def test_graph_urls():
    endpoints = make_endpoints()

    assert endpoints.graphs() == f"{BASE}/graphs"
    assert endpoints.graph("reading") == f"{BASE}/graphs/reading"
    assert endpoints.graph_detail("reading", "pixels") == f"{BASE}/graphs/reading/pixels"
    assert endpoints.graph_detail("reading", "increment") == f"{BASE}/graphs/reading/increment"
    assert endpoints.graph_detail("reading", "20240131") == f"{BASE}/graphs/reading/20240131"


def test_webhook_urls():
    endpoints = make_endpoints()

    assert endpoints.webhooks() == f"{BASE}/webhooks"
    assert endpoints.webhook("abc123") == f"{BASE}/webhooks/abc123"


def test_trailing_slash_on_base_url_is_dropped():
    assert make_endpoints("https://pixe.la/").user() == BASE


def test_urls_are_deterministic():
    first = make_endpoints().graph_detail("reading", "20240101")
    second = make_endpoints().graph_detail("reading", "20240101")

    assert first == second


def test_build_query_without_defined_values_returns_url():
    url = f"{BASE}/graphs/reading"

    assert build_query(url, {}) == url
    assert build_query(url, {"date": None, "mode": None}) == url


def test_build_query_keeps_declaration_order():
    url = f"{BASE}/graphs/reading"

    assert build_query(url, {"date": "20240101", "mode": "short"}) == f"{url}?date=20240101&mode=short"
    assert build_query(url, {"mode": "short", "date": "20240101"}) == f"{url}?mode=short&date=20240101"


def test_build_query_skips_only_undefined_values():
    url = f"{BASE}/graphs/reading/pixels"

    assert build_query(url, {"from": None, "to": "20240131"}) == f"{url}?to=20240131"
    assert build_query(url, {"from": "20240101", "to": None}) == f"{url}?from=20240101"


def test_build_query_does_not_escape_values():
    # Reserved characters are passed through as-is
    url = build_query(f"{BASE}/graphs/reading", {"mode": "a&b=c", "date": "2024 01"})

    assert url == f"{BASE}/graphs/reading?mode=a&b=c&date=2024 01"
