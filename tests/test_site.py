# File: tests/test_site.py

"""
Non-API surface: the static root page and the health check.
"""


def test_health_endpoint(client):
    resp = client.get("/healthz")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_root_serves_html(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert "swatches" in resp.text


def test_unknown_route_is_404(client):
    resp = client.get("/sad")
    assert resp.status_code == 404


def test_unknown_route_has_error_body(client):
    resp = client.get("/api/v1/swatches")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Not Found"}
