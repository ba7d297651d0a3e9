"""Tests for routes/actuator.py – health and discovery endpoints."""


def test_health_is_up(client):
    rv = client.get("/actuator/health")
    assert rv.status_code == 200
    assert rv.get_json() == {"status": "UP"}


def test_index_lists_links(client):
    rv = client.get("/actuator")
    assert rv.status_code == 200
    links = rv.get_json()["_links"]
    assert links["self"] == {"href": "http://localhost/actuator", "templated": False}
    assert links["health"] == {
        "href": "http://localhost/actuator/health",
        "templated": False,
    }
    assert links["health-path"] == {
        "href": "http://localhost/actuator/health/{*path}",
        "templated": True,
    }


def test_index_uses_request_host(client):
    rv = client.get("/actuator", base_url="http://example.com:9000")
    links = rv.get_json()["_links"]
    assert links["health"]["href"] == "http://example.com:9000/actuator/health"


def test_health_rejects_delete(client):
    rv = client.delete("/actuator/health")
    assert rv.status_code == 405


def test_component_health_ping(client):
    rv = client.get("/actuator/health/ping")
    assert rv.status_code == 200
    assert rv.get_json() == {"status": "UP"}


def test_component_health_unknown(client):
    rv = client.get("/actuator/health/db")
    assert rv.status_code == 404
    assert "db" in rv.get_json()["message"]
