def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_root_info(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Dynamic Form Creator API", "status": "ok"}


def test_forms_router_mounted(client):
    response = client.get("/api/forms")
    assert response.status_code == 200


def test_method_not_allowed_on_forms_collection(client):
    response = client.patch("/api/forms", json={})
    assert response.status_code == 405


def test_method_not_allowed_on_submit(client):
    response = client.get("/api/submit")
    assert response.status_code == 405


def test_cors_is_open(client):
    response = client.get("/health", headers={"Origin": "http://example.com"})
    assert response.headers["access-control-allow-origin"] == "*"


def test_cors_preflight(client):
    response = client.options(
        "/api/forms",
        headers={
            "Origin": "http://example.com",
            "Access-Control-Request-Method": "POST",
        },
    )
    assert response.status_code == 200
