from catalog_api.core.config import Settings


def test_root(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_health(client):
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.json()["status"] == "healthy"


def test_cors_allows_local_dev_origins(client):
    for origin in ("http://localhost:3000", "http://localhost:5173"):
        r = client.options("/api/products", headers={
            "Origin": origin,
            "Access-Control-Request-Method": "GET",
        })
        assert r.status_code == 200
        assert r.headers["access-control-allow-origin"] == origin


def test_cors_rejects_unknown_origin(client):
    r = client.get("/api/categories", headers={"Origin": "http://evil.example"})
    assert "access-control-allow-origin" not in r.headers


def test_cors_origins_list_parsing():
    settings = Settings(CORS_ORIGINS=" http://a.test , http://b.test ,")
    assert settings.cors_origins_list == ["http://a.test", "http://b.test"]


def test_sqlite_detection():
    assert Settings(DATABASE_URL="sqlite:///./x.db").is_sqlite
    assert not Settings(DATABASE_URL="postgresql+psycopg://u:p@localhost/db").is_sqlite
