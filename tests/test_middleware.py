from fastapi import status
from fastapi.testclient import TestClient

from portfolio.api.main import allowed_origins, create_app
from portfolio.config import config


def test_allowed_origins_default(monkeypatch):
    monkeypatch.delenv("ALLOWED_ORIGINS", raising=False)
    assert allowed_origins() == config.get("cors", "allowed_origins")


def test_allowed_origins_env_override(monkeypatch):
    monkeypatch.setenv("ALLOWED_ORIGINS", " https://a.example , https://b.example,,")
    assert allowed_origins() == ["https://a.example", "https://b.example"]


def test_cors_headers_for_configured_origin(monkeypatch):
    """설정된 Origin에 대해서만 CORS 헤더 반환"""
    monkeypatch.setenv("ALLOWED_ORIGINS", "http://localhost:8080")
    with TestClient(create_app()) as client:
        allowed = client.get("/api/projects", headers={"Origin": "http://localhost:8080"})
        blocked = client.get("/api/projects", headers={"Origin": "http://evil.example"})

    assert allowed.headers["access-control-allow-origin"] == "http://localhost:8080"
    assert "access-control-allow-origin" not in blocked.headers


def test_https_redirect_in_production(monkeypatch):
    """프로덕션 환경에서 HTTP 요청은 HTTPS로 리다이렉트"""
    app = create_app()
    monkeypatch.setenv("APP_ENV", "production")
    with TestClient(app) as client:
        redirected = client.get("/api/projects", follow_redirects=False)
        forwarded = client.get(
            "/api/projects", headers={"x-forwarded-proto": "https"}, follow_redirects=False
        )

    assert redirected.status_code == status.HTTP_301_MOVED_PERMANENTLY
    assert redirected.headers["location"].startswith("https://")
    assert redirected.headers["location"].endswith("/api/projects")
    assert forwarded.status_code == status.HTTP_200_OK


def test_no_redirect_outside_production(client):
    response = client.get("/api/projects", follow_redirects=False)
    assert response.status_code == status.HTTP_200_OK


def test_gzip_threshold(client):
    """1000바이트 이상 응답만 gzip 압축"""
    large = client.get("/static/js/main.js", headers={"Accept-Encoding": "gzip"})
    small = client.get("/health", headers={"Accept-Encoding": "gzip"})

    assert large.headers.get("content-encoding") == "gzip"
    assert "/api/projects" in large.text
    assert "content-encoding" not in small.headers


def test_startup_banner(caplog):
    with caplog.at_level("INFO", logger="portfolio"):
        with TestClient(create_app()):
            pass

    host = config.get("server", "host")
    port = config.get("server", "port")
    assert "Portfolio application started" in caplog.text
    assert f"Open browser at: http://{host}:{port}" in caplog.text
    assert f"API endpoint: http://{host}:{port}/api/projects" in caplog.text


def test_request_logging(client, caplog):
    with caplog.at_level("INFO", logger="portfolio"):
        client.get("/health")

    assert "Request: GET http://testserver/health" in caplog.text
    assert "Response: 200" in caplog.text
