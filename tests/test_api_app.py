"""Health endpoint and CORS behaviour."""

import logging
import runpy

import httpx
import pytest
from fastapi import FastAPI

ORIGIN = "https://proyectotesis.netlify.app"


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}


def test_health_is_independent_of_upstream(offline_client):
    r = offline_client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}


@pytest.mark.parametrize("net", ["yes", "abc", "0", ""])
def test_health_accepts_any_net_value(client, monkeypatch, net):
    async def unreachable(self, url, **kwargs):
        raise httpx.ConnectError("offline")

    monkeypatch.setattr(httpx.AsyncClient, "get", unreachable)
    r = client.get("/health", params={"net": net})
    assert r.status_code == 200
    body = r.json()
    assert body["ok"] is True
    assert ("net" in body) == (net not in ("", "0"))


def test_health_net_probe_reports_errors(client, monkeypatch):
    class BrokenClient:
        def __init__(self, *args, **kwargs):
            pass

        async def __aenter__(self):
            return self

        async def __aexit__(self, *exc):
            return False

        async def get(self, url, **kwargs):
            raise httpx.ConnectError("no route to host")

    monkeypatch.setattr("server.main.httpx.AsyncClient", BrokenClient)
    r = client.get("/health", params={"net": 1})
    assert r.status_code == 200
    body = r.json()
    assert body["ok"] is True
    assert body["net"]["env_key_present"] is False
    assert body["net"]["openai_models"].startswith("error: ConnectError")


@pytest.mark.parametrize("method", ["GET", "POST"])
def test_preflight_from_allowed_origin(client, method):
    r = client.options("/api/hint", headers={
        "Origin": ORIGIN,
        "Access-Control-Request-Method": method,
    })
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == ORIGIN
    assert method in r.headers["access-control-allow-methods"]


def test_preflight_from_other_origin_is_rejected(client):
    r = client.options("/api/hint", headers={
        "Origin": "https://evil.example.com",
        "Access-Control-Request-Method": "POST",
    })
    assert r.status_code == 400
    assert "access-control-allow-origin" not in r.headers


@pytest.mark.parametrize("method", ["PUT", "DELETE"])
def test_preflight_for_other_methods_is_rejected(client, method):
    r = client.options("/api/hint", headers={
        "Origin": ORIGIN,
        "Access-Control-Request-Method": method,
    })
    assert r.status_code == 400


def test_simple_request_gets_cors_header(client, fake_sdk):
    fake_sdk.responses.output_text = "hola"
    r = client.post("/api/hint", json={}, headers={"Origin": ORIGIN})
    assert r.headers["access-control-allow-origin"] == ORIGIN


def test_app_loggers_pass_info():
    assert logging.getLogger("server.main").isEnabledFor(logging.INFO)
    assert logging.getLogger("services.openai_client").isEnabledFor(logging.INFO)


def test_entry_point_serves_the_built_app(monkeypatch):
    served = []
    monkeypatch.setattr("uvicorn.run", lambda app, **kwargs: served.append((app, kwargs)))
    runpy.run_module("server.main", run_name="__main__")

    assert len(served) == 1
    app, kwargs = served[0]
    assert isinstance(app, FastAPI)
    assert set(kwargs) == {"host", "port"}
