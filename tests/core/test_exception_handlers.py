"""Tests for winning/core/exception_handlers.py - Error envelope."""

import logging

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel

from winning.core.exception_handlers import register_exception_handlers
from winning.core.exceptions import ConflictError, PersistenceError


class Payload(BaseModel):
    name: str
    count: int


@pytest.fixture(name="error_client")
def error_client_fixture() -> TestClient:
    app = FastAPI()

    @app.get("/conflict")
    def conflict():
        raise ConflictError("Already there")

    @app.get("/storage")
    def storage():
        raise PersistenceError()

    @app.get("/boom")
    def boom():
        raise RuntimeError("kaboom")

    @app.post("/payload")
    def payload(body: Payload):
        return body

    register_exception_handlers(app)
    return TestClient(app, raise_server_exceptions=False)


def test_domain_error_envelope(error_client: TestClient):
    response = error_client.get("/conflict")

    assert response.status_code == 409
    assert response.json() == {"type": "conflict", "message": "Already there"}


def test_server_side_domain_error_logs_error(error_client: TestClient, caplog):
    caplog.set_level(logging.INFO, logger="winning.exception")

    response = error_client.get("/storage")

    assert response.status_code == 500
    assert response.json()["type"] == "persistence_error"
    (record,) = [r for r in caplog.records if r.name == "winning.exception"]
    assert record.levelno == logging.ERROR
    assert record.error_type == "persistence_error"


def test_unknown_route_is_not_found(error_client: TestClient):
    response = error_client.get("/nowhere")

    assert response.status_code == 404
    assert response.json()["type"] == "not_found"


def test_wrong_method(error_client: TestClient):
    response = error_client.delete("/conflict")

    assert response.status_code == 405
    assert response.json()["type"] == "method_not_allowed"


def test_validation_errors_name_fields(error_client: TestClient):
    response = error_client.post("/payload", json={"count": "many"})

    assert response.status_code == 422
    body = response.json()
    assert body["type"] == "validation_error"
    assert "name: Field required" in body["message"]
    assert "count: " in body["message"]
    assert "; " in body["message"]


def test_unhandled_error_hides_details(error_client: TestClient, caplog):
    caplog.set_level(logging.INFO, logger="winning.exception")

    response = error_client.get("/boom")

    assert response.status_code == 500
    assert response.json() == {
        "type": "internal_error",
        "message": "An unexpected error occurred",
    }
    record = [r for r in caplog.records if r.name == "winning.exception"][-1]
    assert record.exc_info is not None
