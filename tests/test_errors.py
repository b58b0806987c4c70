"""Tests for translating room errors into HTTP responses."""

import pytest
from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient

from api.errors import register_exception_handlers, status_code_for, to_http_exception
from core.client import ClientHandle
from core.exceptions import (
    CapacityExceeded,
    ClientNotFound,
    CloudRoomException,
    DuplicateClient,
    InvalidName,
    InvalidValue,
    VariableExists,
    VariableNotFound,
)
from core.room import Room


@pytest.mark.parametrize(
    "exc,expected",
    [
        (DuplicateClient(object()), 409),
        (ClientNotFound(object()), 404),
        (InvalidName("x"), 422),
        (InvalidValue(None), 422),
        (VariableExists("☁ a"), 409),
        (VariableNotFound("☁ a"), 404),
        (CapacityExceeded(10), 409),
    ],
)
def test_status_code_for(exc, expected):
    assert status_code_for(exc) == expected


def test_status_code_for_unmapped_error():
    assert status_code_for(CloudRoomException("unexpected")) == 400


def test_to_http_exception():
    http_exc = to_http_exception(VariableNotFound("☁ score"))
    assert isinstance(http_exc, HTTPException)
    assert http_exc.status_code == 404
    assert http_exc.detail["code"] == "VariableNotFound"
    assert "☁ score" in http_exc.detail["message"]


@pytest.fixture
def client():
    app = FastAPI()
    register_exception_handlers(app)
    room = Room()

    @app.post("/vars/{name}")
    def create(name: str, value: str):
        room.create_var(name, value)
        return {"variables": dict(room.get_all_variables())}

    @app.delete("/clients")
    def leave():
        room.remove_client(ClientHandle("ghost"))

    return TestClient(app)


def test_handler_success(client):
    response = client.post("/vars/☁ score", params={"value": "0"})
    assert response.status_code == 200
    assert response.json() == {"variables": {"☁ score": "0"}}


def test_handler_invalid_name(client):
    response = client.post("/vars/score", params={"value": "0"})
    assert response.status_code == 422
    assert response.json()["code"] == "InvalidName"


def test_handler_conflict(client):
    client.post("/vars/☁ score", params={"value": "0"})
    response = client.post("/vars/☁ score", params={"value": "1"})
    assert response.status_code == 409
    assert response.json()["code"] == "VariableExists"


def test_handler_not_found(client):
    response = client.delete("/clients")
    assert response.status_code == 404
    assert response.json()["code"] == "ClientNotFound"
