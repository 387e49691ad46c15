"""
Tagged result and envelope rendering.
"""
import json

import pytest

from common.exceptions import InsufficientStockError, ProductNotFoundError, ProductNotInCartError
from common.response import ErrorKind, Failure, Ok, service_result, to_response


@pytest.mark.parametrize("kind,status", [
    (ErrorKind.BAD_REQUEST, 400),
    (ErrorKind.NOT_FOUND, 404),
    (ErrorKind.INTERNAL, 500),
])
def test_failure_status_follows_kind(kind, status):
    assert Failure(kind, "x").status_code == status


def test_error_taxonomy_loads_without_response_layer(monkeypatch):
    import importlib
    import sys

    import common

    monkeypatch.delitem(sys.modules, "common.exceptions")
    monkeypatch.delitem(sys.modules, "common.response")
    monkeypatch.setattr(common, "exceptions", None, raising=False)
    monkeypatch.setattr(common, "response", None, raising=False)

    fresh = importlib.import_module("common.exceptions")

    assert fresh.ErrorKind.NOT_FOUND.status_code == 404
    assert "common.response" not in sys.modules


def test_business_errors_carry_their_kind():
    assert InsufficientStockError().kind == ErrorKind.BAD_REQUEST
    assert ProductNotInCartError().kind == ErrorKind.BAD_REQUEST
    assert ProductNotFoundError("A1").kind == ErrorKind.NOT_FOUND


def test_ok_envelope_omits_missing_data():
    response = to_response(Ok("done"))

    assert response.status_code == 200
    assert json.loads(response.body) == {"status": 200, "message": "done"}


def test_empty_list_is_kept_in_envelope():
    response = to_response(Ok("List the product is empty", []))

    assert json.loads(response.body) == {"status": 200, "message": "List the product is empty", "data": []}


def test_failure_envelope_uses_failure_status():
    response = to_response(Failure(ErrorKind.NOT_FOUND, "Not found product with code: A1"))

    assert response.status_code == 404
    assert json.loads(response.body)["status"] == 404


class _FakeSession:
    def __init__(self):
        self.calls = []

    def commit(self):
        self.calls.append("commit")

    def rollback(self):
        self.calls.append("rollback")


class _Service:

    @service_result(commit=True)
    def succeed(self, db):
        return Ok("fine")

    @service_result(commit=True)
    def reject(self, db):
        raise ProductNotInCartError()

    @service_result()
    def crash(self, db):
        raise ValueError("bad state")


def test_commit_on_ok_rollback_on_failure():
    service, db = _Service(), _FakeSession()

    assert service.succeed(db).ok
    failure = service.reject(db)

    assert db.calls == ["commit", "rollback"]
    assert failure == Failure(ErrorKind.BAD_REQUEST, "The product not exist in the shopping")


def test_read_only_boundary_never_touches_transaction():
    service, db = _Service(), _FakeSession()

    failure = service.crash(db)

    assert db.calls == []
    assert failure.kind == ErrorKind.INTERNAL
    assert failure.data == "bad state"
