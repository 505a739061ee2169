"""Tests for StudentRegistryClient against a mocked requests session."""

import json
from unittest.mock import MagicMock

import pytest
import requests

from student_registry_client import StudentRegistryClient


def _response(status_code, payload):
    resp = requests.Response()
    resp.status_code = status_code
    resp._content = b"" if payload is None else json.dumps(payload).encode("utf-8")
    resp.reason = "OK" if status_code < 400 else "Error"
    resp.url = "http://api.test/students"
    return resp


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def api(session):
    return StudentRegistryClient("http://api.test/", session=session)


def test_list_students(api, session):
    session.request.return_value = _response(200, [{"id": "1", "name": "Ana"}])
    students, error = api.list_students()
    assert error is None
    assert students == [{"id": "1", "name": "Ana"}]
    session.request.assert_called_once_with(
        method="GET", url="http://api.test/students", json=None, timeout=15
    )


def test_create_student_sends_body(api, session):
    body = {"id": "x1", "name": "Ana"}
    session.request.return_value = _response(201, body)
    data, error = api.create_student(body)
    assert (data, error) == (body, None)
    assert session.request.call_args.kwargs["json"] == body
    assert session.request.call_args.kwargs["method"] == "POST"


def test_replace_and_delete_paths(api, session):
    session.request.return_value = _response(200, {"mensagem": "Usuário deletado com sucesso."})
    api.replace_student("a b", {"id": "a b"})
    assert session.request.call_args.kwargs["url"] == "http://api.test/students/a%20b"
    data, _ = api.delete_student("7")
    assert session.request.call_args.kwargs["method"] == "DELETE"
    assert data == {"mensagem": "Usuário deletado com sucesso."}


def test_error_message_taken_from_erro(api, session):
    session.request.return_value = _response(404, {"erro": "Usuário não encontrado"})
    data, error = api.get_student("nope")
    assert data is None
    assert error == {"status_code": 404, "message": "Usuário não encontrado"}


def test_list_students_on_failure_returns_empty_list(api, session):
    session.request.side_effect = requests.ConnectionError("refused")
    students, error = api.list_students()
    assert students == []
    assert error["status_code"] is None
    assert "refused" in error["message"]
