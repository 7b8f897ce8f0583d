"""The requests-based API client, against a recorded fake session."""

import json
from unittest import mock

import pytest
import requests

from furrymatch_client import ITEM_DELETED_EVENT, DeleteDialog, FurryMatchAPI


def make_response(status_code, body=None, headers=None):
    response = requests.Response()
    response.status_code = status_code
    response._content = json.dumps(body).encode("utf-8") if body is not None else b""
    response.headers.update(headers or {})
    response.url = "http://api.test/"
    return response


@pytest.fixture
def session():
    return mock.Mock(spec=requests.Session)


@pytest.fixture
def api(session):
    return FurryMatchAPI(base_url="http://api.test/", api_key="token", session=session)


def test_create_sends_bearer_token(api, session):
    session.request.return_value = make_response(201, {"id": 1, "first_name": "Anna"})

    owner, error = api.owners.create({"first_name": "Anna"})

    assert error is None
    assert owner == {"id": 1, "first_name": "Anna"}
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "POST"
    assert kwargs["url"] == "http://api.test/api/owners"
    assert kwargs["headers"]["Authorization"] == "Bearer token"


def test_partial_update_uses_merge_patch(api, session):
    session.request.return_value = make_response(200, {"id": 4, "city": "Hamburg"})

    api.pets.partial_update({"id": 4, "city": "Hamburg"})

    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "PATCH"
    assert kwargs["url"] == "http://api.test/api/pets/4"
    assert kwargs["headers"]["Content-Type"] == "application/merge-patch+json"


def test_query_reads_total_count(api, session):
    session.request.return_value = make_response(200, [{"id": 1}, {"id": 2}], {"X-Total-Count": "7"})

    result, error = api.photos.query(page=1, size=2, sort=["id,desc"])

    assert error is None
    assert result.items == [{"id": 1}, {"id": 2}]
    assert result.total_count == 7
    assert session.request.call_args.kwargs["params"] == {"page": 1, "size": 2, "sort": ["id,desc"]}


def test_error_carries_problem_details(api, session):
    session.request.return_value = make_response(
        400,
        {"title": "A new owner cannot already have an ID", "errorKey": "idexists"},
    )

    owner, error = api.owners.create({"id": 3, "first_name": "Anna"})

    assert owner is None
    assert error == {
        "status_code": 400,
        "message": "A new owner cannot already have an ID",
        "error_key": "idexists",
    }


def test_connection_failure(api, session):
    session.request.side_effect = requests.ConnectionError("refused")

    owner, error = api.owners.find(1)

    assert owner is None
    assert error["status_code"] is None
    assert "refused" in error["message"]


def test_authenticate_stores_token(session):
    api = FurryMatchAPI(base_url="http://api.test", session=session)
    session.request.return_value = make_response(200, {"id_token": "abc"})

    token, error = api.authenticate("anna", "secret")

    assert (token, error) == ("abc", None)
    session.request.return_value = make_response(200, {"login": "anna"})
    api.account()
    assert session.request.call_args.kwargs["headers"]["Authorization"] == "Bearer abc"


class TestDeleteDialog:
    def test_confirm_closes_with_deleted_event(self, api, session):
        session.request.return_value = make_response(204)
        on_close, on_dismiss = mock.Mock(), mock.Mock()
        dialog = DeleteDialog(api.owners, on_close, on_dismiss)

        assert dialog.confirm_delete(5) is None

        assert session.request.call_args.kwargs["method"] == "DELETE"
        assert session.request.call_args.kwargs["url"] == "http://api.test/api/owners/5"
        on_close.assert_called_once_with(ITEM_DELETED_EVENT)
        on_dismiss.assert_not_called()
        assert not dialog.is_open

    def test_failed_delete_keeps_dialog_open(self, api, session):
        session.request.return_value = make_response(500, {"title": "Internal Server Error"})
        on_close, on_dismiss = mock.Mock(), mock.Mock()
        dialog = DeleteDialog(api.pets, on_close, on_dismiss)

        error = dialog.confirm_delete(5)

        assert error["status_code"] == 500
        on_close.assert_not_called()
        assert dialog.is_open

    def test_cancel_dismisses_without_request(self, api, session):
        on_close, on_dismiss = mock.Mock(), mock.Mock()
        dialog = DeleteDialog(api.photos, on_close, on_dismiss)

        dialog.cancel()

        on_dismiss.assert_called_once_with()
        on_close.assert_not_called()
        session.request.assert_not_called()
        assert not dialog.is_open
