import json

import pytest
import requests

from gup.errors import RemoteAPIError, RequestConstructionError, ResponseParseError, TransportError
from gup.models import WriteRequest
from gup.services.github_service import GitHubService
from gup.utils.helpers import parse_access_url
from tests.conftest import CONTENTS_URL, RAW_URL, make_response


@pytest.fixture
def service(session):
    return GitHubService(parse_access_url(RAW_URL), session=session)


def test_probe_404_means_absent(service, session):
    session.request.return_value = make_response(404, {"message": "Not Found"})
    state = service.probe()
    assert state.exists is False
    assert state.version_marker is None


def test_probe_200_returns_sha(service, session):
    session.request.return_value = make_response(200, {"sha": "abc123", "name": "notes.txt"})
    state = service.probe()
    assert state.exists is True
    assert state.version_marker == "abc123"


def test_probe_sends_authenticated_get(service, session):
    session.request.return_value = make_response(404)
    service.probe()
    args, kwargs = session.request.call_args
    assert args == ("GET", CONTENTS_URL)
    assert kwargs["headers"] == {
        "Authorization": "token ghp_abc123",
        "Accept": "application/vnd.github.v3+json",
        "User-Agent": "GitHub-Uploader-Python/0.1.0",
    }
    assert kwargs["data"] is None


@pytest.mark.parametrize("status", [401, 403, 500, 502])
def test_probe_other_status_is_api_error(service, session, status):
    session.request.return_value = make_response(status, "boom", reason="Oops")
    with pytest.raises(RemoteAPIError) as exc:
        service.probe()
    assert exc.value.status_code == status
    assert exc.value.body == "boom"


@pytest.mark.parametrize("body", ["not json", "", [{"sha": "x"}], {"name": "no sha"}])
def test_probe_unusable_200_body_is_parse_error(service, session, body):
    session.request.return_value = make_response(200, body)
    with pytest.raises(ResponseParseError):
        service.probe()


def test_probe_connection_failure_is_transport_error(service, session):
    session.request.side_effect = requests.exceptions.ConnectionError("no route")
    with pytest.raises(TransportError) as exc:
        service.probe()
    assert "发送请求失败" in exc.value.message


def test_bad_header_is_request_construction_error(service, session):
    session.request.side_effect = requests.exceptions.InvalidHeader("header value: 'token ghp_abc123'")
    with pytest.raises(RequestConstructionError) as exc:
        service.probe()
    assert "ghp_abc123" not in exc.value.message


def _request(sha=None):
    return WriteRequest(commit_message="创建 notes.txt", encoded_content="aGk=", branch="main", version_marker=sha)


def test_write_create_omits_sha(service, session):
    session.request.return_value = make_response(201, {"commit": {"sha": "c0ffee"}})
    result = service.write(_request())
    args, kwargs = session.request.call_args
    assert args == ("PUT", CONTENTS_URL)
    assert kwargs["headers"]["Content-Type"] == "application/json"
    assert kwargs["headers"]["Authorization"] == "token ghp_abc123"
    assert json.loads(kwargs["data"]) == {"message": "创建 notes.txt", "content": "aGk=", "branch": "main"}
    assert result.success is True
    assert result.new_commit_id == "c0ffee"


def test_write_update_carries_sha(service, session):
    session.request.return_value = make_response(200, {"commit": {"sha": "beef"}})
    service.write(_request(sha="abc123"))
    payload = json.loads(session.request.call_args[1]["data"])
    assert payload["sha"] == "abc123"


def test_write_success_without_commit_object(service, session):
    session.request.return_value = make_response(200, {"content": {"name": "notes.txt"}})
    result = service.write(_request())
    assert result.success is True
    assert result.new_commit_id is None


@pytest.mark.parametrize("status", [409, 422, 500])
def test_write_failure_status_is_api_error(service, session, status):
    session.request.return_value = make_response(status, '{"message": "sha mismatch"}')
    with pytest.raises(RemoteAPIError) as exc:
        service.write(_request(sha="stale"))
    assert exc.value.status_code == status
    assert "sha mismatch" in exc.value.body


def test_write_unparsable_success_body(service, session):
    session.request.return_value = make_response(201, "<html>")
    with pytest.raises(ResponseParseError):
        service.write(_request())


def test_write_timeout_is_transport_error(service, session):
    session.request.side_effect = requests.exceptions.Timeout("slow")
    with pytest.raises(TransportError):
        service.write(_request())


def test_close_leaves_caller_session_open(service, session):
    service.close()
    session.close.assert_not_called()
