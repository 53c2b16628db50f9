"""Shared fixtures.

HTTP responses are real ``requests.Response`` objects handed out by a
mocked ``requests.Session`` so no test touches the network.
"""

import json
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import requests

repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

RAW_URL = "https://raw.githubusercontent.com/octo/demo/refs/heads/main/docs/notes.txt?token=ghp_abc123"
CONTENTS_URL = "https://api.github.com/repos/octo/demo/contents/docs/notes.txt"


def make_response(status_code, body=None, reason=""):
    r = requests.Response()
    r.status_code = status_code
    r.reason = reason
    r.encoding = "utf-8"
    if body is None:
        r._content = b""
    elif isinstance(body, bytes):
        r._content = body
    elif isinstance(body, str):
        r._content = body.encode("utf-8")
    else:
        r._content = json.dumps(body).encode("utf-8")
    return r


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def notes_file(tmp_path):
    p = tmp_path / "notes.txt"
    p.write_bytes(b"hello notes 12345678")
    return p
