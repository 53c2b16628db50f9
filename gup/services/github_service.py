"""
Client for the GitHub contents API.

Only two calls are needed for an upload: a ``GET`` that tells whether the
target path already exists (and returns its ``sha``), and a ``PUT`` that
creates or replaces the file.  Both go through one ``requests.Session``
that lives for a single run.
"""

import json
import logging
from typing import Optional

import requests

from gup.config import config
from gup.errors import (
    RemoteAPIError,
    RequestConstructionError,
    ResponseParseError,
    TransportError,
)
from gup.models import AccessDescriptor, RemoteFileState, WriteRequest, WriteResult
from gup.utils.helpers import _truncate

log = logging.getLogger(__name__)


class GitHubService:
    def __init__(self, access: AccessDescriptor, session: Optional[requests.Session] = None):
        self.access = access
        self.api = f"{config.API_BASE_URL}/repos/{access.repo}/contents"
        self._owns_session = session is None
        self.session = session or requests.Session()

    def _headers(self, with_body: bool = False):
        headers = {
            "Authorization": f"token {self.access.token}",
            "Accept": config.ACCEPT,
            "User-Agent": config.USER_AGENT,
        }
        if with_body:
            headers["Content-Type"] = "application/json"
        return headers

    @property
    def contents_url(self) -> str:
        return f"{self.api}/{self.access.remote_path}"

    def _send(self, method, data=None):
        url = self.contents_url
        try:
            return self.session.request(
                method,
                url,
                headers=self._headers(with_body=data is not None),
                data=data,
                timeout=config.REQUEST_TIMEOUT,
            )
        except (requests.exceptions.InvalidHeader, UnicodeEncodeError) as e:
            # the exception text quotes the header value, token included
            raise RequestConstructionError("创建请求失败: Authorization 头包含非法字符") from e
        except (requests.exceptions.InvalidURL,
                requests.exceptions.MissingSchema,
                requests.exceptions.InvalidSchema) as e:
            raise RequestConstructionError(f"创建请求失败: {e}") from e
        except requests.exceptions.RequestException as e:
            log.warning("%s %s failed: %s", method, url, e)
            raise TransportError(f"发送请求失败: {e}") from e

    def probe(self) -> RemoteFileState:
        """Return the current state of the target path."""
        r = self._send("GET")
        log.info("GET %s -> %s", self.contents_url, r.status_code)
        if r.status_code == 404:
            return RemoteFileState.absent()
        if r.status_code != 200:
            raise RemoteAPIError(
                f"检查远程文件失败: {r.status_code} {r.reason or ''}".rstrip(),
                status_code=r.status_code,
                body=r.text,
            )
        try:
            js = r.json()
        except ValueError as e:
            raise ResponseParseError(f"解析响应失败: {e}") from e
        sha = js.get("sha") if isinstance(js, dict) else None
        if not isinstance(sha, str) or not sha:
            raise ResponseParseError(f"解析响应失败: 响应中没有 sha 字段: {_truncate(r.text)}")
        return RemoteFileState.present(sha)

    def write(self, request: WriteRequest) -> WriteResult:
        try:
            body = json.dumps(request.to_payload())
        except (TypeError, ValueError) as e:
            raise RequestConstructionError(f"创建请求数据失败: {e}") from e
        r = self._send("PUT", data=body)
        log.info("PUT %s -> %s", self.contents_url, r.status_code)
        if r.status_code not in (200, 201):
            raise RemoteAPIError(
                f"上传文件失败 (HTTP 错误): {r.status_code} {r.reason or ''}".rstrip(),
                status_code=r.status_code,
                body=r.text,
            )
        try:
            js = r.json()
        except ValueError as e:
            raise ResponseParseError(f"解析响应失败: {e}") from e
        commit = js.get("commit") if isinstance(js, dict) else None
        commit_sha = commit.get("sha") if isinstance(commit, dict) else None
        return WriteResult(success=True, new_commit_id=commit_sha or None)

    def close(self):
        """Close the session, unless the caller supplied it."""
        if self._owns_session:
            self.session.close()
