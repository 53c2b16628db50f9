import re
from gup.config import config
from gup.errors import MalformedURL
from gup.models import AccessDescriptor

URL_FORMAT_HINT = "https://raw.githubusercontent.com/用户名/仓库名/refs/heads/分支名/文件路径?token=访问令牌"

def _raw_url_pattern(raw_host):
    return re.compile(
        r"^https://" + re.escape(raw_host)
        + r"/([^/]+)/([^/]+)/refs/heads/([^/]+)/(.+)\?token=(.+)$"
    )

def parse_access_url(url, raw_host=None):
    m = _raw_url_pattern(raw_host or config.RAW_HOST).fullmatch(url or "")
    if not m:
        raise MalformedURL(f"GitHub URL 格式不正确\n正确格式: {URL_FORMAT_HINT}")
    owner, repo_name, branch, remote_path, token = m.groups()
    return AccessDescriptor(
        owner=owner,
        repo_name=repo_name,
        branch=branch,
        remote_path=remote_path,
        token=token,
    )

def _commit_message(file_name, exists):
    return f"更新 {file_name}" if exists else f"创建 {file_name}"

def _format_mb(size_bytes):
    return f"{size_bytes / 1024.0 / 1024.0:.2f}"

def _format_limit_mb(limit_bytes):
    if limit_bytes % (1024 * 1024) == 0:
        return str(limit_bytes // (1024 * 1024))
    return _format_mb(limit_bytes)

def _truncate(text, limit=200):
    text = text or ""
    if len(text) <= limit:
        return text
    return text[:limit] + "..."
