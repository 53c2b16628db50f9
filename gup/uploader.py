import logging
from gup.models import WriteRequest
from gup.services.file_service import file_service
from gup.services.github_service import GitHubService
from gup.utils.helpers import parse_access_url, _commit_message

log = logging.getLogger(__name__)

def upload_to_github(file_path, github_url, session=None, files=None):
    """Upload ``file_path`` to the repository path encoded in ``github_url``.

    Steps run in order and the first failure propagates as an
    ``UploadError``; nothing is retried.  Returns the ``WriteResult``.
    """
    files = files or file_service
    print(f"开始上传文件 {file_path} 到 GitHub...")

    access = parse_access_url(github_url)
    print("解析 URL 成功:")
    print(f"- 仓库: {access.repo}")
    print(f"- 分支: {access.branch}")
    print(f"- 路径: {access.remote_path}")
    log.info("Uploading %s to %s@%s:%s", file_path, access.repo, access.branch, access.remote_path)

    local = files.load(file_path)
    encoded = local.encoded_content()

    github = GitHubService(access, session=session)
    try:
        state = github.probe()
        if state.exists:
            print("远程文件已存在，将进行更新")
        else:
            print("远程文件不存在，将创建新文件")

        request = WriteRequest(
            commit_message=_commit_message(local.name, state.exists),
            encoded_content=encoded,
            branch=access.branch,
            version_marker=state.version_marker,
        )
        result = github.write(request)
    finally:
        github.close()

    if result.new_commit_id:
        print(f"文件上传成功! Commit SHA: {result.new_commit_id}")
    else:
        print("文件上传成功!")
    log.info("Uploaded %s, commit %s", local.name, result.new_commit_id)
    return result
