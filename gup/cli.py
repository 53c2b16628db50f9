import sys
import logging

from gup import configure_logging
from gup.errors import RemoteAPIError, UploadError
from gup.uploader import upload_to_github
from gup.utils.helpers import URL_FORMAT_HINT

log = logging.getLogger(__name__)

USAGE = "用法: gup -f <文件路径> -u <GitHub URL>"
EXAMPLE = f"示例: gup -f ./example.txt -u {URL_FORMAT_HINT}"

def print_usage():
    print(USAGE)
    print(EXAMPLE)

def parse_args(argv):
    """Return ``(file_path, github_url)``; either may be None if not given."""
    file_path = None
    github_url = None
    i = 0
    while i < len(argv):
        a = argv[i]
        if a in ("-f", "--file"):
            if i + 1 < len(argv):
                i += 1
                file_path = argv[i]
        elif a in ("-u", "--github-url"):
            if i + 1 < len(argv):
                i += 1
                github_url = argv[i]
        i += 1
    return file_path, github_url

def run(argv):
    if len(argv) < 4:
        print_usage()
        return 1
    file_path, github_url = parse_args(argv)
    if not file_path or not github_url:
        print("错误: 必须提供文件路径和 GitHub URL")
        print_usage()
        return 1

    configure_logging()
    try:
        upload_to_github(file_path, github_url)
    except RemoteAPIError as e:
        log.error("API error %s: %s", e.status_code, e.message)
        print(f"错误: {e.message}")
        print(f"响应内容: {e.body}")
        return 1
    except UploadError as e:
        log.error("%s: %s", type(e).__name__, e.message)
        print(f"错误: {e.message}")
        return 1
    return 0

def main():
    sys.exit(run(sys.argv[1:]))

if __name__ == "__main__":
    main()
