import os
import configparser
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

VERSION = "0.1.0"

class Config:
    def __init__(self, root_path):
        self.root_path = root_path
        self._cfg = configparser.ConfigParser()
        self._cfg.read(os.path.join(root_path, "config.ini"), encoding="utf-8")

        # Upload limits
        self.MAX_FILE_SIZE = int(os.environ.get("GUP_MAX_FILE_SIZE") or self._cfg.get("github", "max_file_size", fallback=str(100 * 1024 * 1024)))  # 100MB

        # GitHub API Config
        self.API_BASE_URL = (os.environ.get("GUP_API_BASE_URL") or self._cfg.get("github", "api_base_url", fallback="https://api.github.com")).rstrip("/")
        self.RAW_HOST = os.environ.get("GUP_RAW_HOST") or self._cfg.get("github", "raw_host", fallback="raw.githubusercontent.com")
        self.ACCEPT = "application/vnd.github.v3+json"
        self.USER_AGENT = os.environ.get("GUP_USER_AGENT") or self._cfg.get("github", "user_agent", fallback=f"GitHub-Uploader-Python/{VERSION}")
        self.REQUEST_TIMEOUT = self._parse_timeout(os.environ.get("GUP_REQUEST_TIMEOUT") or self._cfg.get("github", "request_timeout", fallback=""))

        # Logging Config
        self.LOG_FILE = os.environ.get("GUP_LOG_FILE") or self._cfg.get("logging", "file", fallback="")
        self.LOG_LEVEL = (os.environ.get("GUP_LOG_LEVEL") or self._cfg.get("logging", "level", fallback="INFO")).upper()

    def _parse_timeout(self, value):
        s = str(value or "").strip()
        if not s:
            return None
        try:
            t = float(s)
        except ValueError:
            return None
        return t if t > 0 else None

config = Config(os.getcwd())
