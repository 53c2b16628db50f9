import os
import logging
from gup.config import config
from gup.errors import FileNotFound, FileTooLarge, ReadError
from gup.models import LocalFile
from gup.utils.helpers import _format_mb, _format_limit_mb

log = logging.getLogger(__name__)

class FileService:
    def __init__(self, max_file_size=None):
        self.max_file_size = max_file_size if max_file_size is not None else config.MAX_FILE_SIZE

    def check_size(self, path):
        """Stat ``path`` and enforce the size ceiling without reading it."""
        if not os.path.exists(path):
            raise FileNotFound(f"文件 {path} 不存在")
        try:
            size = os.stat(path).st_size
        except OSError as e:
            raise ReadError(f"读取文件元数据失败: {e}") from e
        if size > self.max_file_size:
            raise FileTooLarge(
                f"文件大小 ({_format_mb(size)} MB) 超过限制 ({_format_limit_mb(self.max_file_size)} MB)",
                size_bytes=size,
                limit_bytes=self.max_file_size,
            )
        return size

    def load(self, path):
        size = self.check_size(path)
        try:
            with open(path, "rb") as f:
                data = f.read()
        except OSError as e:
            raise ReadError(f"读取文件失败: {e}") from e
        log.info("Loaded %s (%d bytes)", path, len(data))
        return LocalFile(path=path, size_bytes=len(data), raw_bytes=data)

file_service = FileService()
