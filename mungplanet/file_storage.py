"""
File Storage Management for Memorial Images
Handles naming, size limits and disk writes for uploaded images
"""

import os
import time
import secrets
import logging
import aiofiles
from fastapi import UploadFile, Request
from .errors import BadRequest, PayloadTooLarge

logger = logging.getLogger(__name__)

# Configuration
UPLOAD_DIR = 'uploads'
PUBLIC_PREFIX = '/uploads'
MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
CHUNK_SIZE = 1024 * 1024
# Headroom for multipart boundaries and part headers on top of the file itself
MULTIPART_OVERHEAD = 64 * 1024

# Ensure upload directory exists
os.makedirs(UPLOAD_DIR, exist_ok=True)

TOO_LARGE_MESSAGE = '파일 크기는 10MB를 넘을 수 없습니다'


class FileStorageManager:
    """Manages image uploads under UPLOAD_DIR"""

    def __init__(self, upload_dir: str = UPLOAD_DIR, max_file_size: int = MAX_FILE_SIZE):
        self.upload_dir = upload_dir
        self.max_file_size = max_file_size

    @staticmethod
    def generate_filename(original_filename: str) -> str:
        """<millisecond timestamp>-<random 0..999999999><original extension>"""
        file_ext = os.path.splitext(original_filename)[1]
        return f"{int(time.time() * 1000)}-{secrets.randbelow(10**9)}{file_ext}"

    def get_file_path(self, filename: str) -> str:
        return os.path.join(self.upload_dir, filename)

    @staticmethod
    def get_public_url(filename: str) -> str:
        return f"{PUBLIC_PREFIX}/{filename}"

    async def save_image(self, file: UploadFile) -> str:
        """Write the upload to disk and return its public URL.

        The size ceiling is checked against the spooled size first and again
        while streaming; nothing is left on disk when the file is rejected.
        """
        if file.size is not None and file.size > self.max_file_size:
            raise PayloadTooLarge(TOO_LARGE_MESSAGE)

        filename = self.generate_filename(file.filename or '')
        file_path = self.get_file_path(filename)
        written = 0
        try:
            async with aiofiles.open(file_path, 'wb') as f:
                while True:
                    chunk = await file.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    written += len(chunk)
                    if written > self.max_file_size:
                        raise PayloadTooLarge(TOO_LARGE_MESSAGE)
                    await f.write(chunk)
        except Exception:
            # Clean up file if it was created
            if os.path.exists(file_path):
                os.remove(file_path)
            raise

        logger.info({'msg': 'upload_saved', 'filename': filename, 'size': written})
        return self.get_public_url(filename)


async def enforce_upload_limit(request: Request) -> None:
    """Reject oversized multipart bodies before the form is parsed."""
    length = request.headers.get('content-length')
    if length is None:
        return
    try:
        declared = int(length)
    except ValueError:
        raise BadRequest('잘못된 요청입니다')
    if declared > MAX_FILE_SIZE + MULTIPART_OVERHEAD:
        raise PayloadTooLarge(TOO_LARGE_MESSAGE)


# Global instance
file_storage = FileStorageManager()
