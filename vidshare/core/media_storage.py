import logging
import os
import uuid

import aiofiles
from fastapi import Request, UploadFile

from ..core.exceptions import PayloadTooLarge
from ..utils.file_utils import get_file_extension

logger = logging.getLogger(__name__)


class MediaStore:
    """
    Write-once blob area for uploaded videos on the local filesystem.

    Every stored file gets a freshly generated name, so concurrent uploads
    never collide and no locking is needed.
    """

    VIDEO_PREFIX = "videos"

    def __init__(self, root_dir: str, max_file_size: int, chunk_size: int = 1024 * 1024):
        self.root_dir = root_dir
        self.max_file_size = max_file_size
        self.chunk_size = chunk_size

    @property
    def video_dir(self) -> str:
        return os.path.join(self.root_dir, self.VIDEO_PREFIX)

    def ensure_dirs(self) -> None:
        os.makedirs(self.video_dir, exist_ok=True)

    def generate_filename(self, original_filename: str | None) -> str:
        return f"{uuid.uuid4()}{get_file_extension(original_filename or '')}"

    def path_for(self, filename: str) -> str:
        return os.path.join(self.video_dir, os.path.basename(filename))

    @classmethod
    def url_for(cls, filename: str) -> str:
        """Playback URL of a stored video, relative to the static mount."""
        return f"/uploads/{cls.VIDEO_PREFIX}/{filename}"

    async def save(self, file: UploadFile) -> str:
        """
        Streams an upload to a new file and returns the generated filename.

        Aborts with PayloadTooLarge once more than max_file_size bytes have
        been received; the partial file is removed.
        """
        if file.size is not None and file.size > self.max_file_size:
            raise PayloadTooLarge(f"File exceeds the {self.max_file_size // (1024 * 1024)}MB limit")

        self.ensure_dirs()
        filename = self.generate_filename(file.filename)
        path = self.path_for(filename)

        written = 0
        try:
            async with aiofiles.open(path, "wb") as out_file:
                while True:
                    chunk = await file.read(self.chunk_size)
                    if not chunk:
                        break
                    written += len(chunk)
                    if written > self.max_file_size:
                        raise PayloadTooLarge(f"File exceeds the {self.max_file_size // (1024 * 1024)}MB limit")
                    await out_file.write(chunk)
        except BaseException:
            self.delete(filename)
            raise

        logger.info("Stored upload %s (%d bytes)", filename, written)
        return filename

    def delete(self, filename: str) -> bool:
        """
        Removes a stored file. A file that is already gone is not an error;
        other filesystem failures are logged and reported as False.
        """
        path = self.path_for(filename)
        try:
            os.remove(path)
            return True
        except FileNotFoundError:
            return False
        except OSError as e:
            logger.warning("Could not delete media file %s: %s", path, e)
            return False

    def exists(self, filename: str) -> bool:
        return os.path.isfile(self.path_for(filename))


def get_media_store(request: Request) -> MediaStore:
    """FastAPI dependency to get the application's media store."""
    return request.app.state.media_store
