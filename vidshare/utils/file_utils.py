"""
Helpers for inspecting uploaded file names and content types.
"""

import os


def get_file_extension(filename: str) -> str:
    """
    Returns the file extension including the dot, or an empty string.
    """
    _, extension = os.path.splitext(filename)
    return extension


def is_video_content_type(content_type: str | None) -> bool:
    """
    True when the declared MIME type is a video type (``video/*``).
    """
    if not content_type:
        return False
    return content_type.split(";", 1)[0].strip().lower().startswith("video/")
