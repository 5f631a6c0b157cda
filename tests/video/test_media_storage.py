import asyncio
import io
import os

import pytest
from fastapi import UploadFile

from vidshare.core.exceptions import PayloadTooLarge
from vidshare.core.media_storage import MediaStore


@pytest.fixture
def store(tmp_path):
    media = MediaStore(root_dir=str(tmp_path / "media"), max_file_size=1024, chunk_size=100)
    media.ensure_dirs()
    return media


def make_upload(content: bytes, filename="clip.webm"):
    return UploadFile(file=io.BytesIO(content), filename=filename)


def test_save_generates_unique_names_keeping_extension(store):
    first = asyncio.run(store.save(make_upload(b"one")))
    second = asyncio.run(store.save(make_upload(b"two")))

    assert first != second
    assert first.endswith(".webm") and second.endswith(".webm")
    with open(store.path_for(first), "rb") as f:
        assert f.read() == b"one"


def test_save_without_extension(store):
    name = asyncio.run(store.save(make_upload(b"data", filename="clip")))
    assert os.path.splitext(name)[1] == ""
    assert store.exists(name)


def test_save_beyond_cap_removes_partial_file(store):
    with pytest.raises(PayloadTooLarge):
        asyncio.run(store.save(make_upload(b"x" * 1025)))
    assert os.listdir(store.video_dir) == []


def test_delete_is_tolerant_of_missing_file(store):
    name = asyncio.run(store.save(make_upload(b"bytes")))
    assert store.delete(name) is True
    assert store.delete(name) is False
    assert not store.exists(name)


def test_url_for_points_at_static_mount():
    assert MediaStore.url_for("abc.mp4") == "/uploads/videos/abc.mp4"
