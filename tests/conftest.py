"""Configuration for pytest."""

import logging
import zipfile
from collections.abc import Iterator
from pathlib import Path

import pytest

ENTRY_COMMENT = "checked by hand"
ARCHIVE_COMMENT = "fixture archive"
FIXTURE_DATE_TIME = (2024, 1, 2, 3, 4, 6)


def _zip_info(name: str, compress_type: int, comment: bytes = b"") -> zipfile.ZipInfo:
    info = zipfile.ZipInfo(name, date_time=FIXTURE_DATE_TIME)
    info.compress_type = compress_type
    info.comment = comment
    return info


@pytest.fixture
def sample_zip(tmp_path: Path) -> Path:
    """Create an archive with a stored file, a deflated file, a directory and a commented file."""
    archive_path = tmp_path / "sample.zip"
    with zipfile.ZipFile(archive_path, "w") as zf:
        zf.writestr(_zip_info("stored.txt", zipfile.ZIP_STORED), b"stored content")
        zf.writestr(_zip_info("deflated.txt", zipfile.ZIP_DEFLATED), b"deflated content " * 32)
        zf.writestr(_zip_info("empty_dir/", zipfile.ZIP_STORED), b"")
        zf.writestr(
            _zip_info("commented.txt", zipfile.ZIP_DEFLATED, ENTRY_COMMENT.encode()),
            b"commented content",
        )
        zf.comment = ARCHIVE_COMMENT.encode()
    return archive_path


@pytest.fixture
def empty_zip(tmp_path: Path) -> Path:
    """Create an archive without entries."""
    archive_path = tmp_path / "empty.zip"
    with zipfile.ZipFile(archive_path, "w"):
        pass
    return archive_path


@pytest.fixture(autouse=True)
def reset_zip2meta_logger() -> Iterator[None]:
    """Drop handlers bound to streams captured during a test."""
    yield
    logger = logging.getLogger("zip2meta")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
