import os
import sys
from pathlib import Path

import pytest
from PIL import Image

from gallerygen import ORIENTATION_TAG


def write_image(path: Path, size=(40, 30), color=(200, 30, 30), mode="RGB", orientation=None) -> Path:
    """Save a solid-colour image, format chosen from the file extension."""
    path.parent.mkdir(parents=True, exist_ok=True)
    img = Image.new(mode, size, color)
    kwargs = {}
    if orientation is not None:
        exif = Image.Exif()
        exif[ORIENTATION_TAG] = orientation
        kwargs["exif"] = exif
    img.save(path, **kwargs)
    return path


def set_mtime(path: Path, mtime: float):
    os.utime(path, (mtime, mtime))


def output_mtimes(root: Path) -> dict[str, int]:
    """mtime_ns of every file under root, keyed by relative path."""
    return {p.relative_to(root).as_posix(): p.stat().st_mtime_ns for p in root.rglob("*") if p.is_file()}


# Filenames that are not valid UTF-8 are only creatable on byte-oriented filesystems
byte_filenames = pytest.mark.skipif(sys.platform != "linux", reason="needs arbitrary byte filenames")


def write_raw_name(directory: Path, name: bytes, data: bytes = b"x") -> bytes:
    """Create directory/name where name is raw bytes, bypassing str decoding."""
    directory.mkdir(parents=True, exist_ok=True)
    path = os.path.join(os.fsencode(directory), name)
    with open(path, "wb") as f:
        f.write(data)
    return path
