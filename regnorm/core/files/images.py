from __future__ import annotations

import os

from pathlib import Path
from typing import Tuple

from PIL import Image, UnidentifiedImageError

from regnorm.core.errors import RegistryIOError

from .replace import discard, sibling_temp_path


def png_dimensions(path: str | Path) -> Tuple[int, int]:
    """Return (width, height) of a PNG file.

    Only the header is decoded. Non-PNG images are rejected.
    """

    p = Path(path)
    try:
        with Image.open(p) as img:
            if img.format != "PNG":
                raise RegistryIOError(str(p), "probe", f"not a PNG image (format={img.format})")
            width, height = img.size
    except UnidentifiedImageError as e:
        raise RegistryIOError(str(p), "probe", str(e)) from e
    except OSError as e:
        raise RegistryIOError(str(p), "probe", str(e)) from e
    return int(width), int(height)


def resize_png(path: str | Path, width: int, height: int) -> None:
    """Resize a PNG in place to exactly width x height."""

    p = Path(path)
    tmp = sibling_temp_path(p, "resize")
    try:
        with Image.open(p) as img:
            img.load()
            resized = img.resize((int(width), int(height)), Image.Resampling.LANCZOS)
        resized.save(tmp, format="PNG", optimize=True)
        os.replace(tmp, p)
    except (UnidentifiedImageError, OSError, ValueError) as e:
        discard(tmp)
        raise RegistryIOError(str(p), "resize", str(e)) from e


def file_size(path: str | Path) -> int:
    p = Path(path)
    try:
        return int(os.stat(p).st_size)
    except OSError as e:
        raise RegistryIOError(str(p), "stat", e.strerror or str(e)) from e
