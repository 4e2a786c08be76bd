from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path

from regnorm.core.errors import RegistryIOError


def _default_mode() -> int:
    # os.umask can only be read by setting it.
    mask = os.umask(0)
    os.umask(mask)
    return 0o666 & ~mask


def sibling_temp_path(path: str | Path, operation: str) -> str:
    """Create an empty temp file next to path, carrying path's permission bits.

    New targets get the mode a plain open() would give them under the
    current umask. The caller fills the temp file and os.replace()s it.
    """

    p = Path(path)
    try:
        fd, tmp = tempfile.mkstemp(prefix=f".{p.name}.", suffix=".tmp", dir=str(p.parent))
    except OSError as e:
        raise RegistryIOError(str(p), operation, e.strerror or str(e)) from e
    os.close(fd)

    try:
        try:
            mode = stat.S_IMODE(os.stat(p).st_mode)
        except FileNotFoundError:
            mode = _default_mode()
        os.chmod(tmp, mode)
    except OSError as e:
        discard(tmp)
        raise RegistryIOError(str(p), operation, e.strerror or str(e)) from e
    return tmp


def discard(tmp: str) -> None:
    try:
        os.unlink(tmp)
    except OSError:
        pass
