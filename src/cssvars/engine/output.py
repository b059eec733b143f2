"""Atomic output writes: a reader never sees a half-written stylesheet."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from cssvars.errors import OutputWriteError


def write_atomic(path: Path, content: str) -> None:
    """Write *content* to *path* via a temp file and ``os.replace``.

    Parent directories are created. On failure the previous file is untouched
    and no temp file is left behind.
    """
    path = Path(path)
    tmp_name: str | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as fh:
            tmp_name = fh.name
            fh.write(content)
        os.replace(tmp_name, path)
        tmp_name = None
    except (OSError, ValueError) as exc:
        # ValueError covers UnicodeEncodeError for text UTF-8 cannot encode.
        raise OutputWriteError(f"Cannot write {path}: {exc}", str(path)) from exc
    finally:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
