from __future__ import annotations

import hashlib
import json
from pathlib import Path
from typing import Any

from .errors import DecodeError


def canonical_json(payload: Any) -> str:
    return json.dumps(payload, sort_keys=True, separators=(",", ":"))


def content_hash(payload: Any) -> str:
    """
    Digest of the canonical JSON form of ``payload``.

    MD5 is only used to detect changes; key order does not affect the result.
    """
    return hashlib.md5(canonical_json(payload).encode("utf-8")).hexdigest()


def read_json(path: Path) -> Any:
    """
    Read JSON from disk.

    Raises DecodeError for empty files or invalid JSON. OSError from the
    filesystem propagates unchanged.
    """
    raw = path.read_text(encoding="utf-8")
    if not raw.strip():
        raise DecodeError(path, "file is empty")
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise DecodeError(path, str(e)) from e


def atomic_write_json(path: Path, payload: Any, *, indent: int | None = 2, sort_keys: bool = True) -> None:
    """
    Atomically write JSON to disk by writing to a temp file then replacing.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    with tmp_path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=indent, sort_keys=sort_keys)
        f.write("\n")
    tmp_path.replace(path)


def remove_path(path: Path) -> None:
    if path.is_dir():
        path.rmdir()
    else:
        path.unlink()
