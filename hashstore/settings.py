from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_indent(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if raw is None:
        return default
    raw = raw.strip()
    if not raw:
        return None
    return int(raw)


@dataclass(frozen=True)
class Settings:
    # Default store location
    base_dir: Path
    store_filename: str

    # Output formatting
    json_indent: int | None

    # Debug
    debug_log_values: bool


def get_settings(env_file: str | os.PathLike[str] | None = None) -> Settings:
    if env_file is not None:
        load_dotenv(env_file)

    raw_base = os.getenv("HASHSTORE_BASE_DIR", "").strip()
    base_dir = Path(raw_base).expanduser() if raw_base else Path.cwd()

    store_filename = os.getenv("HASHSTORE_FILENAME", ".store.json").strip() or ".store.json"

    json_indent = _env_indent("HASHSTORE_JSON_INDENT", 2)

    # NOTE: values may hold user data; keep them out of logs unless asked.
    debug_log_values = _env_bool("HASHSTORE_DEBUG_LOG_VALUES", False)

    return Settings(
        base_dir=base_dir,
        store_filename=store_filename,
        json_indent=json_indent,
        debug_log_values=debug_log_values,
    )
