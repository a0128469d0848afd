from __future__ import annotations

import os
from pathlib import Path

from .settings import Settings, get_settings


def default_store_path(settings: Settings | None = None) -> Path:
    settings = settings or get_settings()
    return settings.base_dir / settings.store_filename


def as_path(path: str | os.PathLike[str]) -> Path:
    return path if isinstance(path, Path) else Path(path)
