from __future__ import annotations

from pathlib import Path
from typing import Any


class StoreError(Exception):
    """Base exception for all hashstore errors."""


class NotFoundError(StoreError, LookupError):
    """Raised when a subscription or a store file does not exist."""

    def __init__(self, target: Any, message: str | None = None) -> None:
        self.target = target
        super().__init__(message or f"{target} not found")


class DecodeError(StoreError, ValueError):
    """Raised when a store file exists but does not hold a valid record."""

    def __init__(self, path: Path, detail: str = "") -> None:
        self.path = path
        msg = f"Invalid store file {path}"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)
