from __future__ import annotations

from typing import Sequence


class EnvLoadError(Exception):
    """Base class for errors raised by envload."""


class DecodeError(EnvLoadError, ValueError):
    def __init__(self, *, key: str, kind: str, value: str, reason: str) -> None:
        self.key = key
        self.kind = kind
        self.value = value
        self.reason = reason
        super().__init__(f"{key}: invalid {kind} value '{value}'")


class LoadError(EnvLoadError):
    """
    Aggregate failure of a single `Loader.load()` pass.

    Missing required keys and malformed values are collected separately and
    reported together. Keys are effective (prefixed) keys in registration order.
    """

    def __init__(self, *, missing: Sequence[str] = (), invalid: Sequence[DecodeError] = ()) -> None:
        self.missing = tuple(missing)
        self.invalid = tuple(invalid)
        super().__init__(self._format())

    def _format(self) -> str:
        parts: list[str] = []
        if self.missing:
            parts.append("missing environment variables: " + ", ".join(self.missing))
        if self.invalid:
            parts.append("invalid environment variables: " + ", ".join(str(e) for e in self.invalid))
        return "; ".join(parts)
