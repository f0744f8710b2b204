from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping, Protocol, Union

PathLike = Union[str, os.PathLike]


class Source(Protocol):
    def lookup(self, key: str) -> tuple[str, bool]:
        """Return (value, found) for `key`."""


class EnvironSource:
    """Reads the live process environment on every lookup."""

    def lookup(self, key: str) -> tuple[str, bool]:
        value = os.environ.get(key)
        if value is None:
            return "", False
        return value, True

    def __repr__(self) -> str:
        return "EnvironSource()"


class MapSource:
    def __init__(self, values: Mapping[str, str]) -> None:
        self._values = dict(values)

    def lookup(self, key: str) -> tuple[str, bool]:
        if key not in self._values:
            return "", False
        return self._values[key], True

    def __repr__(self) -> str:
        return f"MapSource(keys={len(self._values)})"


class PrefixSource:
    def __init__(self, inner: Source, prefix: str) -> None:
        self.inner = inner
        self.prefix = prefix

    def lookup(self, key: str) -> tuple[str, bool]:
        return self.inner.lookup(self.prefix + key)

    def __repr__(self) -> str:
        return f"PrefixSource(prefix={self.prefix!r}, inner={self.inner!r})"


def dotenv_source(path: PathLike) -> MapSource:
    try:
        from dotenv import dotenv_values  # type: ignore[import-not-found]
    except ModuleNotFoundError as e:  # pragma: no cover
        raise ModuleNotFoundError(
            "Missing dependency: python-dotenv is required to read .env files. Install 'python-dotenv'."
        ) from e

    dotenv_path = Path(path)
    if not dotenv_path.exists():
        raise FileNotFoundError(f"Dotenv file not found: {dotenv_path}")

    # Keys declared without "=" come back as None; they still count as present.
    raw = dotenv_values(dotenv_path=dotenv_path)
    return MapSource({k: "" if v is None else v for k, v in raw.items()})


def yaml_source(path: PathLike) -> MapSource:
    try:
        import yaml  # type: ignore[import-not-found]
    except ModuleNotFoundError as e:  # pragma: no cover
        raise ModuleNotFoundError(
            "Missing dependency: PyYAML is required to read YAML files. Install 'PyYAML'."
        ) from e

    yaml_path = Path(path)
    if not yaml_path.exists():
        raise FileNotFoundError(f"YAML file not found: {yaml_path}")

    data = yaml.safe_load(yaml_path.read_text(encoding="utf-8"))
    if data is None:
        return MapSource({})
    if not isinstance(data, dict):
        raise ValueError(f"Top-level YAML must be a mapping, got: {type(data).__name__}")
    return MapSource({str(k): _scalar_to_text(str(k), v) for k, v in data.items()})


def _scalar_to_text(key: str, value: Any) -> str:
    if isinstance(value, (dict, list)):
        raise ValueError(f"Nested values are not supported. Key '{key}' is {type(value).__name__}.")
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
