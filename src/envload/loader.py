from __future__ import annotations

import builtins
import logging
from typing import Any, Mapping, Optional

from envload.bindings import Binding, Destination, Kind
from envload.decoders import decode
from envload.errors import DecodeError, LoadError
from envload.sources import EnvironSource, MapSource, PathLike, PrefixSource, Source, dotenv_source, yaml_source

logger = logging.getLogger(__name__)


class Loader:
    """
    Collects typed variable bindings against a key-value source and resolves
    them in a single `load()` pass.

    Registration only queues bindings; nothing is read from the source until
    `load()` runs. All missing required keys and malformed values found in that
    pass are reported together in one `LoadError`.
    """

    def __init__(self, source: Source, *, prefix: str = "") -> None:
        self._source = source
        self._prefix = prefix
        self._lookup_source: Source = PrefixSource(source, prefix) if prefix else source
        self._bindings: list[Binding] = []

    @classmethod
    def from_environ(cls) -> "Loader":
        return cls(EnvironSource())

    @classmethod
    def from_map(cls, values: Mapping[str, str]) -> "Loader":
        return cls(MapSource(values))

    @classmethod
    def from_dotenv(cls, path: PathLike) -> "Loader":
        return cls(dotenv_source(path))

    @classmethod
    def from_yaml(cls, path: PathLike) -> "Loader":
        return cls(yaml_source(path))

    def prefix(self, prefix: str) -> "Loader":
        """Return a new loader over the same source that looks keys up under `prefix`."""
        return Loader(self._source, prefix=self._prefix + prefix)

    @property
    def source(self) -> Source:
        return self._source

    @property
    def prefix_value(self) -> str:
        return self._prefix

    @property
    def bindings(self) -> tuple[Binding, ...]:
        return tuple(self._bindings)

    def _register(
        self,
        key: str,
        dest: Optional[Destination],
        description: str,
        *,
        kind: Kind,
        required: bool,
        default: Any = None,
        delimiter: Optional[str] = None,
    ) -> None:
        self._bindings.append(
            Binding(
                key=key,
                effective_key=self._prefix + key,
                description=description,
                kind=kind,
                required=required,
                destination=dest,
                default=default,
                delimiter=delimiter,
            )
        )

    def string(self, key: str, dest: Optional[Destination], description: str) -> None:
        self._register(key, dest, description, kind=Kind.STRING, required=True)

    def optional_string(self, key: str, dest: Optional[Destination], default: str, description: str) -> None:
        self._register(key, dest, description, kind=Kind.STRING, required=False, default=default)

    def int(self, key: str, dest: Optional[Destination], description: str) -> None:
        self._register(key, dest, description, kind=Kind.INT, required=True)

    def optional_int(self, key: str, dest: Optional[Destination], default: builtins.int, description: str) -> None:
        self._register(key, dest, description, kind=Kind.INT, required=False, default=default)

    def float(self, key: str, dest: Optional[Destination], description: str) -> None:
        self._register(key, dest, description, kind=Kind.FLOAT, required=True)

    def optional_float(
        self, key: str, dest: Optional[Destination], default: builtins.float, description: str
    ) -> None:
        self._register(key, dest, description, kind=Kind.FLOAT, required=False, default=default)

    def bool(self, key: str, dest: Optional[Destination], description: str) -> None:
        self._register(key, dest, description, kind=Kind.BOOL, required=True)

    def optional_bool(self, key: str, dest: Optional[Destination], default: builtins.bool, description: str) -> None:
        self._register(key, dest, description, kind=Kind.BOOL, required=False, default=default)

    def flag(self, key: str, dest: Optional[Destination], description: str) -> None:
        # Never required; an absent flag resolves to False.
        self._register(key, dest, description, kind=Kind.FLAG, required=False, default=False)

    def list(self, key: str, dest: Optional[Destination], delimiter: str, description: str) -> None:
        self._register(key, dest, description, kind=Kind.LIST, required=True, delimiter=delimiter)

    def optional_list(
        self,
        key: str,
        dest: Optional[Destination],
        delimiter: str,
        default: builtins.list[str],
        description: str,
    ) -> None:
        self._register(key, dest, description, kind=Kind.LIST, required=False, default=default, delimiter=delimiter)

    def set(self, key: str, dest: Optional[Destination], delimiter: str, description: str) -> None:
        self._register(key, dest, description, kind=Kind.SET, required=True, delimiter=delimiter)

    def optional_set(
        self,
        key: str,
        dest: Optional[Destination],
        delimiter: str,
        default: dict[str, builtins.bool],
        description: str,
    ) -> None:
        self._register(key, dest, description, kind=Kind.SET, required=False, default=default, delimiter=delimiter)

    def load(self) -> None:
        missing: builtins.list[str] = []
        invalid: builtins.list[DecodeError] = []
        assigned = 0
        defaulted = 0

        for binding in self._bindings:
            raw, found = self._lookup_source.lookup(binding.key)
            if not found:
                if binding.required:
                    logger.debug("env.binding_missing key=%s kind=%s", binding.effective_key, binding.kind.value)
                    missing.append(binding.effective_key)
                    continue
                logger.debug("env.binding_default key=%s kind=%s", binding.effective_key, binding.kind.value)
                binding.assign(binding.default)
                defaulted += 1
                continue

            try:
                value = decode(binding.kind, raw, binding.delimiter)
            except ValueError as e:
                logger.debug("env.binding_invalid key=%s kind=%s", binding.effective_key, binding.kind.value)
                invalid.append(
                    DecodeError(key=binding.effective_key, kind=binding.kind.value, value=raw, reason=str(e))
                )
                continue

            logger.debug("env.binding_set key=%s kind=%s", binding.effective_key, binding.kind.value)
            binding.assign(value)
            assigned += 1

        if missing or invalid:
            logger.warning(
                "env.load_failed bindings=%d missing=%d invalid=%d",
                len(self._bindings),
                len(missing),
                len(invalid),
            )
            raise LoadError(missing=missing, invalid=invalid)

        logger.info(
            "env.load_complete bindings=%d assigned=%d defaulted=%d",
            len(self._bindings),
            assigned,
            defaulted,
        )

    def help(self) -> str:
        return "".join(f"{b.effective_key} -- {b.description}\n" for b in self._bindings)

    def __repr__(self) -> str:
        return f"Loader(source={self._source!r}, prefix={self._prefix!r}, bindings={len(self._bindings)})"


def new() -> Loader:
    """Loader backed by the live process environment."""
    return Loader.from_environ()


def from_map(values: Mapping[str, str]) -> Loader:
    return Loader.from_map(values)


def from_dotenv(path: PathLike) -> Loader:
    return Loader.from_dotenv(path)


def from_yaml(path: PathLike) -> Loader:
    return Loader.from_yaml(path)
