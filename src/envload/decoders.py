from __future__ import annotations

import re
from typing import Any, Callable, Mapping, Optional

from envload.bindings import Kind

Decoder = Callable[[str, Optional[str]], Any]

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")

TRUE_VALUES = frozenset({"1", "t", "T", "TRUE", "true", "True"})
FALSE_VALUES = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def decode_string(raw: str, delimiter: Optional[str] = None) -> str:
    return raw


def decode_int(raw: str, delimiter: Optional[str] = None) -> int:
    if not _INT_PATTERN.fullmatch(raw):
        raise ValueError("expected a base-10 integer")
    return int(raw)


def decode_float(raw: str, delimiter: Optional[str] = None) -> float:
    # float() tolerates padding and digit separators; environment values must not.
    if not raw or raw != raw.strip() or "_" in raw:
        raise ValueError("expected a decimal number")
    try:
        return float(raw)
    except ValueError:
        raise ValueError("expected a decimal number") from None


def decode_bool(raw: str, delimiter: Optional[str] = None) -> bool:
    if raw in TRUE_VALUES:
        return True
    if raw in FALSE_VALUES:
        return False
    raise ValueError("expected one of: " + ", ".join(sorted(TRUE_VALUES | FALSE_VALUES)))


def decode_flag(raw: str, delimiter: Optional[str] = None) -> bool:
    return True


def decode_list(raw: str, delimiter: Optional[str] = None) -> list[str]:
    if not delimiter:
        return list(raw)
    return raw.split(delimiter)


def decode_set(raw: str, delimiter: Optional[str] = None) -> dict[str, bool]:
    return {item: True for item in decode_list(raw, delimiter)}


DECODERS: Mapping[Kind, Decoder] = {
    Kind.STRING: decode_string,
    Kind.INT: decode_int,
    Kind.FLOAT: decode_float,
    Kind.BOOL: decode_bool,
    Kind.FLAG: decode_flag,
    Kind.LIST: decode_list,
    Kind.SET: decode_set,
}


def decode(kind: Kind, raw: str, delimiter: Optional[str] = None) -> Any:
    return DECODERS[kind](raw, delimiter)
