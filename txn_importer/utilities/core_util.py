#!/usr/bin/env python3
"""
Core Utilities

Features:
- Converter for config dataclasses (scalars, enums, nested dataclasses, lists/tuples)
- File I/O helpers
- String utilities
"""

from __future__ import annotations

from dataclasses import fields, is_dataclass
from enum import Enum
from pathlib import Path
from typing import (
    IO,
    Any,
    Literal,
    Mapping,
    Optional,
    TypeGuard,
    TypeVar,
    cast,
    get_args,
    get_origin,
    get_type_hints,
    overload,
)

from txn_importer.utilities.converters_scalar import SCALAR_CONVERTERS

# region Common functions


def is_null_or_whitespace(s: Optional[str]) -> bool:
    """Check if a string is None, empty, or consists only of whitespace."""
    return s is None or s.strip() == ""


@overload
def open_for_read(path: Path, binary: Literal[True], **kwargs: Any) -> IO[bytes]: ...
@overload
def open_for_read(path: Path, binary: Literal[False], **kwargs: Any) -> IO[str]: ...


def open_for_read(path: Path, binary: bool = False, **kwargs: Any) -> IO[Any]:
    mode = "rb" if binary else "r"
    return open(path, mode, **kwargs)


# endregion Common functions

# region Universal Converter

E = TypeVar("E", bound=Enum)


def __convert_enum(target_type: type[E], value: object, /) -> E:
    """
    Convert `value` to the given Enum subclass.

    Accepts the member itself, a member *value*, or a member *name*.
    """
    if isinstance(value, target_type):
        return value
    try:
        return target_type(value)
    except ValueError:
        if isinstance(value, str):
            try:
                return target_type[value]
            except KeyError:
                pass
    raise ValueError(f"{value!r} is not a valid {target_type.__name__}")


def __convert_sequence(origin: type, target_type: object, value: object):
    args = get_args(target_type)
    if isinstance(value, (str, bytes, bytearray)) or not isinstance(
        value, (list, tuple)
    ):
        raise TypeError(
            f"Expected a list for {target_type!r}; got {type(value).__name__}"
        )
    # tuple[T, ...] and list[T] share one element type
    elem_t = args[0] if args else object
    items = [v if elem_t is object else convert_value(elem_t, v) for v in value]
    return origin(items)


DC = TypeVar("DC")


@overload
def convert_value(target_type: type[E], value: E) -> E: ...
@overload
def convert_value(target_type: type[DC], value: DC) -> DC: ...
@overload
def convert_value(target_type: object, value: object) -> Any: ...


def convert_value(target_type: object, value: object) -> Any:
    origin = get_origin(target_type)

    # 1) Parameterized list/tuple
    if origin in (list, tuple):
        return __convert_sequence(cast(type, origin), target_type, value)

    # 2) Real classes
    if isinstance(target_type, type):
        if is_dataclass(target_type):
            if isinstance(value, target_type):
                return value
            return from_dict(target_type, value)
        if issubclass(target_type, Enum):
            return __convert_enum(target_type, value)
        if target_type in SCALAR_CONVERTERS:
            return SCALAR_CONVERTERS[target_type](value)
        if isinstance(value, target_type):
            return value

    raise ValueError(
        f"Don’t know how to convert {type(value).__name__} -> {target_type!r}"
    )


# endregion Universal Converter

# region from_dict


def _is_mapping_of_str_any(m: object) -> TypeGuard[Mapping[str, Any]]:
    if not isinstance(m, Mapping):
        return False
    nm: Mapping[object, Any] = cast(Mapping[object, Any], m)
    return all(isinstance(k, str) for k in nm.keys())


@overload
def from_dict(target_type: type[DC], src: Mapping[str, Any], /) -> DC: ...
@overload
def from_dict(target_type: object, src: Any, /) -> Any: ...


def from_dict(target_type: object, src: Any, /) -> Any:
    """
    Reconstruct dataclass `target_type` from a plain dict (handles nesting, enums, lists/tuples).
    Unknown keys are ignored; missing keys fall back to dataclass defaults.
    If `target_type` is not a dataclass, delegates to `convert_value`.
    """
    if not isinstance(target_type, type) or not is_dataclass(target_type):
        return convert_value(target_type, src)

    if not _is_mapping_of_str_any(src):
        raise TypeError(
            f"from_dict expects a string-keyed mapping for {target_type.__name__}, "
            f"got {type(src).__name__}"
        )

    type_hints = get_type_hints(target_type)
    kwargs: dict[str, Any] = {}
    for f in fields(target_type):
        if f.name not in src:
            continue
        ftype = type_hints.get(f.name, f.type)
        kwargs[f.name] = convert_value(ftype, src[f.name])
    return target_type(**kwargs)


# endregion from_dict
