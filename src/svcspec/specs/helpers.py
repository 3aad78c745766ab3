"""Shared helpers for reading and writing spec TOML documents.

Every failure surfaces as ServiceSpecParse with the underlying message preserved.
"""

from __future__ import annotations

import tomllib
from enum import StrEnum
from typing import Any, Callable, TypeVar

import tomli_w

from svcspec.core.errors import ServiceSpecParse, SvcSpecError

E = TypeVar("E", bound=StrEnum)
T = TypeVar("T")


def load_toml(text: str) -> dict[str, Any]:
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ServiceSpecParse(str(e)) from e


def dump_toml(data: dict[str, Any]) -> str:
    return tomli_w.dumps(data)


def get_str(data: dict[str, Any], key: str) -> str | None:
    """Return a string field, None when absent."""
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ServiceSpecParse(f"invalid type for '{key}': expected a string")
    return value


def get_str_list(data: dict[str, Any], key: str) -> list[str] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ServiceSpecParse(f"invalid type for '{key}': expected a list of strings")
    return value


def get_enum(
    data: dict[str, Any],
    key: str,
    enum_cls: type[E],
    normalize: Callable[[str], str] | None = None,
) -> E | None:
    value = get_str(data, key)
    if value is None:
        return None
    if normalize is not None:
        value = normalize(value)
    try:
        return enum_cls(value)
    except ValueError as e:
        choices = ", ".join(member.value for member in enum_cls)
        raise ServiceSpecParse(
            f"unknown variant '{value}' for '{key}', expected one of: {choices}"
        ) from e


def get_parsed(data: dict[str, Any], key: str, parse: Callable[[str], T]) -> T | None:
    """Parse a string field with one of the identity or bind grammars."""
    value = get_str(data, key)
    if value is None:
        return None
    try:
        return parse(value)
    except ServiceSpecParse:
        raise
    except SvcSpecError as e:
        raise ServiceSpecParse(f"invalid value for '{key}': {e.message}") from e


def get_parsed_list(data: dict[str, Any], key: str, parse: Callable[[str], T]) -> list[T] | None:
    values = get_str_list(data, key)
    if values is None:
        return None
    try:
        return [parse(value) for value in values]
    except SvcSpecError as e:
        raise ServiceSpecParse(f"invalid value in '{key}': {e.message}") from e
