# tools/method_source.py — MethodSource v1
"""
Public entry points.

  extract_source(location)  → the entity's literal text, line terminators kept
  extract_comment(location) → the comment block right above it, trimmed
  source_of(obj) / comment_of(obj) → same, starting from a live object

A location is a SourceLocation, a (file_path, line_number) tuple, or None
when the caller could not determine one.
"""
from __future__ import annotations

from typing import Any, Optional, Tuple, Union

from runtime.errors import LocationUnavailable
from runtime.location import SourceLocation
from tools.comment_collector import collect_comment
from tools.expression_reader import read_expression
from tools.reflection import adapt
from tools.source_locator import positioned
from tools.universal_parser import get_language

LocationLike = Union[SourceLocation, Tuple[str, int], None]


def _as_location(location: LocationLike) -> Optional[SourceLocation]:
    if location is None or isinstance(location, SourceLocation):
        return location
    file_path, line_number = location
    return SourceLocation(str(file_path), line_number)


def extract_source(location: LocationLike, name: Optional[str] = None) -> str:
    loc = _as_location(location)
    if loc is None:
        raise LocationUnavailable(name)
    language = get_language(loc.file_path)
    with positioned(loc) as handle:
        return read_expression(handle, language, loc)


def extract_comment(location: LocationLike) -> str:
    """An absent location or a missing comment block both give ""."""
    return collect_comment(_as_location(location)) or ""


def source_of(obj: Any) -> str:
    adapter = adapt(obj)
    return extract_source(adapter.resolve(), adapter.name)


def comment_of(obj: Any) -> str:
    return extract_comment(adapt(obj).resolve())
