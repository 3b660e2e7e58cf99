# tools/reflection.py — MethodSource v1
"""
Where does a callable's text start?

Rather than patching built-in types, callers wrap an object with adapt() and
ask the adapter to resolve() a SourceLocation. Every adapter answers None
when the object has no literal source behind it (builtins, partials, code
compiled from strings).
"""
from __future__ import annotations

import functools
import inspect
import os
import sys
import types
from typing import Any, Optional, Protocol

from runtime.location import SourceLocation


class HasSourceLocation(Protocol):
    name: Optional[str]

    def resolve(self) -> Optional[SourceLocation]:
        ...


def _name_of(obj: Any) -> Optional[str]:
    for attr in ("__qualname__", "__name__", "co_qualname", "co_name"):
        value = getattr(obj, attr, None)
        if isinstance(value, str):
            return value
    return None


def _is_synthetic(filename: str) -> bool:
    return not filename or (filename.startswith("<") and filename.endswith(">"))


class FixedLocation:
    """A location already known (or known to be absent)."""

    def __init__(self, location: Optional[SourceLocation], name: Optional[str] = None):
        self.location = location
        self.name = name

    def resolve(self) -> Optional[SourceLocation]:
        return self.location


class CodeAdapter:
    def __init__(self, code: types.CodeType, name: Optional[str] = None):
        self.code = code
        self.name = name or _name_of(code)

    def resolve(self) -> Optional[SourceLocation]:
        if _is_synthetic(self.code.co_filename) or self.code.co_firstlineno < 1:
            return None
        return SourceLocation(self.code.co_filename, self.code.co_firstlineno)


class ClassAdapter:
    # __firstlineno__ is only recorded by newer interpreters (3.13+).
    def __init__(self, cls: type):
        self.cls = cls
        self.name = _name_of(cls)

    def resolve(self) -> Optional[SourceLocation]:
        line = getattr(self.cls, "__firstlineno__", None)
        module = sys.modules.get(getattr(self.cls, "__module__", None) or "")
        file_path = getattr(module, "__file__", None)
        if not isinstance(line, int) or line < 1 or not file_path or _is_synthetic(file_path):
            return None
        return SourceLocation(file_path, line)


def _is_location_pair(obj: Any) -> bool:
    return (isinstance(obj, tuple) and len(obj) == 2
            and isinstance(obj[0], (str, os.PathLike))
            and isinstance(obj[1], int) and not isinstance(obj[1], bool))


_GENERATOR_CODE = (
    (types.GeneratorType, "gi_code"),
    (types.CoroutineType, "cr_code"),
    (types.AsyncGeneratorType, "ag_code"),
)


def adapt(obj: Any) -> HasSourceLocation:
    """Pick the adapter for obj. Unknown objects resolve to absent."""
    if obj is None or isinstance(obj, SourceLocation):
        return FixedLocation(obj)
    if _is_location_pair(obj):
        return FixedLocation(SourceLocation(os.fspath(obj[0]), obj[1]))

    if isinstance(obj, (classmethod, staticmethod)):
        return adapt(obj.__func__)
    if isinstance(obj, property):
        if obj.fget is None:
            return FixedLocation(None, _name_of(obj))
        return adapt(obj.fget)
    if isinstance(obj, types.MethodType):
        return adapt(obj.__func__)
    if isinstance(obj, functools.partial):
        return FixedLocation(None, _name_of(obj.func) or "functools.partial")

    if isinstance(obj, types.FunctionType):
        inner = inspect.unwrap(obj)
        if inner is not obj:
            return adapt(inner)
        return CodeAdapter(obj.__code__, _name_of(obj))

    if isinstance(obj, types.TracebackType):
        obj = obj.tb_frame
    if isinstance(obj, types.FrameType):
        return CodeAdapter(obj.f_code)
    for kind, attr in _GENERATOR_CODE:
        if isinstance(obj, kind):
            return CodeAdapter(getattr(obj, attr), _name_of(obj))
    if isinstance(obj, types.CodeType):
        return CodeAdapter(obj)
    if isinstance(obj, type):
        return ClassAdapter(obj)

    return FixedLocation(None, _name_of(obj) or repr(obj))
