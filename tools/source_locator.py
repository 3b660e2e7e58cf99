# tools/source_locator.py — MethodSource v1
"""
Location resolution: open the backing file and advance the read cursor to the
first line of the entity's own text.

Files are read as plain text in the configured encoding (platform default
when unset) with newline="" so original line terminators survive.
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import IO, Iterator, Optional

from runtime.config import load_config
from runtime.errors import SourceFileUnreadable, UnexpectedEndOfInput
from runtime.location import SourceLocation
from runtime.logger import log


def open_source(file_path: str, encoding: Optional[str] = None) -> IO[str]:
    try:
        handle = open(file_path, "r", encoding=encoding, newline="")
    except OSError as e:
        log.debug(f"open failed for {file_path}: {e}")
        raise SourceFileUnreadable(file_path, e.strerror or str(e)) from e
    log.debug(f"opened {file_path}")
    return handle


def read_line(handle: IO[str], location: SourceLocation) -> str:
    """One line including its terminator, or "" at end of file."""
    try:
        return handle.readline()
    except UnicodeDecodeError as e:
        raise SourceFileUnreadable(location.file_path, f"cannot decode: {e.reason}") from e


def lines_before(handle: IO[str], location: SourceLocation) -> Iterator[str]:
    """Yield the lines above location.line_number; raise if the file is shorter."""
    for read in range(location.line_number - 1):
        line = read_line(handle, location)
        if not line:
            log.warning(f"{location}: file has only {read} line(s)")
            raise UnexpectedEndOfInput(location.file_path, location.line_number, read)
        yield line


def skip_lines(handle: IO[str], location: SourceLocation) -> None:
    for _ in lines_before(handle, location):
        pass


def open_at(location: Optional[SourceLocation]) -> Optional[IO[str]]:
    """
    Returns an open handle positioned just before location.line_number, or
    None when the location is absent. The caller owns (and closes) the handle.
    """
    if location is None:
        return None
    handle = open_source(location.file_path, load_config().get("encoding"))
    try:
        skip_lines(handle, location)
    except BaseException:
        handle.close()
        raise
    return handle


@contextmanager
def positioned(location: Optional[SourceLocation]) -> Iterator[Optional[IO[str]]]:
    """open_at() as a scope: the handle is closed on every exit path."""
    handle = open_at(location)
    try:
        yield handle
    finally:
        if handle is not None:
            handle.close()
