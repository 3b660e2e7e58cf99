# runtime/errors.py — MethodSource v1
"""
Error taxonomy for source / comment extraction.

  LocationUnavailable   : no (file, line) pair could be resolved
  SourceFileUnreadable  : the backing file could not be opened
  UnexpectedEndOfInput  : the file ended before a complete unit was read

None of these are retried. The file handle is always closed before one of
them leaves the extraction call.
"""
from typing import Optional


class MethodSourceError(Exception):
    pass


class LocationUnavailable(MethodSourceError):
    def __init__(self, name: Optional[str] = None):
        self.name = name
        if name:
            msg = f"Cannot locate source for this callable: {name}"
        else:
            msg = "Cannot locate source: no source location available"
        super().__init__(msg)


class SourceFileUnreadable(MethodSourceError):
    def __init__(self, file_path: str, reason: str = ""):
        self.file_path = file_path
        msg = f"Backing file unreadable: {file_path}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class UnexpectedEndOfInput(MethodSourceError):
    def __init__(self, file_path: str, line_number: int, lines_read: int):
        self.file_path = file_path
        self.line_number = line_number
        self.lines_read = lines_read
        super().__init__(
            f"{file_path}:{line_number}: reached end of file after {lines_read} "
            f"line(s) without a complete expression"
        )
