# tools/expression_reader.py — MethodSource v1
from __future__ import annotations

from typing import IO

from runtime.errors import UnexpectedEndOfInput
from runtime.location import SourceLocation
from runtime.logger import log
from tools.source_locator import read_line
from tools.universal_parser import LanguageSpec


def read_expression(handle: IO[str], language: LanguageSpec, location: SourceLocation) -> str:
    """
    Append lines from a positioned handle until the buffer forms one complete
    unit in `language`, and return the buffer verbatim.

    The first accepted prefix wins: no line is appended once the validator
    says yes, even if a longer buffer would also parse. Lines are never
    removed from the buffer. The validator also sees the line after the
    buffer (read ahead, never appended) so Python can tell a dedent closed
    the block.

    At end of file the validator is asked once more with final=True (Python
    closes open blocks there); if it still says no, UnexpectedEndOfInput.
    """
    code = ""
    count = 0
    line = read_line(handle, location)
    while True:
        if not line:
            if code and language.is_complete(code, final=True):
                log.debug(f"{location}: complete at end of file after {count} line(s)")
                return code
            log.warning(f"{location}: no complete {language.name} expression before end of file")
            raise UnexpectedEndOfInput(location.file_path, location.line_number, count)

        code += line
        count += 1
        upcoming = read_line(handle, location)
        if language.is_complete(code, next_line=upcoming):
            log.debug(f"{location}: complete after {count} line(s)")
            return code
        log.debug(f"{location}: incomplete after {count} line(s)")
        line = upcoming
