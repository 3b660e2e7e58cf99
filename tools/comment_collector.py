# tools/comment_collector.py — MethodSource v1
"""
Collects the comment block directly above a location.

Single forward pass from the top of the file: comment and blank lines are
buffered, any other line empties the buffer. Whatever is left when the
declaration line is reached is the block that touches the entity.
"""
from __future__ import annotations

from typing import List, Optional

from runtime.config import load_config
from runtime.location import SourceLocation
from runtime.logger import log
from tools.source_locator import lines_before, open_source
from tools.universal_parser import LanguageSpec, get_language


def collect_comment(location: Optional[SourceLocation],
                    language: Optional[LanguageSpec] = None) -> Optional[str]:
    """Returns the trimmed comment block, "" when there is none, None when location is absent."""
    if location is None:
        return None

    cfg = load_config()
    language = language or get_language(location.file_path, cfg)
    buffer: List[str] = []

    with open_source(location.file_path, cfg.get("encoding")) as handle:
        for line in lines_before(handle, location):
            if language.is_blank_line(line) or language.is_comment_line(line):
                buffer.append(line)
            else:
                buffer.clear()

    comment = "".join(buffer).strip()
    log.debug(f"{location}: {len(comment.splitlines())} comment line(s)")
    return comment
