# tools/universal_parser.py — MethodSource v1
"""
Syntax validators: "does this text form one complete, self-contained unit?"

Supports:
  Python      : host parser (ast) + tokenizer, offside-rule aware
  Ruby        : tree-sitter grammar, complete = no ERROR / MISSING nodes
  JavaScript  : tree-sitter grammar, same rule; class methods are also
                tried inside a class body

Each language also carries its single-line comment form, which the comment
collector uses. get_language() picks the entry by file suffix; unknown
suffixes fall back to Python.

A validator never raises on bad input. Incomplete and invalid text are both
reported as False; the caller only needs to know whether to keep reading.
"""
from __future__ import annotations

import ast
import io
import re
import tokenize
import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Optional, Pattern, Tuple

import tree_sitter_javascript
import tree_sitter_ruby
from tree_sitter import Language, Parser

from runtime.config import load_config

BLANK_RE = re.compile(r"^\s*$")


# ─────────────────────────────────────────────────────────────────────────────
# Python (host parser)
# ─────────────────────────────────────────────────────────────────────────────

def _strip_base_indent(code: str) -> str:
    """Remove the declaration line's indentation so nested defs parse."""
    lines = code.splitlines(keepends=True)
    if not lines:
        return code
    first = lines[0]
    base = first[: len(first) - len(first.lstrip(" \t"))]
    if not base or BLANK_RE.match(first):
        return code
    return "".join(l[len(base):] if l.startswith(base) else l for l in lines)


def _opens_suite(code: str) -> bool:
    """True if the tokenizer sees an indented block anywhere in code."""
    try:
        for tok in tokenize.generate_tokens(io.StringIO(code).readline):
            if tok.type == tokenize.INDENT:
                return True
    except (tokenize.TokenError, SyntaxError):
        return True
    return False


_CONTINUES_SUITE_RE = re.compile(r"^\s*(else|elif|except|finally|case)\b|^\s*[)\]}]")


def _indent_width(line: str) -> int:
    return len(line) - len(line.lstrip(" \t"))


def _closes_suite(first_line: str, next_line: Optional[str]) -> bool:
    """True if next_line starts a new statement at or left of the declaration."""
    if not next_line or BLANK_RE.match(next_line) or next_line.lstrip().startswith("#"):
        return False
    if _indent_width(next_line) > _indent_width(first_line):
        return False
    return _CONTINUES_SUITE_RE.match(next_line) is None


def python_is_complete(code: str, final: bool = False, next_line: Optional[str] = None) -> bool:
    """
    Python blocks carry no closing token, so an indented suite only counts as
    closed once a blank line follows it (the interactive interpreter's rule),
    the line after it dedents to the declaration's level (next_line, read
    ahead but not part of the buffer), or the file ends (final=True).
    """
    body = _strip_base_indent(code)
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", (SyntaxWarning, DeprecationWarning))
        try:
            tree = compile(body, "<candidate>", "exec", ast.PyCF_ONLY_AST, dont_inherit=True)
        except (SyntaxError, ValueError, OverflowError):
            return False
    if not tree.body:
        return False
    if final or not _opens_suite(body):
        return True
    if _closes_suite(code.splitlines()[0], next_line):
        return True
    return BLANK_RE.match(body.splitlines()[-1]) is not None


# ─────────────────────────────────────────────────────────────────────────────
# Tree-sitter backed languages
# ─────────────────────────────────────────────────────────────────────────────

class TreeSitterValidator:
    """
    Complete when the parse tree has no ERROR / MISSING nodes, either bare or
    inside one of `wrappers` (prefix, suffix) for fragments that are only legal
    nested, such as JavaScript class methods.
    """

    def __init__(self, language_fn: Callable[[], object],
                 wrappers: Tuple[Tuple[str, str], ...] = ()):
        self._language = Language(language_fn())
        self._wrappers = wrappers

    def _parses(self, text: str) -> bool:
        # Parser per call; nothing is shared between callers.
        tree = Parser(self._language).parse(text.encode("utf-8"))
        return not tree.root_node.has_error

    def __call__(self, code: str, final: bool = False, next_line: Optional[str] = None) -> bool:
        if self._parses(code):
            return True
        return any(self._parses(prefix + code + suffix) for prefix, suffix in self._wrappers)


# ─────────────────────────────────────────────────────────────────────────────
# Registry
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class LanguageSpec:
    name:      str
    suffixes:  Tuple[str, ...]
    comment:   Pattern[str]          # single-line comment form
    validator: Callable[..., bool]

    def is_blank_line(self, line: str) -> bool:
        return BLANK_RE.match(line) is not None

    def is_comment_line(self, line: str) -> bool:
        return self.comment.match(line) is not None

    def is_complete(self, code: str, final: bool = False, next_line: Optional[str] = None) -> bool:
        lines = code.splitlines()
        if all(self.is_blank_line(l) or self.is_comment_line(l) for l in lines):
            return False
        return self.validator(code, final, next_line)


PYTHON = LanguageSpec(
    name="python",
    suffixes=(".py", ".pyw"),
    comment=re.compile(r"^\s*#"),
    validator=python_is_complete,
)

RUBY = LanguageSpec(
    name="ruby",
    suffixes=(".rb", ".rake", ".gemspec", ".ru"),
    comment=re.compile(r"^\s*#"),
    validator=TreeSitterValidator(tree_sitter_ruby.language),
)

JAVASCRIPT = LanguageSpec(
    name="javascript",
    suffixes=(".js", ".mjs", ".cjs", ".jsx"),
    comment=re.compile(r"^\s*//"),
    validator=TreeSitterValidator(
        tree_sitter_javascript.language,
        wrappers=(("class _ {\n", "\n}"),),
    ),
)

LANGUAGES: Dict[str, LanguageSpec] = {spec.name: spec for spec in (PYTHON, RUBY, JAVASCRIPT)}

_BY_SUFFIX: Dict[str, LanguageSpec] = {
    suffix: spec for spec in LANGUAGES.values() for suffix in spec.suffixes
}


def get_language(file_path: str, cfg: Optional[dict] = None) -> LanguageSpec:
    """Pick the language for file_path; config 'suffixes' override the built-ins."""
    cfg = cfg if cfg is not None else load_config()
    suffix = Path(str(file_path)).suffix.lower()
    extra = {k.lower(): v for k, v in (cfg.get("suffixes") or {}).items()}
    if suffix in extra:
        spec = LANGUAGES.get(str(extra[suffix]).lower())
        if spec is None:
            raise ValueError(f"Unknown language {extra[suffix]!r} for suffix {suffix!r}")
        return spec
    return _BY_SUFFIX.get(suffix, PYTHON)


def check_syntax(code: str, file_path: str) -> bool:
    """Returns True if code forms one complete unit in file_path's language."""
    return get_language(file_path).is_complete(code)
