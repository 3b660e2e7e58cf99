import json

import pytest

from tools.universal_parser import (
    JAVASCRIPT, PYTHON, RUBY, check_syntax, get_language, python_is_complete,
)


def test_ruby_def_completes_only_at_end():
    assert not RUBY.is_complete("def add(a, b)\n")
    assert not RUBY.is_complete("def add(a, b)\n  a + b\n")
    assert RUBY.is_complete("def add(a, b)\n  a + b\nend\n")


def test_ruby_end_inside_string_does_not_close_block():
    assert not RUBY.is_complete('def label\n  "end"\n')
    assert RUBY.is_complete('def label\n  "end"\nend\n')


def test_javascript_function_completes_at_closing_brace():
    assert not JAVASCRIPT.is_complete("function add(a, b) {\n")
    assert not JAVASCRIPT.is_complete("function add(a, b) {\n  return a + b;\n")
    assert JAVASCRIPT.is_complete("function add(a, b) {\n  return a + b;\n}\n")


def test_python_simple_statement_is_complete():
    assert PYTHON.is_complete("square = lambda x: x * x\n")
    assert not PYTHON.is_complete("total = add(\n")
    assert PYTHON.is_complete("total = add(\n    1,\n    2,\n)\n")


def test_python_block_needs_blank_line_or_end_of_file():
    code = "def add(a, b):\n    return a + b\n"
    assert not python_is_complete("def add(a, b):\n")
    assert not python_is_complete(code)
    assert python_is_complete(code + "\n")
    assert python_is_complete(code, final=True)


def test_python_one_line_suite_is_complete():
    assert python_is_complete("def add(a, b): return a + b\n")


def test_python_nested_method_is_dedented_before_parsing():
    code = "    def hello(self):\n        return 'hi'\n\n"
    assert python_is_complete(code)


def test_python_syntax_error_is_reported_as_incomplete():
    assert not python_is_complete("def add(a, b) return\n\n")


@pytest.mark.parametrize("spec", [PYTHON, RUBY, JAVASCRIPT])
def test_blank_text_is_never_complete(spec):
    assert not spec.is_complete("")
    assert not spec.is_complete("\n   \n")


def test_comment_only_text_is_never_complete():
    assert not PYTHON.is_complete("# just a note\n")
    assert not RUBY.is_complete("# just a note\n\n")
    assert not JAVASCRIPT.is_complete("// just a note\n")


def test_comment_forms():
    assert RUBY.is_comment_line("   # note\n")
    assert not RUBY.is_comment_line("x = 1 # note\n")
    assert JAVASCRIPT.is_comment_line("  // note\n")
    assert not JAVASCRIPT.is_comment_line("# note\n")


def test_get_language_by_suffix():
    assert get_language("lib/thing.rb", {}) is RUBY
    assert get_language("Rakefile.rake", {}) is RUBY
    assert get_language("app.MJS", {}) is JAVASCRIPT
    assert get_language("mod.py", {}) is PYTHON
    assert get_language("no_suffix", {}) is PYTHON


def test_get_language_reads_suffix_overrides_from_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cfg_dir = tmp_path / ".methodsource"
    cfg_dir.mkdir()
    (cfg_dir / "config.json").write_text(json.dumps({"suffixes": {".thor": "ruby"}}), encoding="utf-8")

    assert get_language("tasks.thor") is RUBY


def test_get_language_rejects_unknown_language():
    with pytest.raises(ValueError):
        get_language("x.foo", {"suffixes": {".foo": "cobol"}})


def test_check_syntax_uses_file_suffix():
    assert check_syntax("def f\nend\n", "x.rb")
    assert not check_syntax("def f\nend\n", "x.py")


def test_javascript_class_method_is_complete_inside_class_body():
    assert not JAVASCRIPT.is_complete("  add(a, b) {\n")
    assert not JAVASCRIPT.is_complete("  add(a, b) {\n    return a + b;\n")
    assert JAVASCRIPT.is_complete("  add(a, b) {\n    return a + b;\n  }\n")


def test_python_dedented_next_line_closes_block():
    code = "    def f(self):\n        return 1\n"
    assert python_is_complete(code, next_line="    def g(self):\n")
    assert python_is_complete(code, next_line="x = 2\n")
    assert not python_is_complete(code, next_line="        return 2\n")
    assert not python_is_complete(code, next_line="# trailing note\n")
    assert not python_is_complete(code, next_line="")


@pytest.mark.parametrize("next_line", ["else:\n", "elif y:\n", "except ValueError:\n", "finally:\n", ")\n"])
def test_python_continuation_at_declaration_level_keeps_block_open(next_line):
    assert not python_is_complete("if x:\n    a = 1\n", next_line=next_line)
