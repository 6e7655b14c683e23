"""Unit tests for the declaration scanner."""

from modwrap.core.scanner import detect_newline, scan


def test_detects_lf_newline() -> None:
    assert detect_newline("a\nb\n") == "\n"


def test_detects_crlf_newline_anywhere_in_text() -> None:
    assert detect_newline("a\nb\r\nc") == "\r\n"


def test_detects_lf_for_text_without_terminators() -> None:
    assert detect_newline("export default 1;") == "\n"


def test_scans_single_import_and_export(single_import_source: str) -> None:
    result = scan(single_import_source)

    assert result.newline == "\n"
    assert [(b.local_name, b.module_path) for b in result.imports.bindings] == [("foo", "'foo'")]
    assert result.imports.first_offset == 0
    assert result.imports.last_offset == len("import foo from 'foo';")
    assert result.imports.first_line == 0

    assert result.export is not None
    assert result.export.start == 23
    assert result.export.end == 23 + len("export default foo;")
    assert result.export.assign_pos == 23 + len("export default ")
    assert result.export.expression == "foo"


def test_import_run_continues_across_blank_lines(multi_import_source: str) -> None:
    result = scan(multi_import_source)

    assert result.imports.local_names == ["$", "util"]
    assert result.imports.module_paths == ["'jquery'", "'./util'"]
    assert result.imports.last_offset == multi_import_source.index("\n\nvar")


def test_import_run_stops_at_first_statement() -> None:
    source = "import a from 'a';\n\nvar x = 1;\nimport b from 'b';\nexport default x;\n"
    result = scan(source)

    assert result.imports.local_names == ["a"]
    assert result.imports.last_offset == len("import a from 'a';")


def test_lines_before_first_import_do_not_stop_the_run() -> None:
    source = "// header comment\n'use strict';\nimport a from 'a';\nexport default a;\n"
    result = scan(source)

    assert result.imports.local_names == ["a"]
    assert result.imports.first_line == 2
    assert result.imports.first_offset == source.index("import")


def test_import_without_semicolon_and_with_indentation() -> None:
    result = scan("  import  thing  from  \"./thing\"\nexport default thing\n")

    assert result.imports.bindings[0].local_name == "thing"
    assert result.imports.bindings[0].module_path == '"./thing"'
    assert result.export is not None
    assert result.export.expression == "thing"


def test_named_imports_are_not_recognized() -> None:
    result = scan("import { a } from 'a';\nexport default a;\n")

    assert result.imports.bindings == []
    assert result.imports.first_offset == -1


def test_export_prefix_includes_leading_whitespace() -> None:
    source = "var x = 1;\n    export   default   x;;\n"
    result = scan(source)

    assert result.export is not None
    assert result.export.start == len("var x = 1;\n")
    assert result.export.assign_pos == result.export.start + len("    export   default   ")
    assert result.export.expression == "x"


def test_only_first_export_is_recognized() -> None:
    source = "export default a;\nexport default b;\n"
    result = scan(source)

    assert result.export is not None
    assert result.export.expression == "a"
    assert result.export.start == 0


def test_no_export_found() -> None:
    result = scan("import a from 'a';\nmodule.exports = a;\n")

    assert result.export is None
    assert result.imports.local_names == ["a"]


def test_offsets_use_crlf_length() -> None:
    source = "import foo from 'foo';\r\nexport default foo;\r\n"
    result = scan(source)

    assert result.newline == "\r\n"
    assert result.export is not None
    assert result.export.start == len("import foo from 'foo';\r\n")
    assert source[result.export.start : result.export.end] == "export default foo;"
    assert source[result.export.assign_pos : result.export.end] == "foo;"


def test_empty_text() -> None:
    result = scan("")

    assert result.imports.bindings == []
    assert result.export is None
