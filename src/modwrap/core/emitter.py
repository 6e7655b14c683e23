import json
import re

from modwrap.core.conventions import AMD, CJS, GLOBALS, normalize_convention
from modwrap.core.splice import Splice, TextBuffer
from modwrap.models import ExportSite, ImportBlock, ScanResult

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][\w$]*$")


def _closing_splice(text: str, newline: str, closing: str) -> Splice:
    # The final terminator is dropped; every closing text ends with its own.
    if text.endswith(newline):
        return Splice(len(text) - len(newline), len(text), closing)
    return Splice(len(text), len(text), closing)


def _import_splice(imports: ImportBlock, newline: str, header: str) -> Splice:
    if imports.last_offset > 0:
        return Splice(imports.first_offset, imports.last_offset + len(newline), header)
    return Splice(max(imports.first_offset, 0), max(imports.first_offset, 0), header)


def _export_splice(export: ExportSite, replacement: str) -> Splice:
    return Splice(export.start, export.assign_pos, replacement)


def _amd_splices(text: str, scan: ScanResult, export: ExportSite) -> list[Splice]:
    nl = scan.newline
    paths = ", ".join(scan.imports.module_paths)
    names = ", ".join(scan.imports.local_names)
    return [
        _closing_splice(text, nl, f"{nl}}});{nl}"),
        _export_splice(export, "return "),
        _import_splice(scan.imports, nl, f"define([{paths}], function ({names}) {{{nl}"),
    ]


def _cjs_splices(text: str, scan: ScanResult, export: ExportSite) -> list[Splice]:
    nl = scan.newline
    header = ""
    if scan.imports.bindings:
        requires = f",{nl}".join(f"{b.local_name} = require({b.module_path})" for b in scan.imports.bindings)
        header = f"var {requires};{nl}"
    return [
        _closing_splice(text, nl, nl),
        _export_splice(export, "module.exports = "),
        _import_splice(scan.imports, nl, header),
    ]


def _global_member(expression: str) -> str:
    # Non-identifier exports such as literals need bracket access to stay valid.
    if _IDENTIFIER_RE.match(expression):
        return f"global.{expression}"
    return f"global[{json.dumps(expression)}]"


def _globals_splices(text: str, scan: ScanResult, export: ExportSite) -> list[Splice]:
    nl = scan.newline
    params = "".join(f", {name}" for name in scan.imports.local_names)
    return [
        _closing_splice(text, nl, f"{nl}}}(this{params}));{nl}"),
        _export_splice(export, f"{_global_member(export.expression)} = "),
        _import_splice(scan.imports, nl, f"(function (global{params}) {{{nl}"),
    ]


_SPLICE_BUILDERS = {
    AMD: _amd_splices,
    CJS: _cjs_splices,
    GLOBALS: _globals_splices,
}

_WRAPPED_CONVENTIONS = frozenset({AMD, GLOBALS})


def emit(text: str, scan: ScanResult, convention: str) -> str:
    """Rewrite ``text`` into ``convention`` using the offsets found by ``scan``.

    Raises ValueError if the scan found no default export.
    """
    if scan.export is None:
        raise ValueError("Cannot emit a module without a default export.")
    resolved = normalize_convention(convention)

    buffer = TextBuffer(text, scan.newline)
    buffer.apply(_SPLICE_BUILDERS[resolved](text, scan, scan.export))

    if resolved in _WRAPPED_CONVENTIONS:
        # Body starts on the line after the header; the closing line stays flush.
        buffer.indent_lines(max(scan.imports.first_line, 0) + 1, -2)
    return buffer.text
