"""Locate the leading import block and the default export of a source file.

Matching is line based and anchored: each pattern must cover a whole line.
Multi-line statements, comments and any other syntax are not understood.
"""

import re

from modwrap.models import ExportSite, ImportBinding, ImportBlock, ScanResult

CRLF = "\r\n"
LF = "\n"

_IMPORT_RE = re.compile(r"^\s*import\s+([A-Za-z_$][\w$]*)\s+from\s+(.+?);*[ \t]*$")
_EXPORT_RE = re.compile(r"^(\s*export\s+default\s+)(.+?);*[ \t]*$")


def detect_newline(text: str) -> str:
    """Return the line terminator of ``text``, assumed consistent for the whole file."""
    return CRLF if CRLF in text else LF


def scan_imports(lines: list[str], newline: str) -> ImportBlock:
    block = ImportBlock()
    cur = 0
    for index, line in enumerate(lines):
        match = _IMPORT_RE.match(line)
        if match:
            block.bindings.append(ImportBinding(local_name=match.group(1), module_path=match.group(2)))
            if block.first_line < 0:
                block.first_line = index
                block.first_offset = cur
            block.last_offset = cur + len(line)
        elif block.first_line > -1 and line.strip():
            break
        cur += len(line) + len(newline)
    return block


def scan_export(lines: list[str], newline: str) -> ExportSite | None:
    cur = 0
    for line in lines:
        match = _EXPORT_RE.match(line)
        if match:
            return ExportSite(
                start=cur,
                end=cur + len(line),
                assign_pos=cur + len(match.group(1)),
                expression=match.group(2),
            )
        cur += len(line) + len(newline)
    return None


def scan(text: str) -> ScanResult:
    newline = detect_newline(text)
    lines = text.split(newline)
    return ScanResult(
        newline=newline,
        imports=scan_imports(lines, newline),
        export=scan_export(lines, newline),
    )
