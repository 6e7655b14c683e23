from dataclasses import dataclass

INDENT = "    "


@dataclass(frozen=True)
class Splice:
    """Replace ``[start, end)`` of the original text with ``text``. ``start == end`` inserts."""

    start: int
    end: int
    text: str


class TextBuffer:
    """Mutable working copy of a source file addressed by character offset."""

    def __init__(self, text: str, newline: str) -> None:
        self._text = text
        self._newline = newline

    @property
    def text(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def insert_at(self, offset: int, text: str) -> None:
        self._text = self._text[:offset] + text + self._text[offset:]

    def replace_range(self, start: int, end: int, text: str) -> None:
        self._text = self._text[:start] + text + self._text[end:]

    def apply(self, splices: list[Splice]) -> None:
        """Apply splices whose offsets refer to the text before any of them ran.

        Splices are applied from the bottom of the text upward so that no
        offset is invalidated by an earlier edit. On a shared start offset the
        wider range goes first, which keeps an insertion in front of a
        replacement that begins at the same position.
        """
        for splice in sorted(splices, key=lambda s: (s.start, s.end), reverse=True):
            self.replace_range(splice.start, splice.end, splice.text)

    def indent_lines(self, start_line: int, end_line: int | None = None) -> None:
        """Prefix lines ``[start_line, end_line)`` with one indentation unit.

        A negative ``end_line`` counts from the last line, so ``-2`` leaves the
        closing line and the empty line after the final terminator untouched.
        """
        lines = self._text.split(self._newline)
        if end_line is None or end_line > len(lines):
            end_line = len(lines)
        elif end_line < 0:
            end_line = len(lines) + end_line
        for index in range(max(start_line, 0), end_line):
            lines[index] = INDENT + lines[index]
        self._text = self._newline.join(lines)
