"""Turn doc-comment markdown into plain markdown.

Code blocks that are Rust doc tests become ``rust`` blocks with hidden lines
removed, ``text`` blocks lose their language tag, and headings may be pushed
one level down so the crate name can sit at the top.
"""

import re
from collections.abc import Iterable
from enum import Enum, auto

_DELIMITER = r"(?P<delimiter>`{3,4}|~{3,4})"
_RE_CODE_RUST = re.compile(
    _DELIMITER + r"(?:rust|(?:(?:rust,)?(?:no_run|ignore|should_panic)))?"
)
_RE_CODE_TEXT = re.compile(_DELIMITER + r"text")
_RE_CODE_OTHER = re.compile(_DELIMITER + r"\w[\w,\+]*")


class _Section(Enum):
    NONE = auto()
    CODE_RUST = auto()
    CODE_OTHER = auto()


class Processor:
    """Stateful line-by-line transformer for doc markdown."""

    def __init__(self, indent_headings: bool = True) -> None:
        self.indent_headings = indent_headings
        self._section = _Section.NONE
        self._delimiter: str | None = None

    def process_line(self, line: str) -> str | None:
        """Return the transformed line, or ``None`` if it is to be dropped."""
        if self._section is _Section.CODE_RUST and line.startswith("# "):
            return None

        if self._section is _Section.NONE:
            if self.indent_headings and line.startswith("#"):
                return "#" + line
            if match := _RE_CODE_RUST.fullmatch(line):
                self._section = _Section.CODE_RUST
                self._delimiter = match["delimiter"]
                return self._delimiter + "rust"
            if match := _RE_CODE_TEXT.fullmatch(line):
                self._section = _Section.CODE_OTHER
                self._delimiter = match["delimiter"]
                return self._delimiter
            if match := _RE_CODE_OTHER.fullmatch(line):
                self._section = _Section.CODE_OTHER
                self._delimiter = match["delimiter"]
            return line

        if line == self._delimiter:
            self._section = _Section.NONE
            self._delimiter = None
        return line


def process_docs(lines: Iterable[str], indent_headings: bool = True) -> list[str]:
    """Process doc lines into markdown lines."""
    processor = Processor(indent_headings)
    return [
        processed
        for processed in map(processor.process_line, lines)
        if processed is not None
    ]