"""Extract the raw crate-level doc comments from source code."""

from collections.abc import Iterable, Iterator

_SINGLELINE_MARK = "//!"
_MULTILINE_MARK = "/*!"


def extract_docs(lines: Iterable[str]) -> list[str]:
    """Return the crate-level doc lines found in ``lines``.

    ``lines`` may be any iterable of text lines, such as an open file. Either
    ``//!`` comments or a single ``/*! ... */`` block are recognised, whichever
    appears first; the other style is then ignored.
    """
    it = iter(lines)
    for line in it:
        if line.startswith(_SINGLELINE_MARK):
            return _extract_singleline(line, it)
        if line.startswith(_MULTILINE_MARK):
            return _extract_multiline(line, it)
    return []


def _strip_eol(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def _extract_singleline(first_line: str, rest: Iterator[str]) -> list[str]:
    result = [_normalize_line(first_line)]
    for raw in rest:
        line = _strip_eol(raw)
        if line.startswith(_SINGLELINE_MARK):
            result.append(_normalize_line(line))
        elif line.strip():
            # the docs end where the code starts
            break
    return result


def _extract_multiline(first_line: str, rest: Iterator[str]) -> list[str]:
    result = []
    if len(first_line.strip()) > len(_MULTILINE_MARK):
        result.append(_normalize_line(first_line))

    nesting = 0
    for raw in rest:
        line = _strip_eol(raw)
        nesting += line.count("/*")

        end = line.rfind("*/")
        if end != -1:
            nesting -= line.count("*/")
            if nesting < 0:
                head = line[:end]
                if head.strip():
                    result.append(head)
                break

        result.append(line.rstrip())
    return result


def _normalize_line(line: str) -> str:
    """Strip the comment mark and one following space from a line."""
    stripped = line.strip()
    if stripped in (_SINGLELINE_MARK, _MULTILINE_MARK):
        return ""
    split_at = 4 if line.find(" ") == 3 else 3
    return line[split_at:].rstrip()