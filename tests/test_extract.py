import io

from readmegen.extract import extract_docs

EXPECTED = [
    "first line",
    "",
    "```",
    'let rust_code = "safe";',
    "```",
    "",
    "```C",
    "int i = 0; // no rust code",
    "```",
]

INPUT_SINGLELINE = (
    "//! first line \n"
    "//! \n"
    "//! ``` \n"
    '//! let rust_code = "safe"; \n'
    "//! ``` \n"
    "//! \n"
    "//! ```C \n"
    "//! int i = 0; // no rust code \n"
    "//! ``` \n"
    "use std::any::Any; \n"
    "fn main() {}"
)

INPUT_MULTILINE = (
    "/*! \n"
    "first line \n"
    "\n"
    "``` \n"
    'let rust_code = "safe"; \n'
    "``` \n"
    "\n"
    "```C \n"
    "int i = 0; // no rust code \n"
    "``` \n"
    "*/ \n"
    "use std::any::Any; \n"
    "fn main() {}"
)


def _docs(text):
    return extract_docs(io.StringIO(text))


def test_extract_docs_singleline_style():
    assert _docs(INPUT_SINGLELINE) == EXPECTED


def test_extract_docs_multiline_style():
    assert _docs(INPUT_MULTILINE) == EXPECTED


def test_extract_docs_mix_styles_singleline():
    text = "//! singleline \n/*! \nmultiline \n*/"
    assert _docs(text) == ["singleline"]


def test_extract_docs_mix_styles_multiline():
    text = "/*! \nmultiline \n*/ \n//! singleline"
    assert _docs(text) == ["multiline"]


def test_extract_docs_nested_level_1():
    text = "/*! \nlevel 0 \n/* \nlevel 1 \n*/ \nlevel 0 \n*/ \nfn main() {}"
    assert _docs(text) == ["level 0", "/*", "level 1", "*/", "level 0"]


def test_extract_docs_nested_level_2():
    text = (
        "/*! \nlevel 0 \n/* \nlevel 1 \n/* \nlevel 2 \n*/ \n"
        "level 1 \n*/ \nlevel 0 \n*/ \nfn main() {}"
    )
    assert _docs(text) == [
        "level 0", "/*", "level 1", "/*", "level 2", "*/", "level 1", "*/", "level 0",
    ]


def test_no_docs_gives_empty_list():
    assert _docs("fn main() {}\n// plain comment\n") == []


def test_leading_plain_comment_is_skipped():
    text = "// Misleading first comment\n\n//! Test crate\n//!\n//! more\n"
    assert _docs(text) == ["Test crate", "", "more"]


def test_blank_lines_inside_singleline_docs_do_not_end_them():
    text = "//! one\n\n//! two\nfn main() {}\n//! three\n"
    assert _docs(text) == ["one", "two"]


def test_text_on_multiline_opening_line_is_kept():
    text = "/*! opening\nbody\n*/\n"
    assert _docs(text) == ["opening", "body"]


def test_text_before_closing_mark_is_kept():
    text = "/*!\nbody\ntail */\n"
    assert _docs(text) == ["body", "tail "]


def test_mark_without_space_keeps_whole_text():
    assert _docs("//!no space here\n") == ["no space here"]


def test_crlf_line_endings():
    text = "//! first\r\n//! second\r\nfn main() {}\r\n"
    assert _docs(text) == ["first", "second"]


def test_accepts_a_list_of_lines():
    assert extract_docs(["//! a\n", "//! b\n"]) == ["a", "b"]