from __future__ import annotations

from urigrammar.charclass import (
    alpha,
    alphanum,
    digit,
    escaped,
    mark,
    pchar,
    reg_name_char,
    rel_segment_char,
    reserved,
    unreserved,
    uric,
    uric_no_slash,
    user_info_char,
)
from urigrammar.combinators import NO_MATCH, ByteClass, Rule
from urigrammar.cursor import Cursor


def _run(rule: Rule, data: bytes) -> tuple[object, int]:
    cur = Cursor(data)
    v = rule.match(cur)
    return v, cur.i


def test_basic_classes() -> None:
    assert alpha.test(ord("a")) and alpha.test(ord("Z"))
    assert not alpha.test(ord("1"))
    assert digit.test(ord("0")) and not digit.test(ord("a"))
    assert not alpha.test(None)
    assert all(mark.test(b) for b in b"-_.!~*'()")
    assert all(reserved.test(b) for b in b";/?:@&=+$,")
    assert unreserved.test(ord("~")) and unreserved.test(ord("9"))
    assert not unreserved.test(ord("/"))


def test_unions_of_byte_classes_stay_byte_classes() -> None:
    union = alpha | digit
    assert isinstance(union, ByteClass)
    assert union.members == alphanum.members


def test_escaped_is_atomic() -> None:
    assert _run(escaped, b"%2Fx") == (b"%2F", 3)
    assert _run(escaped, b"%aB") == (b"%aB", 3)
    assert _run(escaped, b"%2G") == (NO_MATCH, 0)
    assert _run(escaped, b"%2") == (NO_MATCH, 0)
    assert _run(escaped, b"%") == (NO_MATCH, 0)


def test_pchar() -> None:
    for b in b":@&=+$,a9-~":
        assert _run(pchar, bytes([b])) == (bytes([b]), 1)
    assert _run(pchar, b"%20") == (b"%20", 3)
    for bad in (b"/", b"?", b"#", b";", b"%zz", b" "):
        assert _run(pchar, bad) == (NO_MATCH, 0)


def test_uric_and_no_slash() -> None:
    assert _run(uric, b"/") == (b"/", 1)
    assert _run(uric, b"?") == (b"?", 1)
    assert _run(uric, b"#") == (NO_MATCH, 0)
    assert _run(uric_no_slash, b"/") == (NO_MATCH, 0)
    assert _run(uric_no_slash, b";") == (b";", 1)


def test_derived_sets() -> None:
    # rel_segment excludes ":" so "a:b" cannot read as a relative path.
    assert _run(rel_segment_char, b":") == (NO_MATCH, 0)
    assert _run(rel_segment_char, b"@") == (b"@", 1)
    assert _run(reg_name_char, b":") == (b":", 1)
    assert _run(reg_name_char, b"/") == (NO_MATCH, 0)
    assert _run(user_info_char, b"@") == (NO_MATCH, 0)
    assert _run(user_info_char, b";") == (b";", 1)


def test_bytes_outside_ascii_never_match() -> None:
    for rule in (uric, pchar, reg_name_char):
        assert _run(rule, b"\xc3\xa9") == (NO_MATCH, 0)
