from __future__ import annotations

import logging

from .ast import AbsoluteUri, FragmentRef, RelativeUri, UriKind
from .errors import ParseError
from .grammar import Grammar, Match
from .spans import Span
from .uri import START, build_uri_grammar


logger = logging.getLogger(__name__)

_GRAMMAR: Grammar | None = None


def _get_grammar() -> Grammar:
    global _GRAMMAR
    if _GRAMMAR is None:
        _GRAMMAR = build_uri_grammar()
        logger.debug("built URI grammar with %d rules", len(_GRAMMAR.rules))
    return _GRAMMAR


def _as_bytes(data: bytes | bytearray | memoryview | str, source: str) -> bytes:
    if isinstance(data, str):
        try:
            return data.encode("ascii")
        except UnicodeEncodeError as e:
            raise ParseError(
                span=Span(source=source, start=e.start, end=e.end),
                message="non-ASCII character in URI",
                hint="percent-encode the UTF-8 bytes of the character first",
            ) from None
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"expected bytes or str, got {type(data)!r}")


def _kind(v: object) -> UriKind | None:
    if v is not None and not isinstance(v, (AbsoluteUri, RelativeUri, FragmentRef)):
        raise RuntimeError(f"parser returned unexpected value: {type(v)!r}")
    return v


def rule_names() -> tuple[str, ...]:
    return _get_grammar().names()


def match_rule(
    name: str,
    data: bytes | bytearray | memoryview | str,
    *,
    pos: int = 0,
    source: str = "<memory>",
) -> Match | None:
    """Run the grammar rule *name* at *pos*.

    Returns None when the rule does not match. A Match reports the rule's
    value and the span it consumed; whatever follows ``span.end`` was not
    examined as part of the result, so callers that need the whole input
    to match must compare ``span.end`` to the input length themselves.
    """
    return _get_grammar().match(name, _as_bytes(data, source), pos=pos, source=source)


def parse_uri_reference(data: bytes | bytearray | memoryview | str) -> UriKind | None:
    """Parse the longest URI reference at the start of *data*.

    Returns None for empty input and for input that starts with nothing
    the grammar recognizes.
    """
    m = match_rule(START, data)
    if m is None:
        return None
    return _kind(m.value)


def parse_uri(data: bytes | bytearray | memoryview | str, *, source: str = "<memory>") -> UriKind:
    """Parse *data* as one complete URI reference or raise ParseError."""
    raw = _as_bytes(data, source)
    m = _get_grammar().match(START, raw, source=source)
    out = _kind(m.value) if m is not None else None
    if out is None:
        at = Span(source=source, start=0, end=min(1, len(raw)))
        if not raw:
            err = ParseError(span=at, message="empty URI reference")
        else:
            err = ParseError(
                span=at,
                message=f"unexpected byte {raw[0:1]!r}",
                hint="a URI reference starts with a scheme, a path or '#'",
            )
        logger.debug("rejected %r: %s", raw, err.message)
        raise err

    end = m.span.end
    if end != len(raw):
        err = ParseError(
            span=Span(source=source, start=end, end=end + 1),
            message=f"unexpected byte {raw[end:end + 1]!r} after URI reference",
            hint=f"only the first {end} bytes form a URI reference",
        )
        logger.debug("rejected %r: %s", raw, err.message)
        raise err
    return out
