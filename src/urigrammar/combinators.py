from __future__ import annotations

"""
Rule combinators for ordered (PEG style) recursive descent over bytes.

Rules compose with operators:

- ``a & b & c``  sequence, value is the flat tuple ``(va, vb, vc)``
- ``a | b | c``  ordered alternation, first success wins
- ``a @ act``    semantic action, value is ``act(va)``

A rule that does not match returns :data:`NO_MATCH` and leaves the
cursor where it found it.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from .cursor import Cursor


class _NoMatch:
    __slots__ = ()

    def __repr__(self) -> str:
        return "NO_MATCH"

    def __bool__(self) -> bool:
        return False


NO_MATCH = _NoMatch()


def _coerce(v: object) -> "Rule":
    if isinstance(v, Rule):
        return v
    if isinstance(v, (bytes, bytearray)):
        return Literal(bytes(v))
    raise TypeError(f"cannot use {type(v)!r} as a grammar rule")


class Rule:
    __slots__ = ()

    def match(self, cur: Cursor) -> object:
        start = cur.mark()
        out = self._match(cur)
        if out is NO_MATCH:
            cur.reset(start)
        return out

    def _match(self, cur: Cursor) -> object:
        raise NotImplementedError

    def __and__(self, other):
        if not isinstance(other, (Rule, bytes, bytearray)):
            return NotImplemented
        return Seq((self, _coerce(other)))

    def __rand__(self, other):
        if not isinstance(other, (bytes, bytearray)):
            return NotImplemented
        return Seq((_coerce(other), self))

    def __or__(self, other):
        if not isinstance(other, (Rule, bytes, bytearray)):
            return NotImplemented
        other = _coerce(other)
        if isinstance(other, Choice):
            return Choice((self, *other.alts))
        return Choice((self, other))

    def __ror__(self, other):
        if not isinstance(other, (bytes, bytearray)):
            return NotImplemented
        return Choice((_coerce(other), self))

    def __matmul__(self, action):
        if not callable(action):
            return NotImplemented
        return Action(self, action)


@dataclass(frozen=True, slots=True)
class ByteClass(Rule):
    """A single byte drawn from a fixed set."""

    members: frozenset[int]
    label: str = ""

    def _match(self, cur: Cursor) -> object:
        b = cur.peek()
        if b is None or b not in self.members:
            return NO_MATCH
        return cur.advance()

    def test(self, b: int | None) -> bool:
        return b is not None and b in self.members

    def __or__(self, other):
        # Two byte sets collapse into one set instead of a Choice.
        if isinstance(other, ByteClass):
            label = f"{self.label}|{other.label}" if self.label and other.label else ""
            return ByteClass(self.members | other.members, label)
        return Rule.__or__(self, other)

    def __str__(self) -> str:
        if self.label:
            return self.label
        return "[" + "".join(chr(b) for b in sorted(self.members)) + "]"


def byte_class(*items: object, label: str = "") -> ByteClass:
    """Build a ByteClass from strings of characters, (first, last)
    inclusive ranges and other ByteClass instances."""
    members: set[int] = set()
    for it in items:
        if isinstance(it, ByteClass):
            members |= it.members
        elif isinstance(it, tuple):
            first, last = it
            members.update(range(ord(first), ord(last) + 1))
        elif isinstance(it, str):
            members.update(it.encode("ascii"))
        else:
            raise TypeError(f"unsupported byte class item: {it!r}")
    return ByteClass(frozenset(members), label)


@dataclass(frozen=True, slots=True)
class Literal(Rule):
    text: bytes

    def _match(self, cur: Cursor) -> object:
        if not cur.startswith(self.text):
            return NO_MATCH
        return cur.advance(len(self.text))

    def __str__(self) -> str:
        return repr(self.text.decode("latin-1"))


@dataclass(frozen=True, slots=True)
class Seq(Rule):
    rules: tuple[Rule, ...]

    def _match(self, cur: Cursor) -> object:
        values = []
        for r in self.rules:
            v = r.match(cur)
            if v is NO_MATCH:
                return NO_MATCH
            values.append(v)
        return tuple(values)

    def __and__(self, other):
        # Support: A & B & C  (flat, so the action sees one tuple)
        if not isinstance(other, (Rule, bytes, bytearray)):
            return NotImplemented
        return Seq(self.rules + (_coerce(other),))

    def __str__(self) -> str:
        return " ".join(_group(r) for r in self.rules)


@dataclass(frozen=True, slots=True)
class Choice(Rule):
    alts: tuple[Rule, ...]

    def _match(self, cur: Cursor) -> object:
        # Each alternative restores the cursor on failure, so the next one
        # starts from the same snapshot.
        for r in self.alts:
            v = r.match(cur)
            if v is not NO_MATCH:
                return v
        return NO_MATCH

    def __or__(self, other):
        if not isinstance(other, (Rule, bytes, bytearray)):
            return NotImplemented
        other = _coerce(other)
        if isinstance(other, Choice):
            return Choice(self.alts + other.alts)
        return Choice(self.alts + (other,))

    def __str__(self) -> str:
        return " / ".join(_group(r) for r in self.alts)


@dataclass(frozen=True, slots=True)
class Opt(Rule):
    rule: Rule

    def _match(self, cur: Cursor) -> object:
        v = self.rule.match(cur)
        return None if v is NO_MATCH else v

    def __str__(self) -> str:
        return f"[ {self.rule} ]"


@dataclass(frozen=True, slots=True)
class Repeat(Rule):
    rule: Rule
    least: int = 0
    most: int | None = None

    def _match(self, cur: Cursor) -> object:
        values = []
        while self.most is None or len(values) < self.most:
            before = cur.mark()
            v = self.rule.match(cur)
            if v is NO_MATCH:
                break
            values.append(v)
            if cur.mark() == before:
                # zero-width match would repeat forever
                break
        if len(values) < self.least:
            return NO_MATCH
        return tuple(values)

    def __str__(self) -> str:
        hi = "" if self.most is None else str(self.most)
        lo = "" if self.least == 0 else str(self.least)
        return f"{lo}*{hi}{_group(self.rule)}"


@dataclass(frozen=True, slots=True)
class Lookahead(Rule):
    """Succeeds, consuming nothing, when *rule* would match here."""

    rule: Rule

    def _match(self, cur: Cursor) -> object:
        start = cur.mark()
        v = self.rule.match(cur)
        cur.reset(start)
        return NO_MATCH if v is NO_MATCH else None

    def __str__(self) -> str:
        return f"&{_group(self.rule)}"


@dataclass(frozen=True, slots=True)
class Result(Rule):
    value: object

    def _match(self, cur: Cursor) -> object:
        return self.value

    def __str__(self) -> str:
        return "ε"


@dataclass(frozen=True, slots=True)
class Action(Rule):
    rule: Rule
    action: Callable[[object], object]

    def _match(self, cur: Cursor) -> object:
        v = self.rule.match(cur)
        if v is NO_MATCH:
            return NO_MATCH
        return self.action(v)

    def __str__(self) -> str:
        return str(self.rule)


@dataclass(frozen=True, slots=True)
class Named(Rule):
    """A registered nonterminal; prints as its name inside other rules."""

    name: str
    rule: Rule

    def _match(self, cur: Cursor) -> object:
        return self.rule.match(cur)

    def __str__(self) -> str:
        return self.name


def _group(r: Rule) -> str:
    s = str(r)
    if isinstance(r, Action):
        r = r.rule
    if isinstance(r, (Seq, Choice)):
        return f"( {s} )"
    return s


def lit(text: bytes | str) -> Literal:
    if isinstance(text, str):
        text = text.encode("ascii")
    return Literal(text)


def optional(rule: Rule) -> Opt:
    return Opt(rule)


def repeat(rule: Rule, *, least: int = 0, most: int | None = None) -> Repeat:
    if most is not None and most < least:
        raise ValueError(f"repeat upper bound ({most}) is below lower bound ({least})")
    return Repeat(rule, least, most)


def repeat1(rule: Rule) -> Repeat:
    return Repeat(rule, 1, None)


def lookahead(rule: Rule) -> Lookahead:
    return Lookahead(rule)


def result(value: object) -> Result:
    return Result(value)


def concat(value: object) -> bytes:
    """Flatten a nested rule value (bytes, tuples, None) into bytes."""
    if value is None:
        return b""
    if isinstance(value, bytes):
        return value
    if isinstance(value, Iterable):
        return b"".join(concat(v) for v in value)
    raise TypeError(f"expected bytes or tuple, got {type(value)!r}")
