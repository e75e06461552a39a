from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .combinators import NO_MATCH, Named, Rule
from .cursor import Cursor
from .spans import Span


@dataclass(frozen=True, slots=True)
class Match:
    """Value produced by a rule together with the bytes it consumed."""

    value: object
    span: Span


@dataclass(slots=True)
class RuleSink:
    """Collects named rules in definition order while a grammar is built."""

    rules: dict[str, Named] = field(default_factory=dict)

    def add(self, name: str, rule: Rule) -> Named:
        if name in self.rules:
            raise ValueError(f"rule defined twice: {name!r}")
        named = Named(name, rule)
        self.rules[name] = named
        return named

    def freeze(self, start: str) -> "Grammar":
        if start not in self.rules:
            raise ValueError(f"start rule is not defined: {start!r}")
        return Grammar(start=start, rules=MappingProxyType(dict(self.rules)))


@dataclass(frozen=True, slots=True)
class Grammar:
    start: str
    rules: Mapping[str, Named]

    def names(self) -> tuple[str, ...]:
        return tuple(self.rules)

    def match(self, name: str, data: bytes, *, pos: int = 0, source: str = "<memory>") -> Match | None:
        rule = self.rules[name]
        if not 0 <= pos <= len(data):
            raise ValueError(f"start offset {pos} outside input of length {len(data)}")
        cur = Cursor(data=data, i=pos)
        v = rule.match(cur)
        if v is NO_MATCH:
            return None
        return Match(value=v, span=Span(source=source, start=pos, end=cur.i))
