from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class UriPart:
    """One decomposed slot of a URI.

    ``value`` holds the raw bytes the grammar accepted for the slot, with
    percent-escapes left intact. A delimiter that matched with no body
    after it yields ``b""``.
    """

    value: bytes

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


@dataclass(frozen=True, slots=True, repr=False)
class Scheme(UriPart):
    pass


@dataclass(frozen=True, slots=True, repr=False)
class UserInfo(UriPart):
    pass


@dataclass(frozen=True, slots=True, repr=False)
class Host(UriPart):
    """Authority host, registry name, or the body of an opaque URI."""


@dataclass(frozen=True, slots=True, repr=False)
class Port(UriPart):
    pass


@dataclass(frozen=True, slots=True, repr=False)
class Path(UriPart):
    pass


@dataclass(frozen=True, slots=True, repr=False)
class QueryString(UriPart):
    pass


@dataclass(frozen=True, slots=True, repr=False)
class Fragment(UriPart):
    pass


@dataclass(frozen=True, slots=True)
class AbsoluteUri:
    """``scheme ":" ( hier_part | opaque_part )``.

    ``parts`` starts with the Scheme and always ends with a QueryString and
    a Fragment. ``opaque`` is True when the body matched ``opaque_part``;
    that body is carried as a Host part.
    """

    parts: tuple[UriPart, ...]
    opaque: bool = False

    @property
    def scheme(self) -> Scheme:
        head = self.parts[0]
        if not isinstance(head, Scheme):
            raise TypeError(f"expected Scheme, got {type(head)!r}")
        return head


@dataclass(frozen=True, slots=True)
class RelativeUri:
    parts: tuple[UriPart, ...]  # (Path, QueryString, Fragment)


@dataclass(frozen=True, slots=True)
class FragmentRef:
    fragment: Fragment  # value keeps the leading "#"

    @property
    def parts(self) -> tuple[UriPart, ...]:
        return (self.fragment,)


UriKind = AbsoluteUri | RelativeUri | FragmentRef


def find_part(kind: UriKind, tp: type[UriPart]) -> UriPart | None:
    """Return the first part of type *tp*, or None."""
    if not isinstance(kind, (AbsoluteUri, RelativeUri, FragmentRef)):
        raise TypeError(f"expected UriKind, got {type(kind)!r}")
    for p in kind.parts:
        if type(p) is tp:
            return p
    return None
