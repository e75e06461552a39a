from __future__ import annotations

from . import ast as A


def format_uri(kind: A.UriKind) -> bytes:
    """Re-serialize a parsed URI reference.

    Delimiters are the ones the grammar consumed: ``:`` after the scheme,
    ``//`` before an authority, ``@`` after user-info, ``:`` before a port
    and ``?``/``#`` before a non-empty query or fragment. Empty query and
    fragment parts print nothing, so ``"/a?"`` comes back as ``"/a"``.
    """
    if isinstance(kind, A.AbsoluteUri):
        return _format_absolute(kind)
    if isinstance(kind, A.RelativeUri):
        return b"".join(_format_part(p) for p in kind.parts)
    if isinstance(kind, A.FragmentRef):
        # value already carries the "#"
        return kind.fragment.value
    raise TypeError(f"unknown UriKind: {type(kind)!r}")


def _format_absolute(uri: A.AbsoluteUri) -> bytes:
    out: list[bytes] = [uri.scheme.value, b":"]
    rest = uri.parts[1:]
    # An opaque body is tagged Host too, but has no "//" in front of it.
    if not uri.opaque and any(isinstance(p, A.Host) for p in rest):
        out.append(b"//")
    out.extend(_format_part(p) for p in rest)
    return b"".join(out)


def _format_part(p: A.UriPart) -> bytes:
    if isinstance(p, A.Scheme):
        return p.value + b":"
    if isinstance(p, A.UserInfo):
        return p.value + b"@"
    if isinstance(p, A.Host):
        return p.value
    if isinstance(p, A.Port):
        return b":" + p.value
    if isinstance(p, A.Path):
        return p.value
    if isinstance(p, A.QueryString):
        return b"?" + p.value if p.value else b""
    if isinstance(p, A.Fragment):
        return b"#" + p.value if p.value else b""
    raise TypeError(f"unknown UriPart: {type(p)!r}")


def to_jsonable(kind: A.UriKind | None) -> object:
    """Plain dict/list rendering with byte values decoded as ASCII."""
    if kind is None:
        return None
    if isinstance(kind, A.AbsoluteUri):
        out: dict[str, object] = {"kind": "AbsoluteUri", "opaque": kind.opaque}
    elif isinstance(kind, A.RelativeUri):
        out = {"kind": "RelativeUri"}
    elif isinstance(kind, A.FragmentRef):
        out = {"kind": "FragmentRef"}
    else:
        raise TypeError(f"unknown UriKind: {type(kind)!r}")
    out["parts"] = [[type(p).__name__, p.value.decode("ascii")] for p in kind.parts]
    return out
