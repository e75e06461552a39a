from __future__ import annotations

"""
RFC 2396 URI-reference grammar in one place.

- **Character classes** live in :mod:`urigrammar.charclass`
- **Grammar**: `build_uri_grammar()` defines every rule bottom-up and
  registers it by name; `uri_reference` is the start rule

Each rule below sits next to the BNF it implements, so this module is
meant to be *human scannable*. Rules return bytes until the authority
productions, which start returning :mod:`urigrammar.ast` parts.
"""

from . import ast as A
from .charclass import (
    alpha,
    alphanum,
    at_sign,
    colon,
    digit,
    dot,
    hash_mark,
    hyphen,
    pchar,
    plus,
    qmark,
    reg_name_char,
    rel_segment_char,
    semicolon,
    slash,
    uric,
    uric_no_slash,
    user_info_char,
)
from .combinators import Rule, concat, lit, lookahead, optional, repeat, repeat1, result
from .grammar import Grammar, RuleSink


START = "uri_reference"


def _parts(v: object) -> tuple[A.UriPart, ...]:
    if not isinstance(v, tuple) or not all(isinstance(p, A.UriPart) for p in v):
        raise TypeError(f"expected tuple of UriPart, got {v!r}")
    return v


def build_uri_grammar() -> Grammar:
    sink = RuleSink()
    R = sink.add

    # -----------------------------------------------------------------------
    # Semantic actions
    # -----------------------------------------------------------------------
    def act_second(xs: tuple) -> object:
        return xs[1]

    def act_path(v: object) -> tuple[A.UriPart, ...]:
        return (A.Path(concat(v)),)

    def act_reg_name(v: object) -> tuple[A.UriPart, ...]:
        return (A.Host(concat(v)),)

    def act_hostport(xs: tuple) -> tuple[A.UriPart, ...]:
        host, port = xs
        if port is None:
            return (A.Host(host),)
        return (A.Host(host), A.Port(port[1]))

    def act_server(xs: tuple) -> tuple[A.UriPart, ...]:
        info, hostport = xs
        if info is None:
            return _parts(hostport)
        return (A.UserInfo(info[0]),) + _parts(hostport)

    def act_scheme(v: object) -> A.Scheme:
        return A.Scheme(concat(v))

    def act_net_path(xs: tuple) -> tuple[A.UriPart, ...]:
        _, authority, path = xs
        if path is None:
            return _parts(authority)
        return _parts(authority) + (A.Path(path),)

    def act_opaque(v: object) -> tuple[A.UriPart, ...]:
        # Opaque bodies reuse the Host tag.
        return (A.Host(concat(v)),)

    def act_tail(xs: tuple) -> tuple[A.UriPart, ...]:
        path, query, frag = xs
        return _parts(path) + (A.QueryString(query), A.Fragment(frag))

    def act_hier_body(parts: object) -> tuple[tuple[A.UriPart, ...], bool]:
        return _parts(parts), False

    def act_opaque_body(xs: tuple) -> tuple[tuple[A.UriPart, ...], bool]:
        body, frag = xs
        return _parts(body) + (A.QueryString(b""), A.Fragment(frag)), True

    def act_absolute(xs: tuple) -> A.AbsoluteUri:
        scheme, _, (parts, opaque) = xs
        return A.AbsoluteUri(parts=(scheme,) + parts, opaque=opaque)

    def act_relative(parts: object) -> A.RelativeUri:
        return A.RelativeUri(parts=_parts(parts))

    def act_fragment_ref(v: object) -> A.FragmentRef:
        return A.FragmentRef(A.Fragment(concat(v)))

    # -----------------------------------------------------------------------
    # Paths
    # -----------------------------------------------------------------------

    # param = *pchar
    param = R("param", repeat(pchar) @ concat)
    # segment = *pchar *( ";" param )
    segment = R("segment", (param & repeat(semicolon & param)) @ concat)
    # path_segments = segment *( "/" segment )
    path_segments = R("path_segments", (segment & repeat(slash & segment)) @ concat)
    # abs_path = "/" path_segments
    uri_abs_path = R("uri_abs_path", (slash & path_segments) @ concat)
    # rel_path = rel_segment [ abs_path ]
    rel_path = R("rel_path", (repeat1(rel_segment_char) & optional(uri_abs_path)) @ concat)
    # query = *uric ; fragment = *uric
    uri_query = R("uri_query", repeat(uric) @ concat)
    uri_fragment = R("uri_fragment", repeat(uric) @ concat)

    # -----------------------------------------------------------------------
    # Authority
    # -----------------------------------------------------------------------

    # IPv4address = 1*digit "." 1*digit "." 1*digit "." 1*digit
    # Groups are capped at three digits; values are not range checked.
    octet = repeat(digit, least=1, most=3)
    ipv4_address = R(
        "ipv4_address",
        (octet & dot & octet & dot & octet & dot & octet) @ concat,
    )

    def label(first: Rule) -> Rule:
        # A trailing "-" is accepted.
        return (first & repeat(alphanum | hyphen)) @ concat

    # toplabel = alpha | alpha *( alphanum | "-" ) alphanum
    top_label = R("top_label", label(alpha))
    # domainlabel = alphanum | alphanum *( alphanum | "-" ) alphanum
    domain_label = R("domain_label", label(alphanum))
    # hostname = *( domainlabel "." ) toplabel [ "." ]
    # A "label." prefix only counts when another label follows it, so the
    # last label before an optional trailing dot is left for toplabel.
    hostname = R(
        "hostname",
        (repeat(domain_label & dot & lookahead(alphanum)) & top_label & optional(dot)) @ concat,
    )
    # host = hostname | IPv4address
    host = R("host", hostname | ipv4_address)
    # port = *digit
    port = R("port", repeat(digit) @ concat)
    # userinfo = *( unreserved | escaped | ";" | ":" | "&" | "=" | "+" | "$" | "," )
    user_info = R("user_info", repeat(user_info_char) @ concat)
    # hostport = host [ ":" port ]
    hostport = R("hostport", (host & optional(colon & port)) @ act_hostport)
    # server = [ [ userinfo "@" ] hostport ]
    server = R("server", (optional(user_info & at_sign) & hostport) @ act_server)
    # reg_name = 1*( unreserved | escaped | "$" | "," | ";" | ":" | "@" | "&" | "=" | "+" )
    reg_name = R("reg_name", repeat1(reg_name_char) @ concat)
    # authority = server | reg_name
    uri_authority = R("uri_authority", server | reg_name @ act_reg_name)

    # -----------------------------------------------------------------------
    # URI references
    # -----------------------------------------------------------------------

    # scheme = alpha *( alpha | digit | "+" | "-" | "." )
    scheme = R("scheme", (alpha & repeat1(alpha | digit | plus | hyphen | dot)) @ act_scheme)
    # net_path = "//" authority [ abs_path ]
    net_path = R("net_path", (lit(b"//") & uri_authority & optional(uri_abs_path)) @ act_net_path)
    # opaque_part = uric_no_slash *uric
    opaque_part = R("opaque_part", (uric_no_slash & repeat(uric)) @ act_opaque)

    # Absent query/fragment come out as b"", same as present-but-empty.
    query_tail = R("query_tail", (qmark & uri_query) @ act_second | result(b""))
    fragment_tail = R("fragment_tail", (hash_mark & uri_fragment) @ act_second | result(b""))

    # hier_part = ( net_path | abs_path ) [ "?" query ]
    hier_part = R(
        "hier_part",
        ((net_path | uri_abs_path @ act_path) & query_tail & fragment_tail) @ act_tail,
    )
    # absoluteURI = scheme ":" ( hier_part | opaque_part )
    absolute_uri = R(
        "absolute_uri",
        (scheme & colon & (hier_part @ act_hier_body | (opaque_part & fragment_tail) @ act_opaque_body))
        @ act_absolute,
    )
    # relativeURI = ( abs_path | rel_path ) [ "?" query ]
    relative_uri = R(
        "relative_uri",
        (((uri_abs_path | rel_path) @ act_path) & query_tail & fragment_tail) @ act_tail @ act_relative,
    )
    # fragment reference; the Fragment keeps its "#"
    fragment_ref = R("fragment_ref", (hash_mark & uri_fragment) @ act_fragment_ref)
    # URI-reference = [ absoluteURI | relativeURI | "#" fragment ]
    R(START, optional(absolute_uri | relative_uri | fragment_ref))

    return sink.freeze(START)
