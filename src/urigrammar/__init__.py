from __future__ import annotations

from .api import match_rule, parse_uri, parse_uri_reference, rule_names
from .ast import (
    AbsoluteUri,
    Fragment,
    FragmentRef,
    Host,
    Path,
    Port,
    QueryString,
    RelativeUri,
    Scheme,
    UriKind,
    UriPart,
    UserInfo,
)
from .errors import ParseError
from .format import format_uri, to_jsonable
from .grammar import Match

__all__ = [
    "AbsoluteUri",
    "Fragment",
    "FragmentRef",
    "Host",
    "Match",
    "ParseError",
    "Path",
    "Port",
    "QueryString",
    "RelativeUri",
    "Scheme",
    "UriKind",
    "UriPart",
    "UserInfo",
    "format_uri",
    "match_rule",
    "parse_uri",
    "parse_uri_reference",
    "rule_names",
    "to_jsonable",
]
