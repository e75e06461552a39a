from __future__ import annotations

"""
RFC 2396 character classes.

Every class here matches exactly one byte except :data:`escaped`, which
matches ``"%" hex hex`` as a unit. Unions of single-byte classes stay
single-byte classes; a union that includes ``escaped`` becomes an
ordered alternation.
"""

from .combinators import ByteClass, Rule, byte_class, concat

upalpha = byte_class(("A", "Z"), label="upalpha")
lowalpha = byte_class(("a", "z"), label="lowalpha")
alpha = byte_class(upalpha, lowalpha, label="alpha")
digit = byte_class(("0", "9"), label="digit")
alphanum = byte_class(alpha, digit, label="alphanum")
hex_digit = byte_class(digit, ("a", "f"), ("A", "F"), label="hex")

mark = byte_class("-_.!~*'()", label="mark")
reserved = byte_class(";/?:@&=+$,", label="reserved")
unreserved = byte_class(alphanum, mark, label="unreserved")

# Single-byte separators used as delimiters by the grammar.
slash = byte_class("/", label="'/'")
semicolon = byte_class(";", label="';'")
colon = byte_class(":", label="':'")
at_sign = byte_class("@", label="'@'")
dot = byte_class(".", label="'.'")
hyphen = byte_class("-", label="'-'")
plus = byte_class("+", label="'+'")
qmark = byte_class("?", label="'?'")
hash_mark = byte_class("#", label="'#'")
percent = byte_class("%", label="'%'")

#: escaped = "%" hex hex
escaped: Rule = (percent & hex_digit & hex_digit) @ concat


def _with_escapes(base: ByteClass, extra: str, label: str) -> Rule:
    # escaped is tried after the single-byte set; "%" is in none of them.
    return byte_class(base, extra, label=label) | escaped


#: pchar = unreserved | escaped | ":" | "@" | "&" | "=" | "+" | "$" | ","
pchar = _with_escapes(unreserved, ":@&=+$,", "pchar")

#: uric = reserved | unreserved | escaped
uric = _with_escapes(byte_class(reserved, unreserved), "", "uric")

#: uric_no_slash = unreserved | escaped | ";" | "?" | ":" | "@" | "&" | "=" | "+" | "$" | ","
uric_no_slash = _with_escapes(unreserved, ";?:@&=+$,", "uric_no_slash")

#: rel_segment = 1*( unreserved | escaped | ";" | "@" | "&" | "=" | "+" | "$" | "," )
rel_segment_char = _with_escapes(unreserved, ";@&=+$,", "rel_segment_char")

#: reg_name = 1*( unreserved | escaped | "$" | "," | ";" | ":" | "@" | "&" | "=" | "+" )
reg_name_char = _with_escapes(unreserved, "$,;:@&=+", "reg_name_char")

#: userinfo = *( unreserved | escaped | ";" | ":" | "&" | "=" | "+" | "$" | "," )
user_info_char = _with_escapes(unreserved, ";:&=+$,", "user_info_char")
