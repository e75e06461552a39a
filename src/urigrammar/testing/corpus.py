from __future__ import annotations

import random
import string


# Every generated reference re-serializes byte for byte, so the generator
# never emits an empty "?" or "#" (those print back as nothing).

_ALNUM = string.ascii_letters + string.digits
_MARK = "-_.!~*'()"
_UNRESERVED = _ALNUM + _MARK
_HEX = "0123456789abcdefABCDEF"

_PCHAR = _UNRESERVED + ":@&=+$,"
_URIC = _UNRESERVED + ";/?:@&=+$,"
_USER_INFO = _UNRESERVED + ";:&=+$,"
_REL_SEGMENT = _UNRESERVED + ";@&=+$,"
_SCHEME_TAIL = _ALNUM + "+-."
# A registry name must not start like a hostname, or server would claim
# a prefix of it.
_REG_NAME_HEAD = "$,;&=+" + _MARK.replace("-", "").replace(".", "")
_REG_NAME_TAIL = _UNRESERVED + "$,;&=+"


def _escape(r: random.Random) -> str:
    return "%" + r.choice(_HEX) + r.choice(_HEX)


def _run(r: random.Random, alphabet: str, lo: int, hi: int, *, escapes: bool = True) -> str:
    out = []
    for _ in range(r.randint(lo, hi)):
        if escapes and r.random() < 0.08:
            out.append(_escape(r))
        else:
            out.append(r.choice(alphabet))
    return "".join(out)


def _scheme(r: random.Random) -> str:
    return r.choice(string.ascii_letters) + _run(r, _SCHEME_TAIL, 1, 6, escapes=False)


def _label(r: random.Random, first: str) -> str:
    return r.choice(first) + _run(r, _ALNUM + "-", 0, 8, escapes=False)


def _hostname(r: random.Random) -> str:
    labels = [_label(r, _ALNUM) for _ in range(r.randint(0, 3))]
    labels.append(_label(r, string.ascii_letters))
    host = ".".join(labels)
    if r.random() < 0.1:
        host += "."
    return host


def _ipv4(r: random.Random) -> str:
    return ".".join(str(r.randint(0, 999)) for _ in range(4))


def _authority(r: random.Random) -> str:
    k = r.random()
    if k < 0.1:
        return r.choice(_REG_NAME_HEAD) + _run(r, _REG_NAME_TAIL, 0, 10)
    out = ""
    if r.random() < 0.3:
        out += _run(r, _USER_INFO, 0, 12) + "@"
    out += _ipv4(r) if k < 0.3 else _hostname(r)
    if r.random() < 0.4:
        out += ":" + _run(r, string.digits, 0, 5, escapes=False)
    return out


def _segment(r: random.Random, *, nonempty: bool = False) -> str:
    seg = _run(r, _PCHAR, 1 if nonempty else 0, 8)
    for _ in range(r.randint(0, 2) if r.random() < 0.2 else 0):
        seg += ";" + _run(r, _PCHAR, 0, 5)
    return seg


def _abs_path(r: random.Random, *, nonempty_head: bool = False) -> str:
    segs = [_segment(r, nonempty=nonempty_head)]
    segs += [_segment(r) for _ in range(r.randint(0, 4))]
    return "/" + "/".join(segs)


def _tail(r: random.Random) -> str:
    out = ""
    if r.random() < 0.4:
        out += "?" + _run(r, _URIC, 1, 16)
    if r.random() < 0.3:
        out += "#" + _run(r, _URIC, 1, 10)
    return out


def _absolute(r: random.Random) -> str:
    k = r.random()
    head = _scheme(r) + ":"
    if k < 0.6:
        path = _abs_path(r) if r.random() < 0.7 else ""
        return head + "//" + _authority(r) + path + _tail(r)
    if k < 0.8:
        # no authority, so the path must not begin with "//"
        return head + _abs_path(r, nonempty_head=True) + _tail(r)
    body = r.choice(_UNRESERVED + ";?:@&=+$,") + _run(r, _URIC, 0, 16)
    frag = "#" + _run(r, _URIC, 1, 10) if r.random() < 0.3 else ""
    return head + body + frag


def _relative(r: random.Random) -> str:
    if r.random() < 0.5:
        path = _abs_path(r)
    else:
        path = _run(r, _REL_SEGMENT, 1, 10)
        if r.random() < 0.5:
            path += _abs_path(r)
    return path + _tail(r)


def _gen_one(r: random.Random) -> str:
    k = r.random()
    if k < 0.55:
        return _absolute(r)
    if k < 0.9:
        return _relative(r)
    return "#" + _run(r, _URIC, 0, 12)


def generate_uri_references(*, seed: int, count: int) -> list[str]:
    r = random.Random(seed)
    return [_gen_one(r) for _ in range(count)]


def generate_corpus_file(*, seed: int, count: int) -> str:
    """Generate a deterministic corpus as newline-separated text."""
    return "\n".join(generate_uri_references(seed=seed, count=count)) + "\n"
