"""
Parsing of the auth-param list that follows the "Bearer" scheme in a
WWW-Authenticate challenge.

parse_auth_params() turns a string like

  realm="example", error=invalid_token, error_description="The token \"expired\""

into an ordered list of (key, value) tuples, with quoted-strings already unquoted.
The scheme itself (and splitting a header into challenges) is up to the caller.
"""

import re

from bearer_challenge.speak import display_string
from bearer_challenge.syntax import rfc7230
from bearer_challenge.type import AuthParamListType

RE_FLAGS = re.VERBOSE

AUTH_PARAM = re.compile(
    rf"""(?P<key> {rfc7230.token} ) {rfc7230.BWS} = {rfc7230.BWS}
         (?P<value> {rfc7230.token} | {rfc7230.quoted_string} )""",
    RE_FLAGS,
)
OWS = re.compile(rfc7230.OWS, RE_FLAGS)
TOKEN = re.compile(rfc7230.token, RE_FLAGS)
# the longest run that can start a quoted-string; used to say why one didn't match
QUOTED_STRING_START = re.compile(
    rf"\" (?: {rfc7230.qdtext} | {rfc7230.quoted_pair} )*", RE_FLAGS
)


class ParseError(ValueError):
    """
    The auth-param list doesn't conform to the challenge grammar.

    position is the offset into the input where the problem was found, and
    fragment is a printable rendering of the input from there on.
    """

    def __init__(self, reason: str, instr: str, position: int) -> None:
        self.reason = reason
        self.position = position
        self.fragment = display_string(instr[position:])
        ValueError.__init__(
            self, f"{reason} at position {position}: '{self.fragment}'"
        )


def parse_auth_params(instr: str) -> AuthParamListType:
    """
    Parse a comma-separated list of auth-params into (key, value) tuples, in
    the order they occur. Raises ParseError if instr isn't well-formed; empty
    (or OWS-only) input gives an empty list.
    """
    params: AuthParamListType = []
    end = len(instr)
    pos = _skip_ows(instr, 0)
    if pos == end:
        return params
    while True:
        match = AUTH_PARAM.match(instr, pos)
        if not match:
            raise _diagnose(instr, pos)
        params.append((match.group("key"), unquote_string(match.group("value"))))
        pos = _skip_ows(instr, match.end())
        if pos == end:
            return params
        if instr[pos] != ",":
            raise ParseError("unexpected character after auth-param", instr, pos)
        pos = _skip_ows(instr, pos + 1)
        if pos == end or instr[pos] == ",":
            raise ParseError('missing auth-param after ","', instr, pos)


def _skip_ows(instr: str, pos: int) -> int:
    return OWS.match(instr, pos).end()


def _diagnose(instr: str, pos: int) -> ParseError:
    "Work out why there isn't an auth-param at pos."
    end = len(instr)
    key = TOKEN.match(instr, pos)
    if not key:
        if instr[pos] == "=":
            return ParseError("missing auth-param name", instr, pos)
        return ParseError("unexpected character", instr, pos)
    equals = _skip_ows(instr, key.end())
    if equals == end or instr[equals] != "=":
        return ParseError('missing "="', instr, equals)
    value = _skip_ows(instr, equals + 1)
    if value < end and instr[value] == '"':
        stop = QUOTED_STRING_START.match(instr, value).end()
        if stop == end or instr[stop:] == "\\":
            return ParseError("unterminated quoted-string", instr, value)
        if instr[stop] == "\\":
            stop += 1
        return ParseError("invalid character in quoted-string", instr, stop)
    return ParseError("missing value", instr, value)


def unquote_string(instr: str) -> str:
    """
    Unquote a token or quoted-string.

    @param instr: string to be unquoted
    @return: unquoted string
    """
    if len(instr) > 1 and instr[0] == instr[-1] == '"':
        return re.sub(r"\\(.)", r"\1", instr[1:-1], flags=re.DOTALL)
    return instr


def quote_string(instr: str) -> str:
    """
    Make instr into a quoted-string, escaping double-quotes and backslashes.
    """
    return '"%s"' % re.sub(r'(["\\])', r"\\\1", instr)
