"""
Regex for RFC7235

These regex are directly derived from the collected ABNF in RFC7235.

  <http://httpwg.org/specs/rfc7235.html#collected.abnf>

They should be processed with re.VERBOSE.
"""

# pylint: disable=invalid-name

from .rfc7230 import BWS, quoted_string, token

SPEC_URL = "http://httpwg.org/specs/rfc7235"


# auth-param = token BWS "=" BWS ( token / quoted-string )

auth_param = rf"(?: {token} {BWS} = {BWS} (?: {token} | {quoted_string} ) )"
