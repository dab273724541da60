"""
Notes about Bearer challenge attributes.
"""

from bearer_challenge.speak import Note, categories, levels
from bearer_challenge.syntax import rfc3986, rfc6750


class PARAM_REPEATS(Note):
    category = categories.GENERAL
    level = levels.WARN
    summary = "The '%(param)s' parameter repeats in the challenge."
    text = """\
Parameters on the Bearer challenge are not allowed to appear more than once.

When `%(param)s` occurs more than once, the last occurrence is used; other implementations may
behave differently. For `scope`, the tokens of every occurrence are combined."""


class CHALLENGE_TOO_LARGE(Note):
    category = categories.GENERAL
    level = levels.WARN
    summary = "The challenge is very large (%(challenge_size)s characters)."
    text = """\
Some implementations limit the size of any single header line. The Bearer challenge here is
%(challenge_size)s characters long, which is likely to be refused or truncated along the way."""


class ERROR_URI_BAD_SYNTAX(Note):
    category = categories.ERROR
    level = levels.BAD
    summary = "The error_uri parameter isn't a URI."
    text = f"""\
The `error_uri` parameter of a Bearer challenge identifies a human-readable web page with
information about the error. It has to be an absolute or relative URI, as defined by
[RFC3986]({rfc3986.SPEC_URL}); however, `%(error_uri)s` is neither.

The value has been ignored."""


class ERROR_BAD_SYNTAX(Note):
    category = categories.ERROR
    level = levels.WARN
    summary = "The error parameter contains characters that aren't allowed."
    text = f"""\
[RFC6750]({rfc6750.SPEC_URL}#section-3) limits the `error` parameter to printable ASCII
characters, excluding double-quotes and backslashes; `%(error)s` contains others."""


class ERROR_DESCRIPTION_BAD_SYNTAX(Note):
    category = categories.ERROR
    level = levels.WARN
    summary = "The error_description parameter contains characters that aren't allowed."
    text = f"""\
[RFC6750]({rfc6750.SPEC_URL}#section-3) limits the `error_description` parameter to printable
ASCII characters, excluding double-quotes and backslashes; `%(error_description)s` contains
others."""


class SCOPE_TOKEN_BAD_SYNTAX(Note):
    category = categories.SYNTAX
    level = levels.WARN
    summary = "The scope token '%(scope_token)s' contains characters that aren't allowed."
    text = f"""\
Scope tokens in a Bearer challenge are limited to printable ASCII characters, excluding
double-quotes and backslashes, by [RFC6750]({rfc6750.SPEC_URL}#section-3)."""


class PARAM_BAD_SYNTAX(Note):
    category = categories.SYNTAX
    level = levels.BAD
    summary = "The '%(param)s' parameter can't be used in a challenge."
    text = """\
Auth-param names have to be tokens, and their values have to fit in a quoted-string; that rules out
control characters other than horizontal tab, and characters beyond ISO-8859-1.

The `%(param)s` parameter doesn't meet these requirements, so it has been ignored."""
