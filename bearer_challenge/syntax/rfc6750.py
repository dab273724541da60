"""
Regex for RFC6750

These regex are derived from the ABNF for the attributes of the "Bearer"
authentication scheme's WWW-Authenticate challenge:

  <https://tools.ietf.org/html/rfc6750#section-3>

Attribute values are matched after quoted-string unescaping. They should be
processed with re.VERBOSE.
"""

# pylint: disable=invalid-name

from .rfc3986 import URI_reference
from .rfc7230 import list_rule
from .rfc7235 import auth_param

SPEC_URL = "https://tools.ietf.org/html/rfc6750"

auth_scheme = r"Bearer"

# scope-token = 1*( %x21 / %x23-5B / %x5D-7E )

scope_token = r"[\x21\x23-\x5b\x5d-\x7e]+"

# scope       = scope-token *( SP scope-token )

scope = rf"(?: {scope_token} (?: [ ] {scope_token} )* )"

# error             = "error" "=" DQUOTE *( %x20-21 / %x23-5B / %x5D-7E ) DQUOTE

error = r"[\x20\x21\x23-\x5b\x5d-\x7e]*"

# error-description = "error_description" "=" DQUOTE *( %x20-21 / %x23-5B / %x5D-7E ) DQUOTE

error_description = error

# error-uri         = "error_uri" "=" DQUOTE URI-reference DQUOTE

error_uri = URI_reference

# Bearer challenge parameters, as handed over once the scheme is stripped:
# the comma-separated auth-param list without empty elements.

bearer_params = list_rule(auth_param)

