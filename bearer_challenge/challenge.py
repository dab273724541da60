"""
The parameters of a "Bearer" WWW-Authenticate challenge, as a value.

build_challenge() folds a list of (key, value) auth-params into a Challenge;
parse_challenge() does the same starting from the string that follows the
scheme. str() of a Challenge gives back an auth-param list that parses to an
equal Challenge.
"""

import re
from types import MappingProxyType
from typing import Any, Dict, Iterable, Optional, Tuple

from bearer_challenge._notes import (
    CHALLENGE_TOO_LARGE,
    ERROR_BAD_SYNTAX,
    ERROR_DESCRIPTION_BAD_SYNTAX,
    ERROR_URI_BAD_SYNTAX,
    PARAM_BAD_SYNTAX,
    PARAM_REPEATS,
    SCOPE_TOKEN_BAD_SYNTAX,
)
from bearer_challenge.grammar import RE_FLAGS, TOKEN, parse_auth_params, quote_string
from bearer_challenge.syntax import rfc6750, rfc7230
from bearer_challenge.type import (
    AddNoteMethodType,
    AuthParamListType,
    ExtensionDictType,
    ExtensionMappingType,
)

### configuration
MAX_CHALLENGE_SIZE = 4 * 1024

REALM = "realm"
SCOPE = "scope"
ERROR = "error"
ERROR_DESCRIPTION = "error_description"
ERROR_URI = "error_uri"
WELL_KNOWN_KEYS = (REALM, SCOPE, ERROR, ERROR_DESCRIPTION, ERROR_URI)

ERROR_URI_SYNTAX = re.compile(rfc6750.error_uri, RE_FLAGS)
ERROR_SYNTAX = re.compile(rfc6750.error, RE_FLAGS)
ERROR_DESCRIPTION_SYNTAX = re.compile(rfc6750.error_description, RE_FLAGS)
SCOPE_TOKEN_SYNTAX = re.compile(rfc6750.scope_token, RE_FLAGS)
# anything that survives a trip through quote_string() and back
QUOTABLE = re.compile(rf"(?: {rfc7230.qdtext} | [\\\"] )*", RE_FLAGS)


class Challenge:
    """
    The parameters of one "Bearer" challenge in a WWW-Authenticate header.

    Challenges are immutable; two are equal when all of their attributes are,
    with scope compared in order and extensions as a mapping.
    """

    __slots__ = (
        "_realm",
        "_scope",
        "_error",
        "_error_description",
        "_error_uri",
        "_extensions",
    )

    def __init__(
        self,
        realm: Optional[str] = None,
        scope: Iterable[str] = (),
        error: Optional[str] = None,
        error_description: Optional[str] = None,
        error_uri: Optional[str] = None,
        extensions: ExtensionMappingType = None,
    ) -> None:
        if isinstance(scope, str):
            raise TypeError("scope must be a sequence of scope tokens, not a string")
        scope = tuple(scope)
        for scope_token in scope:
            if not scope_token or any(char.isspace() for char in scope_token):
                raise ValueError(f"{scope_token!r} is not a scope token")
            _check_quotable(SCOPE, scope_token)
        if error_uri is not None and not is_uri_reference(error_uri):
            raise ValueError(f"{error_uri!r} is not a URI reference")
        for key, value in (
            (REALM, realm),
            (ERROR, error),
            (ERROR_DESCRIPTION, error_description),
        ):
            if value is not None:
                _check_quotable(key, value)
        extension_dict: ExtensionDictType = dict(extensions or {})
        for key, value in extension_dict.items():
            if key in WELL_KNOWN_KEYS:
                raise ValueError(f"'{key}' can't be used as an extension")
            if not TOKEN.fullmatch(key):
                raise ValueError(f"{key!r} is not a valid auth-param name")
            _check_quotable(key, value)
        object.__setattr__(self, "_realm", realm)
        object.__setattr__(self, "_scope", scope)
        object.__setattr__(self, "_error", error)
        object.__setattr__(self, "_error_description", error_description)
        object.__setattr__(self, "_error_uri", error_uri)
        object.__setattr__(self, "_extensions", MappingProxyType(extension_dict))

    @classmethod
    def parse(cls, instr: str, add_note: AddNoteMethodType = None) -> "Challenge":
        "Parse the auth-params following the Bearer scheme."
        return parse_challenge(instr, add_note)

    @property
    def realm(self) -> Optional[str]:
        "The protection space; the 'realm' attribute."
        return self._realm

    @property
    def scope(self) -> Tuple[str, ...]:
        "The space-delimited tokens of the 'scope' attribute, in order."
        return self._scope

    @property
    def error(self) -> Optional[str]:
        "The error code; the 'error' attribute."
        return self._error

    @property
    def error_description(self) -> Optional[str]:
        "Human-readable text about the error; the 'error_description' attribute."
        return self._error_description

    @property
    def error_uri(self) -> Optional[str]:
        """
        A URI reference for a web page describing the error; the 'error_uri'
        attribute. Values that aren't URI references never make it here.
        """
        return self._error_uri

    @property
    def extensions(self) -> ExtensionMappingType:
        """
        A read-only mapping of every other auth-param, keyed by name.
        """
        return self._extensions

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __copy__(self) -> "Challenge":
        return self

    def __deepcopy__(self, memo: Dict[int, Any]) -> "Challenge":
        return self

    def __reduce__(self) -> Tuple[Any, ...]:
        return (
            self.__class__,
            (
                self._realm,
                self._scope,
                self._error,
                self._error_description,
                self._error_uri,
                dict(self._extensions),
            ),
        )

    def _key(self) -> Tuple[Any, ...]:
        return (
            self._realm,
            self._scope,
            self._error,
            self._error_description,
            self._error_uri,
            frozenset(self._extensions.items()),
        )

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Challenge):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(realm={self._realm!r}, scope={self._scope!r}, "
            f"error={self._error!r}, error_description={self._error_description!r}, "
            f"error_uri={self._error_uri!r}, extensions={dict(self._extensions)!r})"
        )

    def __str__(self) -> str:
        output = []
        if self._realm is not None:
            output.append(f"{REALM}={quote_string(self._realm)}")
        if self._scope:
            output.append(f"{SCOPE}={quote_string(' '.join(self._scope))}")
        if self._error is not None:
            output.append(f"{ERROR}={quote_string(self._error)}")
        if self._error_description is not None:
            output.append(
                f"{ERROR_DESCRIPTION}={quote_string(self._error_description)}"
            )
        if self._error_uri is not None:
            output.append(f"{ERROR_URI}={quote_string(self._error_uri)}")
        output.extend(
            f"{key}={quote_string(value)}" for key, value in self._extensions.items()
        )
        return ", ".join(output)

    def to_header(self) -> str:
        "The complete challenge, scheme included, for a WWW-Authenticate field value."
        params = str(self)
        if not params:
            return rfc6750.auth_scheme
        return f"{rfc6750.auth_scheme} {params}"


def parse_challenge(instr: str, add_note: AddNoteMethodType = None) -> Challenge:
    """
    Parse the auth-param list following the Bearer scheme into a Challenge.

    Raises ParseError if the list isn't well-formed.
    """
    if add_note is None:
        add_note = _discard_note
    if len(instr) > MAX_CHALLENGE_SIZE:
        add_note(CHALLENGE_TOO_LARGE, challenge_size=len(instr))
    return build_challenge(parse_auth_params(instr), add_note)


def build_challenge(
    params: AuthParamListType, add_note: AddNoteMethodType = None
) -> Challenge:
    """
    Fold (key, value) auth-params into a Challenge.

    The last occurrence of a repeated parameter wins, except for scope, whose
    tokens accumulate. An error_uri that isn't a URI reference is ignored, as
    is any parameter whose name isn't a token or whose value can't be carried
    in a quoted-string. Problems are reported through add_note; nothing here
    raises.
    """
    if add_note is None:
        add_note = _discard_note
    realm = None
    scope = []
    error = None
    error_description = None
    error_uri = None
    extensions: ExtensionDictType = {}
    seen = set()
    for key, value in params:
        if not TOKEN.fullmatch(key) or not QUOTABLE.fullmatch(value):
            add_note(PARAM_BAD_SYNTAX, param=key)
            continue
        if key in seen:
            add_note(PARAM_REPEATS, param=key)
        seen.add(key)
        if key == REALM:
            realm = value
        elif key == SCOPE:
            for scope_token in value.split():
                if not SCOPE_TOKEN_SYNTAX.fullmatch(scope_token):
                    add_note(SCOPE_TOKEN_BAD_SYNTAX, scope_token=scope_token)
                scope.append(scope_token)
        elif key == ERROR:
            if not ERROR_SYNTAX.fullmatch(value):
                add_note(ERROR_BAD_SYNTAX, error=value)
            error = value
        elif key == ERROR_DESCRIPTION:
            if not ERROR_DESCRIPTION_SYNTAX.fullmatch(value):
                add_note(ERROR_DESCRIPTION_BAD_SYNTAX, error_description=value)
            error_description = value
        elif key == ERROR_URI:
            if is_uri_reference(value):
                error_uri = value
            else:
                add_note(ERROR_URI_BAD_SYNTAX, error_uri=value)
        else:
            extensions[key] = value
    return Challenge(realm, scope, error, error_description, error_uri, extensions)


def is_uri_reference(instr: str) -> bool:
    "Is instr an absolute or relative URI reference?"
    return ERROR_URI_SYNTAX.fullmatch(instr) is not None


def _check_quotable(key: str, value: str) -> None:
    if not QUOTABLE.fullmatch(value):
        raise ValueError(f"the value of '{key}' can't be carried in a quoted-string")


def _discard_note(note: Any, **kw: Any) -> None:
    pass
