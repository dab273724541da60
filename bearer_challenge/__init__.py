"""
Parsing and serialisation of "Bearer" WWW-Authenticate challenges.
"""

__version__ = "1.0.0"

from bearer_challenge.challenge import Challenge, build_challenge, parse_challenge
from bearer_challenge.grammar import ParseError, parse_auth_params

__all__ = [
    "Challenge",
    "ParseError",
    "build_challenge",
    "parse_auth_params",
    "parse_challenge",
]
