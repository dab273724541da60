#!/usr/bin/env python3

import re
import unittest

from bearer_challenge.challenge import is_uri_reference
from bearer_challenge.grammar import ParseError, parse_auth_params
from bearer_challenge.syntax import check_regex, rfc6750, rfc7235


class SyntaxTesters(unittest.TestCase):
    def test_regex_compile(self):
        self.assertEqual([], check_regex())

    def test_uri_reference(self):
        for instr in [
            "https://example.com/errors/invalid_token",
            "http://user:pw@example.com:8080/a/b?c=d#e",
            "http://[::1]:8080/",
            "http://192.168.0.1/",
            "urn:ietf:rfc:6750",
            "/relative/path",
            "errors.html",
            "?q=1",
            "#frag",
            "",
        ]:
            self.assertTrue(is_uri_reference(instr), instr)

    def test_not_uri_reference(self):
        for instr in [
            "http://exa mple.com/",
            "{bad}",
            'http://example.com/a"b',
            "caf\xe9",
            "http://example.com/%zz",
        ]:
            self.assertFalse(is_uri_reference(instr), instr)

    def test_scope(self):
        self.assertTrue(re.fullmatch(rfc6750.scope, "read write", re.VERBOSE))
        self.assertFalse(re.fullmatch(rfc6750.scope, "read  write", re.VERBOSE))
        self.assertFalse(re.fullmatch(rfc6750.scope, 'read "write"', re.VERBOSE))

    def test_auth_param(self):
        for instr in ["realm=example", 'realm = "a, b"', r'k="a\"b"']:
            self.assertTrue(re.fullmatch(rfc7235.auth_param, instr, re.VERBOSE), instr)
        for instr in ["realm", "=x", 'realm="x', "realm=a b"]:
            self.assertFalse(re.fullmatch(rfc7235.auth_param, instr, re.VERBOSE), instr)

    def test_parser_agrees_with_abnf(self):
        "parse_auth_params() accepts exactly what the auth-param list rule matches."
        for instr in [
            "",
            'realm="example"',
            'realm = "example" , error=invalid_token',
            r'realm="a\"b\\c"',
            'realm="x",',
            ', realm="x"',
            'realm="x",, error="y"',
            'realm="unterminated',
            "=noKey",
            "realm",
            'realm="x" error="y"',
            'realm="a\nb"',
            "abc==",
        ]:
            stripped = instr.strip(" \t")
            matches = bool(
                re.fullmatch(str(rfc6750.bearer_params), stripped, re.VERBOSE)
            )
            try:
                parse_auth_params(instr)
                parsed = True
            except ParseError:
                parsed = False
            self.assertEqual(matches, parsed, instr)


if __name__ == "__main__":
    unittest.main()
