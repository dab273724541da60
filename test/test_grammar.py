#!/usr/bin/env python3

import unittest

from bearer_challenge.grammar import (
    ParseError,
    parse_auth_params,
    quote_string,
    unquote_string,
)


class AuthParamTesters(unittest.TestCase):
    def test_parse_auth_params(self):
        i = 0
        for (instr, expected_params) in [
            ("", []),
            ("   ", []),
            ("\t \t", []),
            ("realm=example", [("realm", "example")]),
            ('realm="example"', [("realm", "example")]),
            ('realm = "example"', [("realm", "example")]),
            ('  realm="example"  ', [("realm", "example")]),
            (
                'realm="example", error=invalid_token',
                [("realm", "example"), ("error", "invalid_token")],
            ),
            (
                'realm="example",error="invalid_token"',
                [("realm", "example"), ("error", "invalid_token")],
            ),
            (
                'realm="example" ,\terror="invalid_token"',
                [("realm", "example"), ("error", "invalid_token")],
            ),
            (r'realm="a\"b"', [("realm", 'a"b')]),
            (r'realm="a\\b"', [("realm", "a\\b")]),
            (r'realm="\a\b\c"', [("realm", "abc")]),
            ('realm=""', [("realm", "")]),
            ('realm="a, b=c"', [("realm", "a, b=c")]),
            ('scope="read write  admin"', [("scope", "read write  admin")]),
            ('error="a", error="b"', [("error", "a"), ("error", "b")]),
            ('Realm="x"', [("Realm", "x")]),
            ('foo="caf\xe9"', [("foo", "caf\xe9")]),
            ('foo="tab\there"', [("foo", "tab\there")]),
        ]:
            out_params = parse_auth_params(instr)
            self.assertEqual(
                expected_params,
                out_params,
                "[%s] %s != %s" % (i, str(expected_params), str(out_params)),
            )
            i += 1

    def test_order_is_kept(self):
        out_params = parse_auth_params('z="1", a="2", m="3", a="4"')
        self.assertEqual(["z", "a", "m", "a"], [key for key, _ in out_params])


class ParseErrorTesters(unittest.TestCase):
    def test_parse_errors(self):
        for (instr, reason, position) in [
            ('realm="unterminated', "unterminated quoted-string", 6),
            ('realm="unterminated\\', "unterminated quoted-string", 6),
            ("=noKey", "missing auth-param name", 0),
            ('realm="x", =noKey', "missing auth-param name", 11),
            ("realm", 'missing "="', 5),
            ('realm "x"', 'missing "="', 6),
            ("realm=", "missing value", 6),
            ("realm=,", "missing value", 6),
            ('realm="a\nb"', "invalid character in quoted-string", 8),
            ('realm="a\x00b"', "invalid character in quoted-string", 8),
            ('realm="a\\\nb"', "invalid character in quoted-string", 9),
            ('realm="x" error="y"', "unexpected character after auth-param", 10),
            ('realm=abc"def"', "unexpected character after auth-param", 9),
            ('realm="x";error="y"', "unexpected character after auth-param", 9),
            ('realm="x",', 'missing auth-param after ","', 10),
            ('realm="x", ', 'missing auth-param after ","', 11),
            ('realm="x",, error="y"', 'missing auth-param after ","', 10),
            (', realm="x"', "unexpected character", 0),
            ('"realm"="x"', "unexpected character", 0),
            ('realm="x"\r\n', "unexpected character after auth-param", 9),
            ("\nrealm=x", "unexpected character", 0),
            ("abc==", "missing value", 4),
        ]:
            with self.assertRaises(ParseError, msg=instr) as cm:
                parse_auth_params(instr)
            self.assertEqual(reason, cm.exception.reason, instr)
            self.assertEqual(position, cm.exception.position, instr)

    def test_parse_error_is_value_error(self):
        with self.assertRaises(ValueError):
            parse_auth_params('realm="unterminated')

    def test_parse_error_fragment(self):
        with self.assertRaises(ParseError) as cm:
            parse_auth_params('realm="x", error="a\x01b"')
        self.assertEqual("\\x01b\"", cm.exception.fragment)
        self.assertIn("position 19", str(cm.exception))

    def test_parse_error_fragment_truncated(self):
        with self.assertRaises(ParseError) as cm:
            parse_auth_params("=" + "x" * 100)
        self.assertEqual("=" + "x" * 39 + "...", cm.exception.fragment)


class QuotingTesters(unittest.TestCase):
    def test_unquote_string(self):
        i = 0
        for (instr, expected_str) in [
            ("foo", "foo"),
            ('"foo"', "foo"),
            (r'"fo\"o"', 'fo"o'),
            (r'"f\"o\"o"', 'f"o"o'),
            (r'"fo\\o"', r"fo\o"),
            (r'"f\\o\\o"', r"f\o\o"),
            (r'"fo\o"', "foo"),
            ('""', ""),
        ]:
            out_str = unquote_string(instr)
            self.assertEqual(
                expected_str,
                out_str,
                "[%s] %s != %s" % (i, str(expected_str), str(out_str)),
            )
            i += 1

    def test_quote_string(self):
        for (instr, expected_str) in [
            ("foo", '"foo"'),
            ("", '""'),
            ('fo"o', r'"fo\"o"'),
            ("fo\\o", r'"fo\\o"'),
            ("a b, c=d", '"a b, c=d"'),
        ]:
            self.assertEqual(expected_str, quote_string(instr))

    def test_quote_then_parse(self):
        for value in ['a"b', "a\\b", '\\"', "plain", "", 'end\\']:
            self.assertEqual(
                [("k", value)], parse_auth_params(f"k={quote_string(value)}")
            )


if __name__ == "__main__":
    unittest.main()
