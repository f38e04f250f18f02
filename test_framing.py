from __future__ import annotations

import unittest

from slatepack.constants import FRAME_BARE, FRAME_QUALIFIED
from slatepack.errors import InvalidEncoding, InvalidFooter, InvalidFraming, InvalidHeader, MalformedArmor
from slatepack.formatting import format_payload, strip_formatting
from slatepack.framing import (
    GRAMMARS,
    check_footer,
    check_header,
    get_grammar,
    match_footer,
    match_header,
    parse_frame,
)


class FormattingTests(unittest.TestCase):
    def test_groups_of_fifteen(self):
        self.assertEqual(format_payload("a" * 15), "a" * 15)
        self.assertEqual(format_payload("a" * 16), "a" * 15 + " a")
        self.assertEqual(format_payload("a" * 30), "a" * 15 + " " + "a" * 15)
        self.assertEqual(format_payload("a" * 31), "a" * 15 + " " + "a" * 15 + " a")
        self.assertEqual(format_payload(""), "")

    def test_custom_width(self):
        self.assertEqual(format_payload("abcdefghij", 4), "abcd efgh ij")
        self.assertEqual(format_payload("abc", 1), "a b c")
        with self.assertRaises(ValueError):
            format_payload("abc", 0)

    def test_counts_characters_not_bytes(self):
        self.assertEqual(format_payload("é" * 16), "é" * 15 + " é")

    def test_strip_and_reformat(self):
        s = "3mJr7AoUXx2Wqd8pNDBUgAWyehvjfs2xAfVaZ9Bmgvk4cHuJJMgtHE"
        formatted = format_payload(s)
        self.assertEqual(strip_formatting(formatted), s)
        self.assertEqual(format_payload(strip_formatting(formatted)), formatted)
        self.assertEqual(strip_formatting("> ab\r\n>\tcd e"), "abcde")


class GrammarTests(unittest.TestCase):
    def test_priority_order(self):
        self.assertEqual([g.name for g in GRAMMARS], [FRAME_QUALIFIED, FRAME_BARE])

    def test_qualified_header(self):
        m = match_header("BEGIN SLATEPACK")
        self.assertEqual((m.variant, m.format_name), (FRAME_QUALIFIED, None))
        m = match_header("  >\n BEGIN \t BINARY\r\n SLATEPACK \n")
        self.assertEqual((m.variant, m.format_name), (FRAME_QUALIFIED, "BINARY"))
        m = match_footer("> END\nV4 SLATEPACK")
        self.assertEqual((m.variant, m.format_name), (FRAME_QUALIFIED, "V4"))

    def test_bare_header(self):
        self.assertEqual(match_header("\n\nBEGINSLATEPACK ").variant, FRAME_BARE)
        self.assertEqual(match_footer(" ENDSLATEPACK").variant, FRAME_BARE)
        self.assertIsNone(match_header("BEGINBINARYSLATEPACK"))

    def test_rejections(self):
        for bad in (
            "BEGIN",
            "SLATEPACK",
            "BEGIN FOO BAR SLATEPACK",
            "BEGIN BIN-ARY SLATEPACK",
            "begin slatepack",
            "BEGIN SLATEPACK x",
            "xBEGIN SLATEPACK",
            "END SLATEPACK",
            "",
        ):
            self.assertIsNone(match_header(bad), bad)
        self.assertIsNone(match_footer("BEGIN SLATEPACK"))
        with self.assertRaises(InvalidHeader):
            check_header("BEGIN MESSAGE")
        with self.assertRaises(InvalidFooter):
            check_footer("END")
        self.assertTrue(issubclass(InvalidHeader, InvalidFraming))
        self.assertTrue(issubclass(InvalidFooter, InvalidFraming))

    def test_tokens(self):
        self.assertEqual(get_grammar(FRAME_QUALIFIED).header_token(), "BEGIN SLATEPACK")
        self.assertEqual(get_grammar(FRAME_QUALIFIED).footer_token("BIN"), "END BIN SLATEPACK")
        self.assertEqual(get_grammar(FRAME_BARE).header_token(), "BEGINSLATEPACK")
        with self.assertRaises(ValueError):
            get_grammar(FRAME_BARE).header_token("BIN")
        with self.assertRaises(ValueError):
            get_grammar(FRAME_QUALIFIED).header_token("BIN ARY")
        with self.assertRaises(ValueError):
            get_grammar("fancy")


class ParseFrameTests(unittest.TestCase):
    def test_segments(self):
        frame = parse_frame("BEGIN SLATEPACK. abc def . END SLATEPACK.")
        self.assertEqual(frame.header, "BEGIN SLATEPACK")
        self.assertEqual(frame.payload, " abc def ")
        self.assertEqual(frame.footer, " END SLATEPACK")
        self.assertEqual(frame.variant, FRAME_QUALIFIED)
        self.assertIsNone(frame.format_name)

    def test_missing_delimiters(self):
        for text in ("", "BEGIN SLATEPACK", "BEGIN SLATEPACK. abc", "garbage. more garbage"):
            with self.assertRaises(MalformedArmor):
                parse_frame(text)

    def test_footer_without_final_delimiter(self):
        frame = parse_frame("BEGIN SLATEPACK. abc . END SLATEPACK")
        self.assertEqual(frame.footer, " END SLATEPACK")

    def test_trailing_text_ignored(self):
        frame = parse_frame("BEGIN SLATEPACK. abc . END SLATEPACK. thanks, bye.")
        self.assertEqual(frame.payload, " abc ")

    def test_invalid_tokens(self):
        with self.assertRaises(InvalidHeader):
            parse_frame("BOGUS. abc . END SLATEPACK.")
        with self.assertRaises(InvalidFooter):
            parse_frame("BEGIN SLATEPACK. abc . END.")
        with self.assertRaises(InvalidFooter):
            parse_frame("BEGIN SLATEPACK. abc . END SLATEPACK extra.")

    def test_delimiter_inside_payload(self):
        with self.assertRaises(InvalidEncoding):
            parse_frame("BEGIN SLATEPACK. ab.cd . END SLATEPACK.")
        with self.assertRaises(InvalidEncoding):
            parse_frame("BEGIN SLATEPACK. abc def. . END BINARY SLATEPACK")
        with self.assertRaises(InvalidFooter):
            parse_frame("BEGIN SLATEPACK. ab.cd . FIN SLATEPACK.")

    def test_variants_matched_independently(self):
        frame = parse_frame("BEGINSLATEPACK. abc . END BINARY SLATEPACK.")
        self.assertEqual(frame.header_match.variant, FRAME_BARE)
        self.assertEqual(frame.footer_match.variant, FRAME_QUALIFIED)
        self.assertEqual(frame.footer_match.format_name, "BINARY")


if __name__ == "__main__":
    unittest.main()
