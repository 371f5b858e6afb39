"""Unit tests for the Python replay of the reconstruction routine.

WHY: The decoder is how every round-trip test and the reveal feature
know what a browser would rebuild. If it drifted from the routine, all
of those checks would pass for the wrong reason.

HOW: Decodes hand-written sequences, parses real routines produced by
the transcoder, and exercises every malformed-input branch.
"""

import pytest

from html_obfuscator.core.decoder import (
    decode_code_units,
    decode_routine,
    extract_routine,
    parse_routine,
    reveal,
)
from html_obfuscator.core.errors import MalformedDocumentError
from html_obfuscator.core.transcoder import build_document


class TestDecodeCodeUnits:

    def test_worked_example(self):
        assert decode_code_units("3c703e48693c2f703e") == "<p>Hi</p>"

    def test_empty_sequence(self):
        assert decode_code_units("") == ""

    def test_wide_units(self):
        assert decode_code_units("00614e2d", 4) == "a中"

    def test_surrogate_pair_recombined(self):
        assert decode_code_units("d83dde00", 4) == "😀"

    def test_closing_tag_survives_substitution(self):
        codes = "".join(format(ord(ch), "02x") for ch in "</script>")
        assert decode_code_units(codes) == "</script>"

    def test_odd_length_rejected(self):
        with pytest.raises(MalformedDocumentError, match="does not split"):
            decode_code_units("abc")

    def test_non_hex_rejected(self):
        with pytest.raises(MalformedDocumentError, match="non-hex"):
            decode_code_units("zz")


class TestParseRoutine:

    def test_narrow(self, expected_routine):
        assert parse_routine(expected_routine) == ("3c703e48693c2f703e", 2)

    def test_wide(self):
        document = build_document("a中")
        assert parse_routine(document.routine) == ("00614e2d", 4)

    def test_not_a_routine(self):
        with pytest.raises(MalformedDocumentError):
            parse_routine("console.log('hello')")


class TestReveal:

    def test_extract_routine(self, expected_document, expected_routine):
        assert extract_routine(expected_document) == expected_routine

    def test_decode_routine(self, expected_routine):
        assert decode_routine(expected_routine) == "<p>Hi</p>"

    def test_reveal_document(self, expected_document):
        assert reveal(expected_document) == "<p>Hi</p>"

    def test_document_without_script(self):
        with pytest.raises(MalformedDocumentError, match="no script region"):
            reveal("<html><body>plain</body></html>")

    def test_script_without_routine(self):
        with pytest.raises(MalformedDocumentError, match="No reconstruction routine"):
            reveal("<script>alert(1)</script>")

    def test_malformed_error_is_value_error(self):
        with pytest.raises(ValueError):
            reveal("")
