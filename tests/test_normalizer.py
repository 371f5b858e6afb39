"""Unit tests for the normalizer.

WHY: Comment stripping and whitespace collapsing decide exactly what text
ends up in the payload. A greedy comment match would eat real markup; a
missed whitespace character would change the rebuilt page.

HOW: Each rule is tested on its own, then normalize() as a whole,
including the empty-input rejection and idempotence.
"""

import pytest

from html_obfuscator.core.errors import EmptyInputError
from html_obfuscator.core.normalizer import (
    collapse_whitespace,
    is_blank,
    normalize,
    strip_comments,
)


class TestStripComments:

    def test_single_comment(self):
        assert strip_comments("a<!--x-->b") == "ab"

    def test_multiline_comment(self):
        assert strip_comments("a<!-- multi\nline -->b") == "ab"

    def test_non_greedy(self):
        assert strip_comments("a<!--1-->b<!--2-->c") == "abc"

    def test_comment_formed_by_removal_is_also_stripped(self):
        assert strip_comments("<!<!---->-- x -->y") == "y"

    def test_unterminated_comment_is_kept(self):
        assert strip_comments("a <!-- open") == "a <!-- open"

    def test_whitespace_untouched(self):
        assert strip_comments("a  <!--x-->\n b") == "a  \n b"


class TestCollapseWhitespace:

    def test_runs_become_single_space(self):
        assert collapse_whitespace("a   b\n\tc") == "a b c"

    def test_trims_ends(self):
        assert collapse_whitespace("\n  <p>x</p>  \r\n") == "<p>x</p>"

    def test_non_breaking_space_is_whitespace(self):
        assert collapse_whitespace("a" + chr(0xA0) + chr(0xA0) + "b") == "a b"

    def test_byte_order_mark_is_whitespace(self):
        assert collapse_whitespace(chr(0xFEFF) + "a") == "a"

    def test_line_separator_is_whitespace(self):
        assert collapse_whitespace("a" + chr(0x2028) + "b") == "a b"

    def test_zero_width_space_is_not_whitespace(self):
        zwsp = chr(0x200B)
        assert collapse_whitespace("a" + zwsp + "b") == "a" + zwsp + "b"


class TestNormalize:

    def test_comment_stripping(self):
        assert normalize("a<!--x-->b") == "ab"
        assert normalize("a<!-- multi\nline -->b") == "ab"

    def test_whitespace_collapse(self):
        assert normalize("a   b\n\tc") == "a b c"

    def test_comment_between_spaces_leaves_one_space(self):
        assert normalize("a <!--x--> b") == "a b"

    def test_sample_page(self, sample_page):
        assert normalize(sample_page) == (
            "<!DOCTYPE html> <html> <head><title>Demo</title></head> <body> "
            "<h1>Hello, world</h1> <script>console.log('hi');</script> </body> </html>"
        )

    def test_markup_without_comments_or_runs_is_unchanged(self, hi_markup):
        assert normalize(hi_markup) == hi_markup

    @pytest.mark.parametrize("text", ["", "   ", "\n\t\r\n", "<!-- only a comment -->", " <!--a--> <!--b--> "])
    def test_empty_input_rejected(self, text):
        with pytest.raises(EmptyInputError):
            normalize(text)

    def test_empty_input_error_is_value_error(self):
        with pytest.raises(ValueError):
            normalize("   ")

    def test_idempotent(self, sample_page, round_trip_samples):
        samples = [sample_page, "<!<!---->-- x -->y", "a <!--x--> b", "x  <!-- y"]
        samples.extend(round_trip_samples)
        for text in samples:
            once = normalize(text)
            assert normalize(once) == once

    def test_no_whitespace_runs_in_output(self, sample_page):
        result = normalize(sample_page)
        assert "  " not in result
        assert "\n" not in result


class TestIsBlank:

    def test_blank(self):
        assert is_blank("")
        assert is_blank(" \n\t")

    def test_not_blank(self):
        assert not is_blank(" x ")

    def test_comment_is_not_blank(self):
        # Blank means whitespace only; comment-only input is caught by normalize()
        assert not is_blank("<!-- c -->")
