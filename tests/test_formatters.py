"""Unit tests for the output formatters.

WHY: Formatters decide what lands on disk and what the API advertises.
A stray byte in the page formatter would break the output contract; a
missing newline or script tag in the loader would break embedding.
"""

from html_obfuscator.core.obfuscator import encode
from html_obfuscator.formatters import FORMATTERS
from html_obfuscator.formatters.base import BaseFormatter
from html_obfuscator.formatters.html_page import HtmlPageFormatter
from html_obfuscator.formatters.loader_script import LoaderScriptFormatter


class TestRegistry:

    def test_keys(self):
        assert set(FORMATTERS) == {"html_page", "loader_script"}

    def test_values_are_formatter_classes(self):
        for formatter_cls in FORMATTERS.values():
            assert issubclass(formatter_cls, BaseFormatter)

    def test_page_is_first(self):
        assert next(iter(FORMATTERS)) == "html_page"

    def test_every_format_carries_the_same_payload(self, wide_markup):
        document = encode(wide_markup)
        for formatter_cls in FORMATTERS.values():
            for output in formatter_cls().format(document):
                assert document.code_units.codes in output.content


class TestHtmlPageFormatter:

    def test_content_is_document_verbatim(self, hi_markup, expected_document):
        outputs = HtmlPageFormatter().format(encode(hi_markup))
        assert len(outputs) == 1
        assert outputs[0].content == expected_document

    def test_suffix_and_media_type(self, hi_markup):
        output = HtmlPageFormatter().format(encode(hi_markup))[0]
        assert output.suffix == "-obfuscated.html"
        assert output.media_type == "text/html"

    def test_name(self):
        assert HtmlPageFormatter().name == "HTML Page"


class TestLoaderScriptFormatter:

    def test_content_is_routine_with_newline(self, hi_markup, expected_routine):
        outputs = LoaderScriptFormatter().format(encode(hi_markup))
        assert len(outputs) == 1
        assert outputs[0].content == expected_routine + "\n"

    def test_no_script_tags(self, hi_markup):
        content = LoaderScriptFormatter().format(encode(hi_markup))[0].content
        assert "<script" not in content.lower()
        assert "</script" not in content.lower()

    def test_suffix_and_media_type(self, hi_markup):
        output = LoaderScriptFormatter().format(encode(hi_markup))[0]
        assert output.suffix == "-loader.js"
        assert output.media_type == "application/javascript"

    def test_name(self):
        assert LoaderScriptFormatter().name == "Loader Script"
