"""Shared test fixtures for the html_obfuscator test suite.

WHY: Several test modules check the same worked example, "<p>Hi</p>"
and the exact routine and document it must produce. Centralizing it
here keeps every module asserting against one source of truth.

HOW: Module-level constants hold the expected strings; fixtures hand
them to tests along with a few representative markup samples.

RULES:
- EXPECTED_ROUTINE, EXPECTED_WIDE_ROUTINE and EXPECTED_DOCUMENT are
  byte-exact; any change to the routine or skeleton must update them
  deliberately
"""

from typing import List

import pytest

HI_MARKUP = "<p>Hi</p>"
HI_CODES = "3c703e48693c2f703e"

EXPECTED_ROUTINE = (
    "(function(){var a='3c703e48693c2f703e',b=[],c,d='';"
    "for(c=0;c<a.length;c+=2){b.push(a.substring(c,c+2));}"
    "for(c=0;c<b.length;c++){d+=String.fromCharCode(parseInt(b[c],16));}"
    "d=d.replace(/<\\x2Fscript>/g,'<'+'/script>');"
    "document.open();document.write(d);document.close();})();"
)

WIDE_MARKUP = "<p>中</p>"
WIDE_CODES = "003c0070003e4e2d003c002f0070003e"

EXPECTED_WIDE_ROUTINE = (
    "(function(){var a='003c0070003e4e2d003c002f0070003e',b=[],c,d='';"
    "for(c=0;c<a.length;c+=4){b.push(a.substring(c,c+4));}"
    "for(c=0;c<b.length;c++){d+=String.fromCharCode(parseInt(b[c],16));}"
    "d=d.replace(/<\\x2Fscript>/g,'<'+'/script>');"
    "document.open();document.write(d);document.close();})();"
)

EXPECTED_DOCUMENT = (
    "<!DOCTYPE html>\n"
    "<html>\n"
    "<head>\n"
    "    <meta charset=\"UTF-8\">\n"
    "    <title>Obfuscated Page</title>\n"
    "</head>\n"
    "<body>\n"
    "    <script>\n"
    "        " + EXPECTED_ROUTINE + "\n"
    "    </script>\n"
    "</body>\n"
    "</html>"
)


@pytest.fixture
def hi_markup() -> str:
    return HI_MARKUP


@pytest.fixture
def expected_routine() -> str:
    return EXPECTED_ROUTINE


@pytest.fixture
def expected_document() -> str:
    return EXPECTED_DOCUMENT


@pytest.fixture
def wide_markup() -> str:
    return WIDE_MARKUP


@pytest.fixture
def expected_wide_routine() -> str:
    return EXPECTED_WIDE_ROUTINE


@pytest.fixture
def sample_page() -> str:
    """A small page with indentation, comments, and an inline script."""
    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "  <!-- page header -->\n"
        "  <head><title>Demo</title></head>\n"
        "  <body>\n"
        "    <h1>Hello,   world</h1>\n"
        "    <!--\n"
        "      multi-line note\n"
        "    -->\n"
        "    <script>console.log('hi');</script>\n"
        "  </body>\n"
        "</html>\n"
    )


@pytest.fixture
def round_trip_samples() -> List[str]:
    """Markup covering ASCII, Latin-1, BMP, astral and closing-tag cases."""
    return [
        HI_MARKUP,
        "<div class=\"a\" data-x='1'>a &amp; b</div>",
        "<p>cafÃ© crÃ¨me</p>",
        "<p>ä¸­æ Ð¸ ÑÑÑÑÐºÐ¸Ð¹</p>",
        "<span>ð emoji</span>",
        "<script>var s = '</script>';</script><p>after</p>",
        "<SCRIPT>x()</SCRIPT>",
        "back\\slash and 'quotes' \"double\"",
    ]
