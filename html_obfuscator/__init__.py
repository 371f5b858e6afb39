"""HTML Obfuscator — hide markup behind a self-decoding loader page.

WHY: Pages delivered as plain HTML show their markup to anyone who opens
"view source". This package rewrites a block of markup into a standalone
document whose payload is hex-encoded and rebuilt in the browser at load
time, so the original text is not visible at a glance.

HOW: Two-stage core pipeline: normalize (strip comments, collapse
whitespace) then transcode (hex-encode code units, synthesize the
reconstruction routine, wrap it in a document skeleton). Formatters,
the CLI, the desktop GUI and the HTTP API sit around that core.

RULES:
- The core is pure: no I/O, no shared state, same input → same output
- This is NOT a security boundary; anyone can run the output to decode it
- The generated routine must never contain a raw closing script tag
"""

__version__ = "0.1.0"

from html_obfuscator.core.obfuscator import encode  # noqa: E402

__all__ = ["encode", "__version__"]
