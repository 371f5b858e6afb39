"""Core normalization, transcoding and decoding modules.

WHY: The core package is the only part of the obfuscator with a real
contract: reversibility, correct escaping, and a routine that cannot
terminate its own script region early. Every surface (CLI, GUI, API)
goes through it.

HOW: normalizer.py cleans the input, transcoder.py builds the code-unit
sequence, routine and document, ir.py holds the result dataclasses,
obfuscator.py chains the two stages, decoder.py re-runs the routine's
logic in Python for verification and reveal.

RULES:
- No I/O and no module-level mutable state anywhere in this package
- Errors are raised as the types in errors.py, never returned as values
"""
