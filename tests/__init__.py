"""
Test suite for fracnum

Contains:
- tests/unit/          : Unit tests for the digit codec, parser, formatter and FracFormat
"""
