"""
Test suite for wide-int-core

Contains:
- tests/unit/          : Unit tests for the primitive, the value type and the codecs
"""
