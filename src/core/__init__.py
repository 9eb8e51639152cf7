"""
Core value types, arithmetic primitives, and codecs.

This module contains the wide integer scalar used by the generic value
representation: the 512-bit primitive, narrowing conversions, the hex wire
codec, and the fixed-size binary codec. It is independent of external
systems (storage engines, transports, etc.).
"""
