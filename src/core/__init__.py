"""
Core mathematical primitives shared by the fracnum parser and formatter.

This module contains the foundational building blocks that are independent
of any particular text layout (digit codec, radix and int64 bounds).
"""
