"""Arbitrary-precision integer expression calculator."""

__version__ = "1.0.0"
__all__ = ["bigint", "cli", "evaluate", "tokens", "validate"]