"""Classic array, hashing, recursion and sorting routines."""

__version__ = "0.1.0"
__all__ = ["arrays", "hashing", "recursion", "sorting"]