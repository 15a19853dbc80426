"""Classic array, notation, power, tree and pattern algorithms."""

__version__ = "0.1.0"
__all__ = ["arrays", "sequences", "patterns", "power", "notation", "trees"]