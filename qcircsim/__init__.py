"""Apply a plain-text quantum circuit to an initial state with dense complex matrices."""

__version__ = "0.1.0"
__all__ = ["cli", "formatting", "linalg", "parsing"]