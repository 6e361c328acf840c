"""Squad Builder - balanced team generation and editing."""

__version__ = "0.1.0"
