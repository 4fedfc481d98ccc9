"""Two-stack integer sorting with a limited instruction set."""

__version__ = "1.0.0"
__all__ = ["cli", "parser", "sorting", "stacks"]