"""Sort integers with two-stack operations and check operation sequences."""

__version__ = "1.0.0"
__all__ = ["__version__"]