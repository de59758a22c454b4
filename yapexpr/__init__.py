"""Lazy expression trees built from Python operators, with transforms, evaluation and printing."""

__version__ = "0.1.0"
__all__ = ["__version__"]