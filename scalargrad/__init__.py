"""Scalar reverse-mode automatic differentiation: tensors, backward rules and a demo command."""

__version__ = "0.1.0"
__all__ = ["function", "tensor", "cli"]