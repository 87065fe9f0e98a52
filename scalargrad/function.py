"""Backward rules for the operations supported between tensors."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from scalargrad.tensor import Tensor


class Function(ABC):
    """An operation that produced a tensor and knows how to push gradients back."""

    def __init__(self, *parents: Tensor) -> None:
        self.parents: list[Tensor] = list(parents)

    @abstractmethod
    def backward(self, output: Tensor) -> None:
        """Set the gradients of the parents from the gradient of ``output``."""


class AddFunction(Function):
    """Gradient rule for ``a + b``."""

    def __init__(self, a: Tensor, b: Tensor) -> None:
        super().__init__(a, b)

    def backward(self, output: Tensor) -> None:
        left, right = self.parents
        left.grad = output.grad
        right.grad = output.grad


class MultiplyFunction(Function):
    """Gradient rule for ``a * b``."""

    def __init__(self, a: Tensor, b: Tensor) -> None:
        super().__init__(a, b)

    def backward(self, output: Tensor) -> None:
        left, right = self.parents
        left.grad = output.grad * right.item()
        right.grad = output.grad * left.item()


class TanhFunction(Function):
    """Gradient rule for ``tanh(x)``, using the output value ``tanh(x)``."""

    def __init__(self, parent: Tensor) -> None:
        super().__init__(parent)

    def backward(self, output: Tensor) -> None:
        tanh_x = output.item()
        self.parents[0].grad = output.grad * (1 - tanh_x * tanh_x)