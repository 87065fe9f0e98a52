"""Scalar tensors that record the operations producing them."""

from __future__ import annotations

import math
from typing import Any

from scalargrad.function import AddFunction, Function, MultiplyFunction, TanhFunction


class Tensor:
    """A scalar value with a gradient and the function that produced it."""

    def __init__(self, value: Any, grad_fn: Function | None = None) -> None:
        self._data = value
        self._shape: tuple[int, ...] = ()
        self.grad = 0.0
        self.grad_fn = grad_fn

    @property
    def dtype(self) -> type:
        return type(self._data)

    def item(self) -> Any:
        """Return the scalar value."""
        return self._data

    def shape(self) -> tuple[int, ...]:
        """Return the shape; empty for a scalar."""
        return self._shape

    def __str__(self) -> str:
        dims = ", ".join(str(d) for d in self._shape)
        value = float(self._data)
        return f"Tensor<{self.dtype.__name__}>({dims}){{{value:.6f}}}"

    def __repr__(self) -> str:
        return f"Tensor({self._data!r})"

    def _check_same_dtype(self, other: Tensor, verb: str) -> None:
        if self.dtype is not other.dtype:
            raise TypeError(f"Cannot {verb} tensors of two different data types")

    def __add__(self, other: object) -> Tensor:
        if not isinstance(other, Tensor):
            return NotImplemented
        self._check_same_dtype(other, "add")
        return Tensor(self.item() + other.item(), AddFunction(self, other))

    def __mul__(self, other: object) -> Tensor:
        if not isinstance(other, Tensor):
            return NotImplemented
        self._check_same_dtype(other, "multiply")
        return Tensor(self.item() * other.item(), MultiplyFunction(self, other))

    def _topological_order(self) -> list[Tensor]:
        """Return computed nodes reachable from this one, outputs first."""
        order: list[Tensor] = []
        if self.grad_fn is None:
            return order
        visited = {self}
        stack = [(self, iter(self.grad_fn.parents))]
        while stack:
            node, parents = stack[-1]
            for parent in parents:
                if parent.grad_fn is not None and parent not in visited:
                    visited.add(parent)
                    stack.append((parent, iter(parent.grad_fn.parents)))
                    break
            else:
                stack.pop()
                order.append(node)
        order.reverse()
        return order

    def backward(self) -> None:
        """Propagate this tensor's gradient back through the graph.

        The gradient of this tensor must already be set.
        """
        if self.grad_fn is None:
            raise RuntimeError("backward() called on a tensor with no grad_fn")
        for node in self._topological_order():
            node.grad_fn.backward(node)


def tanh(t: Tensor) -> Tensor:
    """Hyperbolic tangent of a tensor, recorded for backpropagation."""
    value = t.dtype(math.tanh(t.item()))
    return Tensor(value, TanhFunction(t))