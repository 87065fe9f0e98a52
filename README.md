# scalargrad

A small reverse-mode automatic differentiation engine for scalar values. You
build an expression from `Tensor` objects with `+`, `*` and `tanh`. Each
result records the operation that produced it. Calling `backward()` on the
final result sends gradients back through the graph.

## Installation

```
pip install .
```

To run the tests, install the test extra:

```
pip install ".[test]"
pytest
```

## Usage

```python
from scalargrad.tensor import Tensor, tanh

a = Tensor(4.0)
b = Tensor(5.5)
c = a * b            # 22.0
d = Tensor(2.0)
e = c + d            # 24.0
f = Tensor(3.0)
out = e * f          # 72.0

out.grad = 1.0       # seed the output gradient
out.backward()

print(out.item())    # 72.0
print(a.grad, b.grad, f.grad)   # 16.5 12.0 24.0

y = tanh(Tensor(1.0))
print(round(y.item(), 5))       # 0.76159
```

### `scalargrad.tensor`

- `Tensor(value, grad_fn=None)` holds one scalar. `item()` returns the value.
  `shape()` returns an empty tuple. `dtype` is the Python type of the value.
  The `grad` attribute starts at `0.0` and holds the gradient after a backward
  pass. `grad_fn` is the function that produced the tensor, or `None` for a
  tensor you created yourself.
- `a + b` and `a * b` work on two tensors whose values have the same type.
  Mixing types (for example an `int` tensor with a `float` tensor) raises
  `TypeError`.
- `tanh(t)` returns the hyperbolic tangent of `t`, with the same value type.
- `backward()` visits every computed tensor reachable from this one, outputs
  first, and runs its function's backward rule. Set the output's `grad`
  first. Calling it on a tensor with no `grad_fn` raises `RuntimeError`.
- `str(t)` gives a short form such as `Tensor<float>(){3.000000}`.

### `scalargrad.function`

The backward rules that gradients flow through. Each keeps its inputs in
`parents`:

- `AddFunction` passes the output gradient to both inputs.
- `MultiplyFunction` scales the output gradient by the other input's value.
- `TanhFunction` scales the output gradient by `1 - y**2`, where `y` is the
  output value.

`Function` is the abstract base class for these rules.

A parent's gradient is overwritten during the backward pass, not added to. If
one tensor feeds several operations, its gradient is the one written last.

## Command line

```
scalargrad
```

This runs a short demonstration. It builds two tensors, prints the first
one's value and the tensor itself, and then prints their sum. It takes no
options other than `--help`. The same module also provides `hello_world()`,
which prints a fixed greeting.

## Limitations

Tensors hold single scalars only. There are no multi-dimensional arrays, no
operations other than addition, multiplication and `tanh`, and no optimisers
or training loops.