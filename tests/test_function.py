import pytest

from scalargrad.function import AddFunction, Function, MultiplyFunction, TanhFunction
from scalargrad.tensor import Tensor


def test_add_function():
    t = Tensor(4.0)
    t2 = Tensor(5.5)
    add_fn = AddFunction(t, t2)
    assert add_fn.parents[0] is t
    assert add_fn.parents[1] is t2

    out = Tensor(1.0)
    out.grad = 1.5
    add_fn.backward(out)
    assert t.grad == 1.5
    assert t2.grad == 1.5


def test_multiply_function():
    t = Tensor(4.0)
    t2 = Tensor(5.5)
    multiply_fn = MultiplyFunction(t, t2)
    assert multiply_fn.parents[0] is t
    assert multiply_fn.parents[1] is t2

    out = Tensor(1.0)
    out.grad = 2.0
    multiply_fn.backward(out)
    assert t.grad == 11.0
    assert t2.grad == 8.0


def test_tanh_function():
    t = Tensor(2.0)
    tanh_fn = TanhFunction(t)
    assert tanh_fn.parents[0] is t

    out = Tensor(2.0)
    out.grad = 2.0
    tanh_fn.backward(out)
    assert t.grad == -6.0


def test_function_is_abstract():
    with pytest.raises(TypeError):
        Function()


def test_parents_count():
    t = Tensor(1.0)
    assert len(TanhFunction(t).parents) == 1
    assert len(AddFunction(t, t).parents) == 2