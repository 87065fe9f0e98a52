"""Small demonstration command for the tensor library."""

from __future__ import annotations

import argparse

from scalargrad.tensor import Tensor

_GREETING = "hello world"
_INTERNAL_MESSAGE = "secret"


def _internal_implementation() -> None:
    """Print the internal message."""
    print(_INTERNAL_MESSAGE)


def hello_world() -> None:
    """Print a greeting followed by the internal message."""
    print(_GREETING)
    _internal_implementation()


def main(argv: list[str] | None = None) -> int:
    """Build two tensors, print them and their sum."""
    parser = argparse.ArgumentParser(
        prog="scalargrad", description="Demonstrate scalar tensors."
    )
    parser.parse_args(argv)

    float_tensor = Tensor(3.0)
    second_tensor = Tensor(4.0)
    print(f"Tensor value {float_tensor.item():g}")
    print(float_tensor)
    total = float_tensor + second_tensor
    print(total)
    print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())