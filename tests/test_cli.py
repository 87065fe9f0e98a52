import pytest

from scalargrad.cli import hello_world, main
from scalargrad.tensor import Tensor


def test_hello_world_output(capsys):
    hello_world()
    assert capsys.readouterr().out == "hello world\nsecret\n"


def test_main_returns_zero():
    assert main([]) == 0


def test_main_prints_value_first(capsys):
    main([])
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Tensor value 3"


def test_main_prints_tensors(capsys):
    main([])
    lines = capsys.readouterr().out.splitlines()
    assert lines[1] == str(Tensor(3.0))
    assert lines[2] == str(Tensor(3.0) + Tensor(4.0))
    assert lines[3] == ""


def test_main_rejects_unknown_argument():
    with pytest.raises(SystemExit):
        main(["--bogus"])