import stepsolve
from stepsolve import errors, solve, steps
from stepsolve.expr import format as fmt
from stepsolve.expr import lexer, negation, reduce


def test_imports() -> None:
    assert stepsolve.__version__
    assert errors is not None
    assert solve is not None
    assert steps is not None
    assert fmt is not None
    assert lexer is not None
    assert negation is not None
    assert reduce is not None
