import math

import pytest

from numlab.recursion import factorial, fib_iterative, fib_recursive, fib_trace, main


def test_fib_base_cases():
    assert fib_iterative(0) == 1
    assert fib_iterative(1) == 1
    assert fib_recursive(0) == (1, 1)


def test_fib_value():
    assert fib_iterative(10) == 89


def test_fib_recurrence():
    values = [fib_iterative(k) for k in range(25)]
    assert all(values[k] == values[k - 1] + values[k - 2] for k in range(2, 25))


@pytest.mark.parametrize("n", [0, 1, 2, 5, 12])
def test_recursive_matches_iterative(n):
    value, _ = fib_recursive(n)
    assert value == fib_iterative(n)


@pytest.mark.parametrize("n", [1, 4, 6, 15])
def test_recursive_call_count(n):
    value, calls = fib_recursive(n)
    assert calls == 2 * value - 1


def test_trace_order_and_count():
    value, lines = fib_trace(3)
    assert value == fib_iterative(3)
    assert len(lines) == fib_recursive(3)[1]
    assert lines[0] == "k: 0 fib n: 3 +"
    assert lines[-1].startswith(f"k: {len(lines) - 1} fib n: ")


def test_negative_index_rejected():
    with pytest.raises(ValueError):
        fib_iterative(-1)
    with pytest.raises(ValueError):
        fib_recursive(-2)


@pytest.mark.parametrize("n", [0, 1, 6, 10])
def test_factorial_matches_math(n):
    assert factorial(n) == math.factorial(n)


def test_factorial_negative():
    with pytest.raises(ValueError):
        factorial(-3)


def test_main_output(capsys):
    assert main(["8"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Hello World!")
    assert f"The factorial of 6 is {math.factorial(6)}" in out
    assert f"Iterative  return: {fib_iterative(8)}" in out