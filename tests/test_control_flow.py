import pytest

from stacknt.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("true {1} {2} if-else", [1.0]),
        ("false {1} {2} if-else", [2.0]),
        ("1 2 = {1} {2} if-else", [2.0]),
        ('"x" "x" = { "same" } { "different" } if-else', ["same"]),
        # anything but a Bool is false
        ("1 {1} {2} if-else", [2.0]),
        ("true 10 20 if-else", [10.0]),
    ],
)
def test_if_else(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("true { 1 } when", [1.0]),
        ("false { 1 } when", []),
        ("0 false { 1 } when", [0.0]),
    ],
)
def test_when(run, source, expected):
    assert run(source) == expected


def test_while_counts_to_five(run):
    stack = run('0 "i" let { i 5 != } { i 1 + "i" let } while i')
    assert stack[-1] == 5.0


def test_while_reevaluates_condition_each_iteration(run, capsys):
    run('3 "n" let { n 0 != } { n println n 1 - "n" let } while')
    assert capsys.readouterr().out == "3\n2\n1\n"


def test_while_false_condition_never_runs_body(run):
    assert run('{ false } { "ran" } while') == []


def test_while_non_bool_condition_stops(run):
    # the condition pushes a number, which coerces to false
    assert run("{ 1 } { 2 } while") == []


def test_branches_share_the_environment(interp, run):
    run('true { 9 "inner" let } when')
    assert interp.env.get(Symbol("inner")) == 9.0


def test_recursive_function(run):
    source = """
    0 "n" let
    { n 1 + "n" let  n 10 != { count } when } "count" defun
    count n
    """
    assert run(source) == [10.0]


def test_factorial(interp):
    source = """
    { "n" let
      n 0 =
      { 1 }
      { n  n 1 - fact  * }
      if-else
    } "fact" defun
    """
    # n is global and the recursive call rebinds it, so each frame pushes its
    # own n before recursing and multiplies afterwards.
    interp.eval(source)
    assert interp.eval("5 fact") == [120.0]
