from timeit import timeit

from stacknt.interpreter import Interpreter
from stacknt.reader.parser import parse
from stacknt.reader.tokenizer import tokenize


def time_parse(code: str, rounds: int) -> float:
    """Time tokenizing and parsing only."""
    parse(code)  # Warmup
    return timeit(lambda: parse(code), number=rounds)


def time_tokenize(code: str, rounds: int) -> float:
    tokenize(code)
    return timeit(lambda: tokenize(code), number=rounds)


def time_interpreter(code: str, rounds: int) -> float:
    """Time evaluation only: parse once, then run the same program repeatedly
    on a fresh session each round (so bindings do not leak between rounds).
    """
    program = parse(code)
    Interpreter().run(program)  # Warmup

    def _once():
        Interpreter().run(program)

    return timeit(_once, number=rounds)


# A few Stack NT programs covering loops, recursion and block evaluation

ARITH_LOOP_CODE = r"""
0 "i" let 0 "acc" let
{ i 500 != } { acc i + "acc" let i 1 + "i" let } while
acc
"""

RECURSION_CODE = r"""
0 "n" let
{ n 1 + "n" let n 100 != { count } when } "count" defun
count n
"""

NESTED_EVAL_CODE = r"""
{ { { 1 2 + } eval 3 * } eval 4 ^ } eval
"""


def _print_row(name: str, code: str, rounds: int) -> None:
    ttok = time_tokenize(code, rounds)
    tparse = time_parse(code, rounds)
    teval = time_interpreter(code, rounds)
    print(f"Benchmark: {name}")
    print(f"  tokenize: {ttok:.6f}s  |  parse: {tparse:.6f}s  |  eval: {teval:.6f}s  [rounds={rounds}]")


if __name__ == "__main__":
    _print_row("while loop sum 0..499", ARITH_LOOP_CODE, 50)
    _print_row("user-defined recursion x100", RECURSION_CODE, 200)
    _print_row("nested eval", NESTED_EVAL_CODE, 2000)
