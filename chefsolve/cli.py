"""Command-line front end: read a problem's input text and print its answers."""

import argparse
import sys

from chefsolve import arithmetic, nim, sequences, simple


class _Tokens:
    """Whitespace-separated tokens of an input text, consumed in order."""

    def __init__(self, text):
        self._tokens = iter(text.split())

    def word(self):
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def int(self):
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def ints(self, count):
        return [self.int() for _ in range(count)]


def _render(value):
    if isinstance(value, bool):
        return "YES" if value else "NO"
    return str(value)


def _single(func, arity):
    """Handler for a problem that answers one question from ``arity`` integers."""

    def handler(tokens):
        yield _render(func(*tokens.ints(arity)))

    return handler


def _cases(case):
    """Handler for a problem whose input starts with a count of test cases."""

    def handler(tokens):
        for _ in range(tokens.int()):
            yield case(tokens)

    return handler


def _simple_case(func, arity):
    return _cases(lambda tokens: _render(func(*tokens.ints(arity))))


def _abnomat(tokens):
    n, m = tokens.ints(2)
    first, second = tokens.word(), tokens.word()
    return _render(sequences.unused_letter_exists(first[:n], second[:m]))


def _arraystate(tokens):
    n, k = tokens.ints(2)
    values = tokens.ints(n)
    return " ".join(str(v) for v in sequences.array_state(values, k))


def _callim(tokens):
    n, limit = tokens.ints(2)
    return _render(sequences.sweets_eaten(tokens.ints(n), limit))


def _evensumsub(tokens):
    n = tokens.int()
    return _render(sequences.longest_even_sum_subarray(tokens.ints(n)))


def _uselec(tokens):
    n, budget = tokens.ints(2)
    a_votes = tokens.ints(n)
    b_votes = tokens.ints(n)
    return _render(sequences.can_win_election(a_votes, b_votes, budget))


def _nim_case(func):
    def case(tokens):
        n, d = tokens.ints(2)
        return _render(func(tokens.ints(n), d))

    return case


PROBLEMS = {
    "ABNOMAT": _cases(_abnomat),
    "ADVITIYA1": _single(simple.advitiya_message, 1),
    "AICOM": _single(simple.ai_competition_ok, 1),
    "AP": _simple_case(arithmetic.ap_operations, 3),
    "ARRAYSTATE": _cases(_arraystate),
    "BFLY": _simple_case(arithmetic.butterfly_possible, 3),
    "CALLIM": _cases(_callim),
    "CARDGAME1": _simple_case(arithmetic.card_game, 2),
    "CHEFPAROLE": _single(simple.parole_eligible, 1),
    "COLDPLAYTICK": _single(simple.coldplay_ticket_cost, 1),
    "DEVDON": _single(simple.donut_calories, 2),
    "DIWALIDISC": _single(simple.diwali_payment, 2),
    "ERROR404": _single(simple.error_404_status, 1),
    "EVENODDDIV": _simple_case(arithmetic.even_odd_divisors, 1),
    "EVENSUMSUB": _cases(_evensumsub),
    "FLOW001": _simple_case(arithmetic.add_two, 2),
    "GDTURN": _simple_case(arithmetic.good_turn, 2),
    "GLPR": _single(simple.glass_or_plastic, 2),
    "ICECONE": _single(simple.ice_cones, 2),
    "IED": _single(simple.ied_cost, 3),
    "IOI2024": _single(simple.ioi_qualifies, 1),
    "LITRATE": _simple_case(arithmetic.literacy_ok, 2),
    "LUCLO": _single(simple.lucky_clock, 1),
    "MANGOLASSI": _single(simple.mango_lassi, 1),
    "MOVPR": _single(simple.movie_price, 3),
    "NEIREM": _single(simple.remaining_to_100, 1),
    "NETFLIX": _simple_case(arithmetic.netflix_possible, 4),
    "OFFBY1": _single(simple.off_by_one, 2),
    "RANDOM_NIM": _cases(_nim_case(nim.win_probability)),
    "RANDOM_NIM_2D": _cases(_nim_case(nim.win_probability_over_two_d)),
    "RATIO2": _simple_case(arithmetic.ratio_operations, 2),
    "RCTGLD": _simple_case(arithmetic.max_rectangle_area, 1),
    "READPAGES": _simple_case(arithmetic.can_read_pages, 3),
    "USELEC": _cases(_uselec),
    "WHOMAKESP1": _single(simple.problem_setter, 2),
}


def run(problem, text):
    """Solve ``problem`` on the given input text and return the output text."""
    try:
        handler = PROBLEMS[problem.upper()]
    except KeyError:
        raise ValueError(f"unknown problem: {problem}") from None
    lines = list(handler(_Tokens(text)))
    return "".join(f"{line}\n" for line in lines)


def main(argv=None):
    """Entry point: ``chefsolve PROBLEM [INPUT]``; input defaults to stdin."""
    parser = argparse.ArgumentParser(
        prog="chefsolve", description="Solve a programming puzzle from its input."
    )
    parser.add_argument(
        "problem", type=str.upper, choices=sorted(PROBLEMS), help="problem code"
    )
    parser.add_argument("input", nargs="?", help="input file (default: stdin)")
    args = parser.parse_args(argv)

    if args.input is None:
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()

    try:
        output = run(args.problem, text)
    except ValueError as exc:
        print(f"chefsolve: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0