"""Winning probabilities for a randomised game of Nim, modulo a prime."""

from functools import reduce
from operator import xor

MOD = 1_000_000_007


def nim_sum(piles):
    """Bitwise XOR of all pile sizes."""
    return reduce(xor, piles, 0)


def mod_inverse(value, modulus=MOD):
    """Inverse of value modulo a prime, by Fermat's little theorem."""
    return pow(value, modulus - 2, modulus)


def win_probability(piles, d):
    """Probability P/Q of winning, with Q = d, reduced modulo MOD."""
    if nim_sum(piles) == 0:
        numerator = d // 2
    else:
        numerator = (d + 1) // 2
    return numerator * mod_inverse(d) % MOD


def win_probability_over_two_d(piles, d):
    """Probability (d +/- 1) / (2d) of winning, reduced modulo MOD."""
    numerator = d + 1 if nim_sum(piles) != 0 else d - 1
    return numerator * mod_inverse(2 * d) % MOD