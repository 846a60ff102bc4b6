"""Number theory drills: prime sieve, a prime-calling game and Fibonacci modulo."""

from __future__ import annotations

from functools import lru_cache

FIBONACCI_MODULUS = 1_000_000


def primes_up_to(limit: int) -> list[int]:
    """Return all primes not greater than ``limit`` in ascending order."""
    if limit < 2:
        return []
    sieve = bytearray([1]) * (limit + 1)
    sieve[0] = sieve[1] = 0
    for candidate in range(2, int(limit**0.5) + 1):
        if sieve[candidate]:
            sieve[candidate * candidate :: candidate] = bytearray(
                len(range(candidate * candidate, limit + 1, candidate))
            )
    return [number for number, flag in enumerate(sieve) if flag]


def _primes_between(bounds: tuple[int, int]) -> set[int]:
    low, high = bounds
    return {p for p in primes_up_to(high) if p >= low}


def prime_game_winner(first_range: tuple[int, int], second_range: tuple[int, int]) -> str:
    """Play the prime-calling game and return ``"yj"`` or ``"yt"``.

    Players alternately call an unused prime from their own inclusive range,
    the first player starting and shared primes being called first. The result
    is ``"yj"`` when the first player is the one left without a move, else ``"yt"``.
    """
    first = _primes_between(first_range)
    second = _primes_between(second_range)
    shared = len(first & second)
    remaining = [len(first - second), len(second - first)]

    turn = 1
    while True:
        turn = (turn + 1) % 2
        if shared:
            shared -= 1
        elif remaining[turn]:
            remaining[turn] -= 1
        else:
            break
    return "yj" if turn == 0 else "yt"


@lru_cache(maxsize=None)
def pisano_period(modulus: int) -> int:
    """Return the period of the Fibonacci sequence taken modulo ``modulus``."""
    if modulus < 1:
        raise ValueError("modulus must be positive")
    start = (0, 1 % modulus)
    a, b = start
    period = 0
    while True:
        a, b = b, (a + b) % modulus
        period += 1
        if (a, b) == start:
            return period


def _fibonacci_pair(n: int, modulus: int) -> tuple[int, int]:
    """Return (F(n), F(n+1)) modulo ``modulus`` by fast doubling."""
    if n == 0:
        return 0, 1 % modulus
    a, b = _fibonacci_pair(n >> 1, modulus)
    even = a * (2 * b - a) % modulus
    odd = (a * a + b * b) % modulus
    if n & 1:
        return odd, (even + odd) % modulus
    return even, odd


def fibonacci_mod(n: int) -> int:
    """Return the ``n``-th Fibonacci number modulo 1,000,000."""
    if n < 0:
        raise ValueError("n must not be negative")
    return _fibonacci_pair(n, FIBONACCI_MODULUS)[0]