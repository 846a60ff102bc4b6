import pytest

from algodrills.numtheory import (
    FIBONACCI_MODULUS,
    fibonacci_mod,
    pisano_period,
    prime_game_winner,
    primes_up_to,
)


def test_small_primes():
    assert primes_up_to(10) == [2, 3, 5, 7]


def test_no_primes_below_two():
    assert primes_up_to(1) == []
    assert primes_up_to(-5) == []


def test_primes_have_no_smaller_prime_divisor():
    primes = primes_up_to(1000)
    assert all(q % p for i, q in enumerate(primes) for p in primes[:i])
    assert primes == sorted(set(primes))


def test_primes_prefix_consistent():
    assert primes_up_to(1000)[: len(primes_up_to(100))] == primes_up_to(100)


def test_game_no_primes_first_player_stuck():
    assert prime_game_winner((1, 1), (1, 1)) == "yj"


def test_game_one_shared_prime_second_player_stuck():
    assert prime_game_winner((2, 2), (2, 2)) == "yt"


def test_game_first_player_with_extra_prime():
    assert prime_game_winner((2, 3), (2, 2)) == "yt"
    assert prime_game_winner((2, 2), (2, 3)) == "yj"


def test_pisano_small_moduli():
    assert pisano_period(10) == 60
    assert pisano_period(2) == 3
    assert pisano_period(1) == 1


def test_pisano_rejects_zero():
    with pytest.raises(ValueError):
        pisano_period(0)


def test_fibonacci_start():
    assert fibonacci_mod(0) == 0
    assert fibonacci_mod(1) == 1


@pytest.mark.parametrize("n", [0, 5, 77, 1_000_000_007, 10**18])
def test_fibonacci_recurrence(n):
    total = (fibonacci_mod(n) + fibonacci_mod(n + 1)) % FIBONACCI_MODULUS
    assert fibonacci_mod(n + 2) == total
    assert 0 <= fibonacci_mod(n) < FIBONACCI_MODULUS


def test_fibonacci_rejects_negative():
    with pytest.raises(ValueError):
        fibonacci_mod(-1)