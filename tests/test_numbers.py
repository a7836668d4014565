import math

import pytest

from algokit.numbers import (
    decimal_to_binary,
    factorial,
    fibonacci,
    fibonacci_series,
    gcd,
    is_armstrong,
    lcm_up_to,
    nth_prime,
    prime_sieve,
    primes_up_to,
    sum_to,
    to_roman,
)


def _parse_roman(text):
    values = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
    total = 0
    for current, following in zip(text, text[1:] + " "):
        value = values[current]
        if following != " " and values[following] > value:
            total -= value
        else:
            total += value
    return total


def test_primes_have_no_smaller_prime_divisor_and_cover_all_primes():
    limit = 200
    primes = primes_up_to(limit)
    prime_set = set(primes)
    for n in range(2, limit + 1):
        has_divisor = any(n % p == 0 for p in primes if p < n)
        assert (n in prime_set) == (not has_divisor)


def test_prime_sieve_matches_prime_list():
    flags = prime_sieve(50)
    assert len(flags) == 51
    assert [i for i, flag in enumerate(flags) if flag] == primes_up_to(50)


def test_prime_sieve_small_limits():
    assert prime_sieve(0) == [False]
    assert prime_sieve(1) == [False, False]
    assert primes_up_to(1) == []


def test_prime_sieve_rejects_negative_limit():
    with pytest.raises(ValueError):
        prime_sieve(-1)


@pytest.mark.parametrize("k", [1, 2, 10, 100, 150])
def test_nth_prime_matches_prime_list(k):
    assert nth_prime(k, 1000) == primes_up_to(1000)[k - 1]
    assert nth_prime(k) == primes_up_to(1000)[k - 1]


def test_nth_prime_errors():
    with pytest.raises(ValueError):
        nth_prime(0)
    with pytest.raises(ValueError):
        nth_prime(50, 10)


@pytest.mark.parametrize("n", range(1, 30))
def test_lcm_up_to_matches_math_lcm(n):
    assert lcm_up_to(n) == math.lcm(*range(1, n + 1))


def test_lcm_up_to_below_two():
    assert lcm_up_to(0) == lcm_up_to(1) == math.lcm(1)


@pytest.mark.parametrize("n", range(0, 20))
def test_factorial_matches_math(n):
    assert factorial(n) == math.factorial(n)


def test_factorial_negative_raises():
    with pytest.raises(ValueError):
        factorial(-3)


@pytest.mark.parametrize("a,b", [(12, 18), (7, 13), (100, 75), (9, 9), (1, 50)])
def test_gcd_matches_math(a, b):
    assert gcd(a, b) == math.gcd(a, b)


def test_gcd_with_zero_returns_zero():
    assert gcd(0, 7) == 0


def test_fibonacci_recurrence():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1
    for n in range(2, 40):
        assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_fibonacci_series_matches_terms():
    assert fibonacci_series(15) == [fibonacci(i) for i in range(15)]
    assert fibonacci_series(0) == []


@pytest.mark.parametrize("value", range(0, 70))
def test_decimal_to_binary_round_trip(value):
    assert int(str(decimal_to_binary(value)), 2) == value


def test_decimal_to_binary_negative_mirrors_positive():
    assert decimal_to_binary(-5) == -decimal_to_binary(5)


@pytest.mark.parametrize("n", range(1, 30))
def test_sum_to_matches_sum(n):
    assert sum_to(n) == sum(range(1, n + 1))


def test_sum_to_counts_first_term_for_small_n():
    assert sum_to(0) == 1


@pytest.mark.parametrize("n,expected", [(153, True), (370, True), (371, True), (10, False), (154, False), (0, True), (-153, False)])
def test_is_armstrong(n, expected):
    assert is_armstrong(n) is expected


@pytest.mark.parametrize(
    "value,symbol",
    [(1, "I"), (4, "IV"), (5, "V"), (9, "IX"), (10, "X"), (40, "XL"), (50, "L"),
     (90, "XC"), (100, "C"), (400, "CD"), (500, "D"), (900, "CM"), (1000, "M")],
)
def test_to_roman_single_symbols(value, symbol):
    assert to_roman(value) == symbol


def test_to_roman_round_trip():
    for value in range(1, 4000):
        assert _parse_roman(to_roman(value)) == value


def test_to_roman_non_positive_is_empty():
    assert to_roman(0) == ""
    assert to_roman(-4) == ""