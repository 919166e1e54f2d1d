"""Introductory recursive algorithms."""

from __future__ import annotations

from collections.abc import Iterator
from functools import lru_cache
from math import isqrt


def count_down(n: int) -> Iterator[str]:
    """Yield ``"n :<k>"`` for k from n down to 1, then a greeting."""
    if n < 1:
        raise ValueError("count_down requires n >= 1")
    for k in range(n, 0, -1):
        yield f"n :{k}"
    yield "Happy new year"


@lru_cache(maxsize=None)
def _fib(n: int) -> int:
    if n in (0, 1):
        return n
    return _fib(n - 1) + _fib(n - 2)


def fib(n: int) -> int:
    """Return the n-th Fibonacci number using memoised recursion."""
    if n < 0:
        raise ValueError("fib requires n >= 0")
    # Warm the cache bottom-up so deep calls stay within the recursion limit.
    for k in range(0, n, 500):
        _fib(k)
    return _fib(n)


def fib_tab(n: int) -> int:
    """Return the n-th Fibonacci number using a bottom-up table."""
    if n < 0:
        raise ValueError("fib_tab requires n >= 0")
    table = [0, 1]
    for i in range(2, n + 1):
        table.append(table[i - 1] + table[i - 2])
    return table[n]


def is_prime(num: int) -> bool:
    """Return True if ``num`` is prime, testing divisors up to its square root."""
    if num < 2:
        return False
    return all(num % divisor for divisor in range(2, isqrt(num) + 1))


def decimal_to_binary(decimal: int) -> str:
    """Return the binary digits of ``decimal``; zero gives an empty string."""
    if decimal < 0:
        raise ValueError("decimal_to_binary requires a non-negative number")
    return format(decimal, "b") if decimal else ""


def factorial(num: int) -> int:
    """Return ``num!``."""
    if num < 0:
        raise ValueError("factorial requires num >= 0")
    result = 1
    for k in range(2, num + 1):
        result *= k
    return result


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of ``a`` and ``b`` by Euclid's rule."""
    while b:
        a, b = b, a % b
    return a


def sum_natural(num: int) -> int:
    """Return ``1 + 2 + ... + num``."""
    if num < 0:
        raise ValueError("sum_natural requires num >= 0")
    return num * (num + 1) // 2