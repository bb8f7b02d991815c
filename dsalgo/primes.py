"""Prime numbers by sieve and by trial division."""

from __future__ import annotations

from math import isqrt


def sieve(n):
    """Return every prime below ``n`` using the sieve of Eratosthenes."""
    if n < 3:
        return []
    composite = bytearray(n)
    for i in range(2, isqrt(n - 1) + 1):
        if not composite[i]:
            composite[i * i :: i] = b"\x01" * len(range(i * i, n, i))
    return [i for i in range(2, n) if not composite[i]]


def is_prime(n):
    """Return whether ``n`` is prime by trial division."""
    if n < 2:
        return False
    return all(n % i for i in range(2, isqrt(n) + 1))