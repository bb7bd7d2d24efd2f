"""
Combinatorial helpers used by the Bernstein and power-basis evaluators.

Integers are Python ints, so factorials and binomial coefficients are exact
at any size. The degree ceiling applied by the evaluators comes from the
float conversion, see ``constants.MAX_DEGREE``.
"""

from .exceptions import InvalidArgumentError


def factorial(n: int) -> int:
    """
    Compute n! as the iterative product 1·2·…·n.

    Args:
        n: Non-negative integer

    Returns:
        n! (factorial(0) == 1)

    Raises:
        InvalidArgumentError: If n is negative
    """
    if n < 0:
        raise InvalidArgumentError(f"factorial is undefined for negative n, got {n}")

    y = 1
    for i in range(1, n + 1):
        y *= i
    return y


def combination(n: int, i: int) -> int:
    """
    Binomial coefficient C(n, i) = n! / (i! (n-i)!).

    Args:
        n: Number of items (n >= 0)
        i: Number chosen (0 <= i <= n)

    Returns:
        C(n, i) as an exact integer
    """
    if n < 0:
        raise InvalidArgumentError(f"combination requires n >= 0, got n={n}")
    if i < 0 or i > n:
        raise InvalidArgumentError(f"combination requires 0 <= i <= n, got n={n}, i={i}")

    return factorial(n) // (factorial(i) * factorial(n - i))


def power(b, n: int):
    """
    Raise b to a non-negative integer power by repeated multiplication.

    Args:
        b: Base (int or float)
        n: Exponent (n >= 0)

    Returns:
        b**n, with power(b, 0) == 1
    """
    if n < 0:
        raise InvalidArgumentError(f"power requires a non-negative exponent, got {n}")
    if n == 0:
        return 1

    y = b
    for _ in range(n - 1):
        y *= b
    return y
