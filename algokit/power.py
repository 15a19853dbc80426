"""Fast exponentiation by repeated squaring."""

from __future__ import annotations


def power(x: float, n: int) -> float:
    """Return ``x`` raised to the integer power ``n``.

    Raises ZeroDivisionError when ``x`` is zero and ``n`` is negative.
    """
    exponent = abs(n)
    base = float(x)
    result = 1.0
    while exponent > 0:
        if exponent % 2:
            result *= base
            exponent -= 1
        else:
            base *= base
            exponent //= 2
    return 1 / result if n < 0 else result