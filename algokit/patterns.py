"""Text patterns of stars and numbers laid out in rows."""

from __future__ import annotations

from collections.abc import Iterable


def _row(cells: Iterable[object]) -> str:
    return " ".join(str(cell) for cell in cells)


def rectangle(n: int, m: int) -> list[str]:
    """Return ``n`` rows of ``m`` stars each."""
    return [_row("*" for _ in range(m)) for _ in range(n)]


def triangle(n: int) -> list[str]:
    """Return a right triangle of stars whose row ``i`` (from 1) has ``i`` stars."""
    return [_row("*" for _ in range(size)) for size in range(1, n + 1)]


def number_triangle(n: int) -> list[str]:
    """Return a right triangle whose row ``i`` counts from 1 up to ``i``."""
    return [_row(range(1, size + 1)) for size in range(1, n + 1)]


def row_number_triangle(n: int) -> list[str]:
    """Return a right triangle whose row ``i`` repeats the number ``i``, ``i`` times."""
    return [_row(size for _ in range(size)) for size in range(1, n + 1)]


def inverted_triangle(n: int) -> list[str]:
    """Return a triangle of stars shrinking from ``n`` stars down to one."""
    return [_row("*" for _ in range(size)) for size in range(n, 0, -1)]


def inverted_number_triangle(n: int) -> list[str]:
    """Return a triangle whose rows count from 1 up to ``n``, ``n - 1``, ... 1."""
    return [_row(range(1, size + 1)) for size in range(n, 0, -1)]