"""A small adder whose result depends only on its first operand."""


def add_numbers(x: int, y: int) -> int:
    """Return ``x + x``; the second operand is accepted but not used."""
    return x + x