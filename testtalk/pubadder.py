"""Public integer addition."""


def add_numbers(x: int, y: int) -> int:
    """Return the sum of ``x`` and ``y``."""
    return x + y