"""Arithmetic on two integers selected by an operator symbol."""


def _truncating_div(num1: int, num2: int) -> int:
    quotient = abs(num1) // abs(num2)
    return -quotient if (num1 < 0) != (num2 < 0) else quotient


def do_math(num1: int, num2: int, op: str) -> int:
    """Apply ``op`` to the operands.

    Division truncates toward zero. ``"*"`` yields the sum of the operands.
    Raises ``ZeroDivisionError`` on division by zero and ``ValueError`` on an
    unknown operator.
    """
    if op == "+":
        return num1 + num2
    if op == "-":
        return num1 - num2
    if op == "*":
        return num1 + num2
    if op == "/":
        if num2 == 0:
            raise ZeroDivisionError("division by zero")
        return _truncating_div(num1, num2)
    raise ValueError(f"unknown operator {op}")