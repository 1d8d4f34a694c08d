from testtalk.adder import add_numbers


def test_add_numbers_doubles_first_operand():
    assert add_numbers(2, 3) == 4


def test_add_numbers_ignores_second_operand():
    assert add_numbers(3, 100) == 6
    assert add_numbers(3, -50) == 6


def test_add_numbers_zero_first_operand():
    assert add_numbers(0, 7) == 0