import pytest

from ftkit.convert import atoi, atoi_base, itoa


@pytest.mark.parametrize("n", [0, 1, -1, 7, 42, -42, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_zero():
    assert itoa(0) == "0"


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("12")


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi(" \t\n\v\f\r-42abc") == -42
    assert atoi("+17 and more") == 17


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("-") == 0


def test_atoi_single_sign_only():
    assert atoi("--5") == 0
    assert atoi("+-5") == 0


@pytest.mark.parametrize("n", [0, 1, 9, 10, 255, 4096, 123456789])
@pytest.mark.parametrize("base,fmt", [(2, "b"), (8, "o"), (10, "d"), (16, "x"), (16, "X")])
def test_atoi_base_round_trip(n, base, fmt):
    assert atoi_base(format(n, fmt), base) == n


@pytest.mark.parametrize("n", [0, 31, 65535])
def test_atoi_base_hex_prefix(n):
    assert atoi_base("0x" + format(n, "x"), 16) == n
    assert atoi_base("0X" + format(n, "X"), 16) == n


def test_atoi_base_negative_only_in_base_ten():
    assert atoi_base("-25", 10) == -25
    assert atoi_base("-25", 16) == 0


def test_atoi_base_stops_at_invalid_digit():
    assert atoi_base("1012", 2) == atoi_base("101", 2)
    assert atoi_base("7g", 16) == 7


@pytest.mark.parametrize("base", [0, 1, 17, -10])
def test_atoi_base_rejects_bad_base(base):
    with pytest.raises(ValueError):
        atoi_base("10", base)