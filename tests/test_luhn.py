import pytest

from coursekit.luhn import luhn, main


def test_non_digit_cc_number():
    assert not luhn("foo")


@pytest.mark.parametrize("number", ["", " ", "  ", "    "])
def test_empty_cc_number(number):
    assert not luhn(number)


def test_single_digit_cc_number():
    assert not luhn("0")


def test_two_digit_cc_number():
    assert luhn(" 0 0 ")


@pytest.mark.parametrize(
    "number", ["4263 9826 4026 9299", "4539 3195 0343 6467", "7992 7398 713"]
)
def test_valid_cc_number(number):
    assert luhn(number)


@pytest.mark.parametrize(
    "number", ["4223 9826 4026 9299", "4539 3195 0343 6476", "8273 1232 7352 0569"]
)
def test_invalid_cc_number(number):
    assert not luhn(number)


def test_non_ascii_digit_rejected():
    assert not luhn("\u0660\u0660")


def test_main_prints_verdict(capsys):
    assert main(["7992 7398 713"]) == 0
    assert capsys.readouterr().out == (
        "Is 7992 7398 713 a valid credit card number? yes\n"
    )


def test_main_invalid(capsys):
    main(["foo"])
    assert capsys.readouterr().out.endswith("? no\n")