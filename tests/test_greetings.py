from coursekit.greetings import analyze_numbers, greeting, wish_happy_birthday


def test_greeting():
    assert greeting("Bob") == "Hello Bob, it is very nice to meet you!"


def test_greeting_contains_name():
    assert "Alice" in greeting("Alice")


def test_wish_happy_birthday():
    assert (
        wish_happy_birthday("Bob", 42)
        == "Happy Birthday Bob, congratulations with the 42 years!"
    )


def test_wish_happy_birthday_uses_years():
    message = wish_happy_birthday("Ann", 7)
    assert message.startswith("Happy Birthday Ann,")
    assert "the 7 years!" in message


def test_analyze_numbers_x_smaller(capsys):
    analyze_numbers(1, 2)
    assert capsys.readouterr().out == "x (1) is smallest!\n"


def test_analyze_numbers_y_not_larger(capsys):
    analyze_numbers(5, 3)
    assert capsys.readouterr().out == "y (3) is probably larger than x (5)\n"


def test_analyze_numbers_equal(capsys):
    analyze_numbers(4, 4)
    assert capsys.readouterr().out == "y (4) is probably larger than x (4)\n"