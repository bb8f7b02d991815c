import io

import pytest

from dsalgo.text import (
    is_palindrome,
    is_reverse_palindrome,
    main,
    remove_digit,
    reverse_digits,
)


@pytest.mark.parametrize("word", ["pop", "civic", "123454321", "rotor", "obobo", "nancyiycnan", ""])
def test_palindromes(word):
    assert is_palindrome(word) is True


def test_not_palindrome():
    assert is_palindrome("abc") is False


def test_remove_digit_source_example():
    assert remove_digit("133235", "3") == "13235"


def test_remove_digit_invariants():
    text = "9081726354"
    for digit in set(text):
        result = remove_digit(text, digit)
        assert len(result) == len(text) - 1
        index = text.index(digit)
        assert result[:index] + digit + result[index:] == text


def test_remove_digit_absent():
    with pytest.raises(ValueError):
        remove_digit("1234", "7")


def test_reverse_digits():
    assert reverse_digits(134) == 431
    assert reverse_digits(-12) == -21
    assert reverse_digits(0) == 0
    for n in (431, 21, 987654):
        assert reverse_digits(reverse_digits(n)) == n


def test_is_reverse_palindrome_source_example():
    assert is_reverse_palindrome([134, 21, 12, 431]) is True
    assert is_reverse_palindrome([1, 2]) is False
    assert is_reverse_palindrome([]) is True


def test_main_numbers(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n134\n21\n12\n431\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "1\n"


def test_main_numbers_false(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 12 12\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "0\n"


def test_main_text(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("civic\n"))
    assert main(["--text"]) == 0
    assert capsys.readouterr().out == "Palindrome\n"


def test_main_text_non_palindrome(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n"))
    assert main(["--text"]) == 0
    assert capsys.readouterr().out == "Non-palindrome\n"


def test_main_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 1 2\n"))
    assert main([]) == 1
    assert capsys.readouterr().out == ""