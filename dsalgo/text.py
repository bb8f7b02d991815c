"""String and digit palindromes, and removal of a digit from a string."""

from __future__ import annotations

import argparse
import sys


def is_palindrome(text):
    """Return whether ``text`` reads the same backwards."""
    return text == text[::-1]


def remove_digit(text, digit):
    """Return ``text`` without the first occurrence of ``digit``."""
    index = text.find(digit)
    if index < 0:
        raise ValueError(f"{digit!r} does not occur in {text!r}")
    return text[:index] + text[index + len(digit) :]


def reverse_digits(number):
    """Return ``number`` with its decimal digits reversed, keeping its sign."""
    sign = -1 if number < 0 else 1
    return sign * int(str(abs(number))[::-1])


def is_reverse_palindrome(values):
    """Return whether each value equals the digit reversal of its mirror value."""
    items = list(values)
    return all(
        items[i] == reverse_digits(items[-1 - i]) for i in range(len(items) // 2)
    )


def main(argv=None):
    """Read numbers (count first) or, with --text, one word, and report palindromes."""
    parser = argparse.ArgumentParser(
        prog="dsalgo-palindrome",
        description="Check palindromes read from standard input.",
    )
    parser.add_argument(
        "--text", action="store_true", help="check a single word instead of numbers"
    )
    args = parser.parse_args(argv)
    tokens = sys.stdin.read().split()
    if args.text:
        if not tokens:
            print("expected a word on standard input", file=sys.stderr)
            return 1
        print("Palindrome" if is_palindrome(tokens[0]) else "Non-palindrome")
        return 0
    try:
        size = int(tokens[0])
        values = [int(token) for token in tokens[1 : 1 + size]]
    except (IndexError, ValueError):
        print("expected a count followed by that many integers", file=sys.stderr)
        return 1
    if size < 0 or len(values) < size:
        print("expected a count followed by that many integers", file=sys.stderr)
        return 1
    print(int(is_reverse_palindrome(values)))
    return 0