"""Greeting messages."""

from __future__ import annotations


def greeting(name: str) -> str:
    """Greet ``name``."""
    return f"Hello {name}, it is very nice to meet you!"


def wish_happy_birthday(name: str, years: int) -> str:
    """Return a birthday wish for ``name`` turning ``years``."""
    return f"Happy Birthday {name}, congratulations with the {years} years!"


def analyze_numbers(x: int, y: int) -> None:
    """Print which of two numbers is the smaller."""
    if x < y:
        print(f"x ({x}) is smallest!")
    else:
        print(f"y ({y}) is probably larger than x ({x})")