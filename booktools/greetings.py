"""Greeting messages."""

from __future__ import annotations


def greeting(name: str) -> str:
    """Greet ``name``."""
    return f"Hello {name}, it is very nice to meet you!"


def wish_happy_birthday(name: str, years: int) -> str:
    """Wish ``name`` a happy birthday on turning ``years``."""
    return f"Happy Birthday {name}, congratulations with the {years} years!"