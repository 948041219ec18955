"""Validated terminal input primitives.

Each prompt re-asks until it gets a valid value. ``EOFError`` from the
input function propagates so the caller can treat end of input as quit.
"""

from decimal import Decimal
from typing import Callable

from bank_ledger.exceptions import InvalidAmountError
from bank_ledger.models import to_money

InputFn = Callable[[str], str]


def prompt_int(
    prompt: str,
    input_fn: InputFn = input,
    minimum: int | None = None,
    maximum: int | None = None,
) -> int:
    """Ask until the answer is an integer within ``[minimum, maximum]``."""
    while True:
        raw = input_fn(prompt).strip()
        try:
            value = int(raw)
        except ValueError:
            value = None
        if value is not None and (minimum is None or value >= minimum) and (maximum is None or value <= maximum):
            return value
        print("Invalid input. Please enter a valid number.")


def prompt_amount(prompt: str, input_fn: InputFn = input, minimum: Decimal | None = None) -> Decimal:
    """Ask until the answer is an amount no lower than ``minimum``."""
    while True:
        raw = input_fn(prompt)
        try:
            value = to_money(raw)
        except InvalidAmountError:
            value = None
        if value is not None and (minimum is None or value >= minimum):
            return value
        print("Invalid input. Please enter a valid number.")


def prompt_text(prompt: str, input_fn: InputFn = input) -> str:
    """Ask until the answer is not empty."""
    while True:
        value = input_fn(prompt)
        if value.strip():
            return value
        print("Input cannot be empty. Please try again.")
