"""Line-oriented text format for the account ledger.

Each account is one line::

    <account_number> <balance> <pin_digest> "<holder name>"

The holder name is double-quoted. Backslashes and double quotes inside
it are escaped with a backslash, and line breaks are written as ``\\n``
and ``\\r`` so a record never spans two lines.
"""

import io
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Iterable, TextIO

from bank_ledger.exceptions import MalformedRecordError
from bank_ledger.logging import get_logger
from bank_ledger.models import CENTS, MAX_BALANCE, Account

logger = get_logger(__name__)

QUOTE = '"'
ESCAPE = "\\"

_ESCAPES = str.maketrans({
    ESCAPE: ESCAPE + ESCAPE,
    QUOTE: ESCAPE + QUOTE,
    "\n": ESCAPE + "n",
    "\r": ESCAPE + "r",
})
_UNESCAPES = {"n": "\n", "r": "\r"}


def quote_name(name: str) -> str:
    """Quote and escape a holder name."""
    return QUOTE + name.translate(_ESCAPES) + QUOTE


def unquote_name(text: str) -> tuple[str, str]:
    """Parse a quoted name at the start of ``text``.

    Returns
    -------
    tuple[str, str]
        The unescaped name and whatever follows the closing quote.
    """
    if not text.startswith(QUOTE):
        raise MalformedRecordError("Holder name is not quoted")

    chars: list[str] = []
    i = 1
    while i < len(text):
        ch = text[i]
        if ch == ESCAPE:
            if i + 1 >= len(text):
                break
            nxt = text[i + 1]
            chars.append(_UNESCAPES.get(nxt, nxt))
            i += 2
            continue
        if ch == QUOTE:
            return "".join(chars), text[i + 1 :]
        chars.append(ch)
        i += 1

    raise MalformedRecordError("Unterminated holder name")


def encode_account(account: Account) -> str:
    """Encode one account as a newline-terminated record."""
    return (
        f"{account.account_number} {account.balance:.2f} "
        f"{account.pin_digest} {quote_name(account.holder_name)}\n"
    )


def decode_account(line: str) -> Account:
    """Parse one record line.

    Raises
    ------
    MalformedRecordError
        If any field is missing or invalid.
    """
    parts = line.rstrip("\r\n").split(None, 3)
    if len(parts) < 4:
        raise MalformedRecordError(f"Expected 4 fields, got {len(parts)}")
    number_text, balance_text, pin_digest, name_text = parts

    if not (number_text.isascii() and number_text.isdigit()) or int(number_text) < 1:
        raise MalformedRecordError(f"Bad account number {number_text!r}")
    account_number = int(number_text)

    try:
        balance = Decimal(balance_text)
        if not balance.is_finite() or balance < 0 or balance > MAX_BALANCE:
            raise MalformedRecordError(f"Bad balance {balance_text!r}")
        balance = balance.quantize(CENTS, rounding=ROUND_HALF_UP)
    except (ValueError, InvalidOperation) as exc:
        raise MalformedRecordError(f"Bad numeric field in {line!r}") from exc

    holder_name, rest = unquote_name(name_text)
    if rest.strip():
        raise MalformedRecordError(f"Trailing data after holder name: {rest!r}")

    return Account(
        account_number=account_number,
        holder_name=holder_name,
        balance=balance,
        pin_digest=pin_digest,
    )


def write_accounts(accounts: Iterable[Account], fp: TextIO) -> int:
    """Write records to an open text stream; return the count written."""
    count = 0
    for account in accounts:
        fp.write(encode_account(account))
        count += 1
    return count


def serialize(accounts: Iterable[Account]) -> str:
    """Encode accounts as ledger file text."""
    return "".join(encode_account(account) for account in accounts)


def deserialize(source: str | Iterable[str]) -> list[Account]:
    """Decode ledger text or an iterable of lines.

    Blank lines are skipped. Parsing stops at the first malformed record
    and the accounts read so far are returned.
    """
    lines = io.StringIO(source) if isinstance(source, str) else source

    accounts: list[Account] = []
    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            accounts.append(decode_account(line))
        except MalformedRecordError as exc:
            logger.warning("Stopped reading at line %d: %s", lineno, exc)
            break
    return accounts
