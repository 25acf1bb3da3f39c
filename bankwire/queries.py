"""Reports over executed transfers: listings, revenue, histories and summaries."""

from __future__ import annotations

from bisect import bisect_left

from .bank import Bank
from .models import Transaction

DAY = 1_000_000
HISTORY_LIMIT = 10
_UINT64 = 1 << 64

_UNITS = (
    ("year", 10_000_000_000),
    ("month", 100_000_000),
    ("day", 1_000_000),
    ("hour", 10_000),
    ("minute", 100),
    ("second", 1),
)


def _window(bank: Bank, start: int, end: int) -> list[Transaction]:
    """Executed transfers with ``start <= exec_date < end``."""
    key = _exec_date
    low = bisect_left(bank.executed, start, key=key)
    high = bisect_left(bank.executed, end, key=key)
    return bank.executed[low:high]


def _exec_date(transaction: Transaction) -> int:
    return transaction.exec_date


def list_transactions(bank: Bank, start: int, end: int) -> list[str]:
    """List the transfers executed in ``[start, end)`` followed by their count."""
    found = _window(bank, start, end)
    lines = [transaction.describe() for transaction in found]
    if len(found) == 1:
        lines.append(
            f"There was 1 transaction that was placed between time {start} to {end}."
        )
    else:
        lines.append(
            f"There were {len(found)} transactions that were placed "
            f"between time {start} to {end}."
        )
    return lines


def format_duration(difference: int) -> str:
    """Spell out a timestamp difference, e.g. ``"1 year 2 days"``.

    Each two-digit field of the difference is read as one unit; fields that
    are zero are left out. Negative differences wrap around as unsigned
    64-bit values.
    """
    difference %= _UINT64
    parts = []
    for name, scale in _UNITS:
        value = difference // scale % 100
        if value:
            parts.append(f"{value} {name}" if value == 1 else f"{value} {name}s")
    return " ".join(parts)


def bank_revenue(bank: Bank, start: int, end: int) -> str:
    """Report the fees collected on transfers executed in ``[start, end)``."""
    fees = sum(transaction.fee for transaction in _window(bank, start, end))
    duration = format_duration(end - start)
    over = f" {duration}" if duration else ""
    return f"281Bank has collected {fees} dollars in fees over{over}."


def customer_history(bank: Bank, user_id: str) -> list[str]:
    """Summarise a customer's balance and their latest transfers."""
    user = bank.users.get(user_id)
    if user is None:
        return [f"User {user_id} does not exist."]
    lines = [
        f"Customer {user_id} account summary:",
        f"Balance: ${user.balance}",
        f"Total # of transactions: {len(user.incoming) + len(user.outgoing)}",
        f"Incoming {len(user.incoming)}:",
    ]
    lines.extend(t.describe() for t in user.incoming[-HISTORY_LIMIT:])
    lines.append(f"Outgoing {len(user.outgoing)}:")
    lines.extend(t.describe() for t in user.outgoing[-HISTORY_LIMIT:])
    return lines


def day_summary(bank: Bank, timestamp: int) -> list[str]:
    """Summarise the transfers executed on the day containing ``timestamp``."""
    day_start = timestamp // DAY * DAY
    day_end = day_start + DAY
    found = _window(bank, day_start, day_end)
    fees = sum(transaction.fee for transaction in found)
    lines = [f"Summary of [{day_start}, {day_end}):"]
    lines.extend(transaction.describe() for transaction in found)
    if len(found) == 1:
        lines.append(
            f"There was a total of 1 transaction, 281Bank has collected {fees} dollars in fees."
        )
    else:
        lines.append(
            f"There were a total of {len(found)} transactions, "
            f"281Bank has collected {fees} dollars in fees."
        )
    return lines