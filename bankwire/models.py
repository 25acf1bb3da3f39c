"""Core records of the wire-transfer simulator: users, transactions and fees."""

from __future__ import annotations

from dataclasses import dataclass, field

FEE_MIN = 10
FEE_MAX = 450
LOYALTY_AGE = 50_000_000_000

SHARED_FEE = "s"
OWN_FEE = "o"


def parse_timestamp(text: str) -> int:
    """Turn a ``YY:MM:DD:HH:MM:SS`` timestamp into its integer form."""
    digits = text.replace(":", "").strip()
    if not digits or not (digits.isascii() and digits.isdecimal()):
        raise ValueError(f"invalid timestamp: {text!r}")
    return int(digits)


def compute_fee(amount: int, exec_date: int, sender_registered: int) -> int:
    """Return the bank's fee for a transfer of ``amount`` dollars.

    The fee is one percent of the amount, bounded to [10, 450], and long-time
    customers (registered more than five years before execution) pay 3/4 of it.
    """
    fee = min(FEE_MAX, max(FEE_MIN, amount // 100))
    if exec_date - sender_registered > LOYALTY_AGE:
        fee = fee * 3 // 4
    return fee


@dataclass
class Transaction:
    """A transfer placed by one customer for another."""

    id: int
    timestamp: int
    sender_ip: str
    sender_id: str
    recipient_id: str
    amount: int
    exec_date: int
    fee_coverage: str
    fee: int

    def describe(self) -> str:
        """One-line summary as used in reports."""
        unit = "dollar" if self.amount == 1 else "dollars"
        return (
            f"{self.id}: {self.sender_id} sent {self.amount} {unit} "
            f"to {self.recipient_id} at {self.exec_date}."
        )


@dataclass
class User:
    """A registered customer and the sessions and transfers attached to it."""

    id: str
    pin: str
    registered: int
    balance: int
    ips: set[str] = field(default_factory=set)
    incoming: list[Transaction] = field(default_factory=list)
    outgoing: list[Transaction] = field(default_factory=list)

    @property
    def logged_in(self) -> bool:
        """Whether the user has at least one open session."""
        return bool(self.ips)