"""The bank: registration, sessions, placement and execution of transfers."""

from __future__ import annotations

import heapq
import sys
from typing import Iterable, TextIO

from .models import (
    OWN_FEE,
    SHARED_FEE,
    Transaction,
    User,
    compute_fee,
    parse_timestamp,
)

MAX_LEAD_TIME = 3_000_000


class Bank:
    """Holds customers and the queue of pending transfers."""

    def __init__(self, verbose: bool = False, out: TextIO | None = None) -> None:
        self.verbose = verbose
        self.out = out if out is not None else sys.stdout
        self.users: dict[str, User] = {}
        self.executed: list[Transaction] = []
        self._pending: list[tuple[int, int, Transaction]] = []
        self._next_id = 0

    def _say(self, message: str) -> None:
        if self.verbose:
            print(message, file=self.out)

    @property
    def pending(self) -> list[Transaction]:
        """Pending transfers in the order they would execute."""
        return [entry[2] for entry in sorted(self._pending)]

    def register(self, user_id: str, pin: str, timestamp: int, balance: int) -> User:
        """Add (or replace) a customer account."""
        user = User(id=user_id, pin=pin, registered=timestamp, balance=balance)
        self.users[user_id] = user
        return user

    def load_registrations(self, stream: Iterable[str]) -> int:
        """Read ``timestamp|id|pin|balance`` lines; return how many were read."""
        count = 0
        for line in stream:
            line = line.strip()
            if not line:
                continue
            parts = line.split("|")
            if len(parts) != 4:
                raise ValueError(f"malformed registration line: {line!r}")
            stamp, user_id, pin, balance = parts
            amount = balance.strip()
            if not (amount.isascii() and amount.isdecimal()):
                raise ValueError(f"invalid balance: {balance!r}")
            self.register(user_id, pin, parse_timestamp(stamp), int(amount))
            count += 1
        return count

    def login(self, user_id: str, pin: str, ip: str) -> bool:
        """Open a session for ``user_id`` from ``ip`` if the PIN matches."""
        user = self.users.get(user_id)
        if user is None or user.pin != pin:
            self._say(f"Failed to log in {user_id}.")
            return False
        user.ips.add(ip)
        self._say(f"User {user_id} logged in.")
        return True

    def logout(self, user_id: str, ip: str) -> bool:
        """Close the session of ``user_id`` opened from ``ip``."""
        user = self.users.get(user_id)
        if user is None or ip not in user.ips:
            self._say(f"Failed to log out {user_id}.")
            return False
        user.ips.discard(ip)
        self._say(f"User {user_id} logged out.")
        return True

    def place(
        self,
        timestamp: int,
        ip: str,
        sender_id: str,
        recipient_id: str,
        amount: int,
        exec_date: int,
        fee_coverage: str,
    ) -> Transaction | None:
        """Queue a transfer; return it, or None when the request is rejected."""
        sender = self.users.get(sender_id)
        recipient = self.users.get(recipient_id)
        if exec_date < timestamp or exec_date - timestamp > MAX_LEAD_TIME:
            self._say("Select a time less than three days in the future.")
            return None
        if sender is None:
            self._say(f"Sender {sender_id} does not exist.")
            return None
        if recipient is None:
            self._say(f"Recipient {recipient_id} does not exist.")
            return None
        if exec_date <= sender.registered or exec_date <= recipient.registered:
            self._say(
                "At the time of execution, sender and/or recipient have not registered."
            )
            return None
        if not sender.logged_in:
            self._say(f"Sender {sender_id} is not logged in.")
            return None
        if ip not in sender.ips:
            self._say("Fraudulent transaction detected, aborting request.")
            return None

        self.execute_until(timestamp)

        transaction = Transaction(
            id=self._next_id,
            timestamp=timestamp,
            sender_ip=ip,
            sender_id=sender_id,
            recipient_id=recipient_id,
            amount=amount,
            exec_date=exec_date,
            fee_coverage=fee_coverage,
            fee=compute_fee(amount, exec_date, sender.registered),
        )
        self._next_id += 1
        heapq.heappush(self._pending, (exec_date, transaction.id, transaction))
        self._say(
            f"Transaction placed at {timestamp}: ${amount} from {sender_id} "
            f"to {recipient_id} at {exec_date}."
        )
        return transaction

    def execute_next(self) -> Transaction | None:
        """Execute the earliest pending transfer.

        Returns the transfer if it went through, None if it was dropped.
        Raises IndexError when nothing is pending.
        """
        if not self._pending:
            raise IndexError("no pending transactions")
        _, _, transaction = heapq.heappop(self._pending)
        sender = self.users[transaction.sender_id]
        recipient = self.users[transaction.recipient_id]
        amount = transaction.amount

        if transaction.fee_coverage == SHARED_FEE:
            recipient_fee = transaction.fee // 2
            sender_fee = transaction.fee - recipient_fee
            if sender.balance < amount + sender_fee or recipient.balance < recipient_fee:
                self._say(f"Insufficient funds to process transaction {transaction.id}.")
                return None
            sender.balance -= amount + sender_fee
            recipient.balance += amount - recipient_fee
        elif transaction.fee_coverage == OWN_FEE:
            if sender.balance < amount + transaction.fee:
                self._say(f"Insufficient funds to process transaction {transaction.id}.")
                return None
            sender.balance -= amount + transaction.fee
            recipient.balance += amount
        else:
            return None

        self._say(
            f"Transaction executed at {transaction.exec_date}: ${amount} "
            f"from {transaction.sender_id} to {transaction.recipient_id}."
        )
        self.executed.append(transaction)
        sender.outgoing.append(transaction)
        recipient.incoming.append(transaction)
        return transaction

    def execute_until(self, timestamp: int) -> None:
        """Execute every pending transfer due at or before ``timestamp``."""
        while self._pending and self._pending[0][0] <= timestamp:
            self.execute_next()

    def execute_all(self) -> None:
        """Execute every pending transfer."""
        while self._pending:
            self.execute_next()