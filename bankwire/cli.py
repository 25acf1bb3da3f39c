"""Command-line front end: reads registrations, commands and queries."""

from __future__ import annotations

import getopt
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence, TextIO

from .bank import Bank
from .models import parse_timestamp
from .queries import bank_revenue, customer_history, day_summary, list_transactions

HELP_TEXT = "This is a bank wire transfer simulator developed by EECS 281."


@dataclass
class Options:
    """Settings taken from the command line."""

    file: str | None = None
    verbose: bool = False


def parse_args(argv: Sequence[str]) -> Options:
    """Parse ``-f/--file``, ``-v/--verbose`` and ``-h/--help``.

    Help exits with status 0; an unknown option exits with status 1.
    """
    try:
        opts, _ = getopt.gnu_getopt(
            list(argv), "hf:v", ["help", "file=", "verbose"]
        )
    except getopt.GetoptError:
        print("Error: invalid option", file=sys.stderr)
        raise SystemExit(1) from None
    options = Options()
    for flag, value in opts:
        if flag in ("-h", "--help"):
            print(HELP_TEXT)
            raise SystemExit(0)
        if flag in ("-f", "--file"):
            options.file = value
        elif flag in ("-v", "--verbose"):
            options.verbose = True
    return options


class _EndOfInput(Exception):
    """Input ran out in the middle of a command."""


class _TokenStream:
    """Whitespace-separated words that remember the line they came from."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._words: Iterator[tuple[int, str]] = (
            (number, word)
            for number, line in enumerate(lines)
            for word in line.split()
        )
        self._held: tuple[int, str] | None = None

    def next(self) -> tuple[int, str] | None:
        if self._held is not None:
            item, self._held = self._held, None
            return item
        return next(self._words, None)

    def take(self, count: int) -> list[str]:
        words = []
        for _ in range(count):
            item = self.next()
            if item is None:
                raise _EndOfInput
            words.append(item[1])
        return words

    def skip_line(self, line_no: int) -> None:
        while (item := self.next()) is not None:
            if item[0] != line_no:
                self._held = item
                return


def _parse_amount(text: str) -> int:
    if not (text.isascii() and text.isdecimal()):
        raise ValueError(f"invalid amount: {text!r}")
    return int(text)


def _emit(out: TextIO, lines: Iterable[str]) -> None:
    for line in lines:
        print(line, file=out)


def _query_phase(bank: Bank, stream: _TokenStream, out: TextIO) -> None:
    while (item := stream.next()) is not None:
        word = item[1]
        if word.startswith("l"):
            start, end = stream.take(2)
            _emit(out, list_transactions(bank, parse_timestamp(start), parse_timestamp(end)))
        elif word.startswith("r"):
            start, end = stream.take(2)
            _emit(out, [bank_revenue(bank, parse_timestamp(start), parse_timestamp(end))])
        elif word.startswith("h"):
            (user_id,) = stream.take(1)
            _emit(out, customer_history(bank, user_id))
        elif word.startswith("s"):
            (stamp,) = stream.take(1)
            _emit(out, day_summary(bank, parse_timestamp(stamp)))


def run(bank: Bank, tokens: Iterable[str] | str, out: TextIO | None = None) -> None:
    """Process command input (given as lines, or one string) against ``bank``.

    Commands before ``$$$`` log users in and out and place transfers;
    ``$$$`` executes everything pending and switches to queries.
    """
    out = out if out is not None else sys.stdout
    lines = tokens.splitlines() if isinstance(tokens, str) else tokens
    stream = _TokenStream(lines)
    try:
        while (item := stream.next()) is not None:
            line_no, word = item
            if word.startswith("$$$"):
                bank.execute_all()
                _query_phase(bank, stream, out)
                return
            if word.startswith("#"):
                stream.skip_line(line_no)
            elif word.startswith("l"):
                user_id, pin, ip = stream.take(3)
                bank.login(user_id, pin, ip)
            elif word.startswith("o"):
                user_id, ip = stream.take(2)
                bank.logout(user_id, ip)
            elif word.startswith("p"):
                stamp, ip, sender, recipient, amount, exec_date, coverage = stream.take(7)
                bank.place(
                    parse_timestamp(stamp),
                    ip,
                    sender,
                    recipient,
                    _parse_amount(amount),
                    parse_timestamp(exec_date),
                    coverage,
                )
    except _EndOfInput:
        return


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulator on standard input; return the exit status."""
    options = parse_args(sys.argv[1:] if argv is None else argv)
    bank = Bank(verbose=options.verbose, out=sys.stdout)
    try:
        if options.file is not None:
            with open(options.file, encoding="utf-8") as handle:
                bank.load_registrations(handle)
        run(bank, sys.stdin, sys.stdout)
    except OSError as exc:
        print(f"Error: cannot read {options.file}: {exc.strerror}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0