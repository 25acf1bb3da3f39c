import io

from bankwire.bank import Bank
from bankwire.models import parse_timestamp
from bankwire.queries import (
    bank_revenue,
    customer_history,
    day_summary,
    format_duration,
    list_transactions,
)

REGISTERED = parse_timestamp("08:03:01:00:00:00")
BASE = parse_timestamp("08:03:02:10:00:00")
MINUTE = parse_timestamp("00:00:00:00:01:00")


def make_bank(transfers=1, amount=100):
    bank = Bank(out=io.StringIO())
    bank.register("alice", "1111", REGISTERED, 1_000_000)
    bank.register("bob", "2222", REGISTERED, 500)
    bank.login("alice", "1111", "10.0.0.1")
    for i in range(transfers):
        bank.place(BASE + i, "10.0.0.1", "alice", "bob", amount, BASE + MINUTE + i, "o")
    bank.execute_all()
    return bank


def test_list_transactions_window_is_half_open():
    bank = make_bank(3)
    end = BASE + MINUTE + 2
    lines = list_transactions(bank, BASE, end)
    assert lines[:-1] == [t.describe() for t in bank.executed[:2]]
    assert lines[-1] == (
        f"There were 2 transactions that were placed between time {BASE} to {end}."
    )


def test_list_transactions_single():
    bank = make_bank(3)
    start = BASE + MINUTE
    lines = list_transactions(bank, start, start + 1)
    assert lines == [
        bank.executed[0].describe(),
        f"There was 1 transaction that was placed between time {start} to {start + 1}.",
    ]


def test_list_transactions_reversed_range_is_empty():
    bank = make_bank(2)
    lines = list_transactions(bank, BASE + MINUTE * 5, BASE)
    assert lines == [
        f"There were 0 transactions that were placed between time {BASE + MINUTE * 5} to {BASE}."
    ]


def test_format_duration_all_units():
    difference = parse_timestamp("01:02:03:04:05:06")
    assert format_duration(difference) == (
        "1 year 2 months 3 days 4 hours 5 minutes 6 seconds"
    )


def test_format_duration_skips_zero_fields():
    assert format_duration(parse_timestamp("00:00:01:00:00:01")) == "1 day 1 second"
    assert format_duration(0) == ""


def test_bank_revenue_sums_fees_in_window():
    bank = make_bank(2)
    end = BASE + MINUTE * 2
    line = bank_revenue(bank, BASE, end)
    fees = sum(t.fee for t in bank.executed)
    assert line.startswith(f"281Bank has collected {fees} dollars in fees over ")
    assert line.endswith(f" {format_duration(end - BASE)}.")


def test_bank_revenue_empty_interval():
    bank = make_bank(1)
    assert bank_revenue(bank, BASE, BASE) == "281Bank has collected 0 dollars in fees over."


def test_customer_history_shows_last_ten():
    bank = make_bank(12)
    lines = customer_history(bank, "bob")
    bob = bank.users["bob"]
    assert lines[:4] == [
        "Customer bob account summary:",
        f"Balance: ${bob.balance}",
        "Total # of transactions: 12",
        "Incoming 12:",
    ]
    assert lines[4:14] == [t.describe() for t in bank.executed[-10:]]
    assert lines[14:] == ["Outgoing 0:"]


def test_customer_history_outgoing_side():
    bank = make_bank(2)
    lines = customer_history(bank, "alice")
    assert lines[3] == "Incoming 0:"
    assert lines[4] == "Outgoing 2:"
    assert lines[5:] == [t.describe() for t in bank.executed]


def test_customer_history_unknown_user():
    bank = make_bank(1)
    assert customer_history(bank, "zed") == ["User zed does not exist."]


def test_day_summary_lists_day():
    bank = make_bank(2)
    day = parse_timestamp("08:03:02:00:00:00")
    lines = day_summary(bank, BASE)
    fees = sum(t.fee for t in bank.executed)
    assert lines[0] == f"Summary of [{day}, {day + 1000000}):"
    assert lines[1:3] == [t.describe() for t in bank.executed]
    assert lines[-1] == (
        f"There were a total of 2 transactions, 281Bank has collected {fees} dollars in fees."
    )


def test_day_summary_single():
    bank = make_bank(1)
    fee = bank.executed[0].fee
    assert day_summary(bank, BASE)[-1] == (
        f"There was a total of 1 transaction, 281Bank has collected {fee} dollars in fees."
    )


def test_day_summary_other_day_is_empty():
    bank = make_bank(2)
    other = parse_timestamp("08:03:05:12:00:00")
    lines = day_summary(bank, other)
    assert len(lines) == 2
    assert lines[-1] == (
        "There were a total of 0 transactions, 281Bank has collected 0 dollars in fees."
    )