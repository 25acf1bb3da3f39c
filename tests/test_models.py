import pytest

from bankwire.models import (
    FEE_MAX,
    FEE_MIN,
    LOYALTY_AGE,
    Transaction,
    User,
    compute_fee,
    parse_timestamp,
)


def make_tx(amount):
    return Transaction(
        id=3,
        timestamp=100,
        sender_ip="10.0.0.1",
        sender_id="alice",
        recipient_id="bob",
        amount=amount,
        exec_date=80301110000,
        fee_coverage="o",
        fee=10,
    )


def test_parse_timestamp_strips_colons():
    assert parse_timestamp("08:03:01:09:00:00") == 80301090000


def test_parse_timestamp_without_colons_matches():
    assert parse_timestamp("080301090000") == parse_timestamp("08:03:01:09:00:00")


@pytest.mark.parametrize("text", ["", "::", "ab:cd", "-1", "1.5"])
def test_parse_timestamp_rejects_garbage(text):
    with pytest.raises(ValueError):
        parse_timestamp(text)


def test_fee_lower_bound():
    assert compute_fee(500, 0, 0) == FEE_MIN


def test_fee_upper_bound():
    assert compute_fee(10**7, 0, 0) == FEE_MAX


def test_fee_one_percent():
    assert compute_fee(2000, 0, 0) == 20


def test_fee_loyalty_discount():
    assert compute_fee(100000, LOYALTY_AGE + 1, 0) == 337


def test_fee_no_discount_at_boundary():
    assert compute_fee(100000, LOYALTY_AGE, 0) == compute_fee(100000, 0, 0)


@pytest.mark.parametrize("amount", [0, 1, 999, 1000, 5000, 45000, 10**6])
def test_fee_always_within_bounds(amount):
    assert FEE_MIN <= compute_fee(amount, 0, 0) <= FEE_MAX


def test_describe_plural():
    assert make_tx(5).describe() == "3: alice sent 5 dollars to bob at 80301110000."


def test_describe_singular():
    assert make_tx(1).describe() == "3: alice sent 1 dollar to bob at 80301110000."


def test_user_logged_in_follows_ips():
    user = User(id="alice", pin="1234", registered=0, balance=10)
    assert user.logged_in is False
    user.ips.add("10.0.0.1")
    assert user.logged_in is True
    assert user.incoming == [] and user.outgoing == []