# bankwire

A simulator for a bank's wire transfers. It loads a registration file of
customers, then reads commands from standard input: logins, logouts and
transfer requests, and, after a `$$$` word, queries about the transfers that
were executed.

## Installing

    pip install .

## Running

    bankwire --file registrations.txt --verbose < commands.txt

Options:

- `-f`, `--file FILE` — registration file to load
- `-v`, `--verbose` — report each login, logout, placement, execution and
  rejection on standard output
- `-h`, `--help` — print a one-line description and exit with status 0

An unknown option prints `Error: invalid option` to standard error and exits
with status 1. An unreadable registration file, a malformed registration line,
or a timestamp or amount that is not made of digits also ends the run with an
`Error: ...` message and status 1.

### Registration file

One customer per line, four fields separated by `|`:

    08:03:01:40:22:34|alice|secret|1000

The timestamp is `YY:MM:DD:HH:MM:SS`, followed by the user id, the PIN and the
starting balance. Timestamps are compared as the number left after removing
the colons, so `08:03:01:40:22:34` is `80301402234`, and that is how they are
printed. Blank lines are skipped; a later line with the same id replaces the
earlier customer.

### Commands

Commands are recognised by their first character, so `login` and `l` are the
same command.

Before `$$$`:

- `# comment` — ignored up to the end of the line
- `login USER PIN IP` — opens a session from that IP address if the PIN matches
- `out USER IP` — closes the session from that IP address; the user stays
  logged in while any other session is open
- `place TIMESTAMP IP SENDER RECIPIENT AMOUNT EXEC_DATE o|s` — requests a
  transfer; with `o` the sender pays the whole fee, with `s` the fee is split,
  the sender paying the odd dollar

A request is rejected (with a message in verbose mode) when the execution date
is before the timestamp or more than three days after it, when the sender or
recipient does not exist, when either registered at or after the execution
date, when the sender is not logged in, or when the sender has no session from
the given IP.

Accepted transfers are queued by execution date, then by the order they were
placed. Before a new transfer is queued, every queued transfer due at or
before its timestamp is carried out; `$$$` carries out everything still
queued. A transfer whose payer cannot cover the amount and fee is dropped.

The fee is 1% of the amount (rounded down), held between 10 and 450 dollars,
and cut to three quarters for senders registered more than five years before
the execution date.

After `$$$`:

- `l X Y` — list executed transfers with execution dates in `[X, Y)`, and
  their count
- `r X Y` — fees collected on transfers executed in `[X, Y)`, with the span
  `Y - X` spelled out in years, months, days, hours, minutes and seconds
- `h USER` — a customer's balance, transfer count, and latest ten incoming
  and outgoing transfers
- `s TIMESTAMP` — every transfer executed on the day holding the timestamp,
  with the fees collected that day

## Using it from Python

```python
import io

from bankwire.bank import Bank
from bankwire.models import parse_timestamp
from bankwire.queries import customer_history

bank = Bank(verbose=False, out=io.StringIO())
bank.load_registrations(io.StringIO(
    "08:03:01:40:22:34|alice|secret|1000\n"
    "08:03:01:40:22:34|bob|secret|500\n"
))
bank.login("alice", "secret", "10.0.0.1")
bank.place(parse_timestamp("08:03:01:40:22:35"), "10.0.0.1", "alice", "bob",
           200, parse_timestamp("08:03:01:40:22:40"), "o")
bank.execute_all()
for line in customer_history(bank, "alice"):
    print(line)
```

prints

    Customer alice account summary:
    Balance: $790
    Total # of transactions: 1
    Incoming 0:
    Outgoing 1:
    0: alice sent 200 dollars to bob at 80301402240.

The modules:

- `bankwire.models` — `Transaction`, `User`, `parse_timestamp` and
  `compute_fee`
- `bankwire.bank` — `Bank`, with `register`, `load_registrations`, `login`,
  `logout`, `place`, `execute_next`, `execute_until` and `execute_all`;
  `users`, `executed` and `pending` expose its state
- `bankwire.queries` — `list_transactions`, `bank_revenue`,
  `format_duration`, `customer_history` and `day_summary`, each returning
  report text
- `bankwire.cli` — `parse_args`, `run` (processes command text against a
  bank) and `main`

## What it does not do

There is no graphical interface: the simulator is driven only by the
`bankwire` command or from Python. Nothing is stored: customers, balances and
transfers live in memory for one run.