# bankdesk

A small library for the bookkeeping behind a bank front desk, kept in
plain text files: client records with deposits, withdrawals and
transfers, a transfer register, currency rates and conversion, plus the
date, text, number and list helpers that go with them.

The package has no runtime dependencies beyond the standard library.

## Modules

| Module | What it offers |
| --- | --- |
| `bankdesk.bankclient` | `BankClient`, `ClientStore`, `TransferRecord`, `SaveResult`, `ClientMode`, line parsing and formatting |
| `bankdesk.currency` | `Currency`, `CurrencyStore`, line parsing and formatting |
| `bankdesk.person` | `Person` with `full_name()` |
| `bankdesk.dates` | `Date`, `DateCompare`, calendar arithmetic and printable calendars |
| `bankdesk.textutil` | splitting, joining, trimming, case and counting helpers |
| `bankdesk.utility` | random numbers, words and keys, `number_to_text`, a simple shift cipher |
| `bankdesk.inputs` | `InputReader` for validated console input, `is_number_between`, `is_date_between` |
| `bankdesk.arrays` | counting, searching, filtering and formatting helpers for number lists |
| `bankdesk.mathutil` | primes, perfect numbers, digit reversal, rounding helpers |
| `bankdesk.patterns` | perfect numbers, digit frequencies, number and letter patterns |

## Storage format

Records are stored one per line with fields separated by `#//#`.
Amounts are written with six decimal places.

* Clients file (default `Clients.txt`): first name, last name, e-mail,
  phone, account number, PIN code, balance.
* Transfer register (default `TransferRegister.txt`): date/time, source
  account, destination account, amount, source balance after the
  transfer, destination balance after the transfer, user name.
* Currencies file (default `Currencies.txt`): country, currency code,
  currency name, rate per one US dollar.

A missing file reads as an empty list.

## Clients and transfers

```python
from bankdesk.bankclient import ClientStore, SaveResult

store = ClientStore("Clients.txt", "TransferRegister.txt")

client = store.new_client("A100")
client.first_name = "Ada"
client.last_name = "Example"
client.email = "ada@example.com"
if store.save(client) is SaveResult.SUCCEEDED:
    store.deposit(client, 250.0)

print(store.exists("A100"))
print(store.total_balances())

for record in store.transfers():
    print(record)
```

`ClientStore.find(account_number, pin_code=None)` returns the matching
client, or an empty client whose `is_empty()` is true. `save` returns
`SaveResult.FAILED_ACCOUNT_NUMBER_EXISTS` when a new client's account
number is already taken, and `SaveResult.FAILED_EMPTY_OBJECT` for an
empty client. `delete` removes the client from the file and blanks the
object passed in.

`ClientStore.withdraw` returns `False` and leaves the balance alone when
the amount exceeds the balance. `ClientStore.transfer(source,
destination, amount, user_name)` moves money between two clients,
appends a line to the transfer register and returns the
`TransferRecord`; it raises `ValueError` when the source balance is too
small.

## Currencies

```python
from bankdesk.currency import CurrencyStore

rates = CurrencyStore("Currencies.txt")
euro = rates.find_by_code("eur")       # codes are matched in upper case
usd = rates.find_by_code("USD")
if euro is not None and usd is not None:
    print(euro.to_usd(100))
    print(euro.convert_to(100, usd))
```

`find_by_code` and `find_by_country` return `None` when nothing
matches; `exists(code)` tells whether a code is stored.
`update_rate(currency, new_rate)` sets the rate and rewrites the file.

## Dates

```python
from bankdesk.dates import parse_date, difference_in_days, is_leap_year, days_in_month

start = parse_date("1/1/2022")
end = parse_date("31/1/2022")
print(difference_in_days(start, end, True))   # 31
print(is_leap_year(2024))                     # True
print(days_in_month(2, 2023))                 # 28
print(start.add_months(1))                    # 1/2/2022
```

`Date` is immutable; its arithmetic methods return new dates. Weekends
are Friday and Saturday, and `days_in_year` counts 365 days for a leap
year and 364 otherwise.

## Text and numbers

```python
from bankdesk.textutil import split, trim, count_vowels
from bankdesk.utility import number_to_text

print(split("a#//#b#//#c", "#//#"))    # ['a', 'b', 'c']
print(trim("   padded   "))            # 'padded'
print(count_vowels("Bank Desk"))       # 2
print(number_to_text(1234))            # 'One Thousand Two Hundreds Thirty Four '
```

## What the package does not do

This is a library only. It has no command to run, no interactive menus
or screens, and no login, user accounts or permission checks; the
`user_name` written to the transfer register is whatever the caller
passes in. `InputReader` provides the validated reading of numbers and
lines that an interactive front end would build on.

## Tests

The test suite uses pytest and is installed with the `test` extra.