"""Currencies and their rates against the US dollar, kept in a text file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from bankdesk.textutil import split, upper_all

SEPARATOR = "#//#"
CURRENCIES_FILE = "Currencies.txt"


@dataclass
class Currency:
    """A country's currency and how many units buy one US dollar."""

    country: str
    code: str
    name: str
    rate: float

    def to_usd(self, amount: float) -> float:
        """The amount in US dollars."""
        return amount / self.rate

    def convert_to(self, amount: float, other: Currency) -> float:
        """The amount in ``other``'s currency, going through US dollars."""
        in_usd = self.to_usd(amount)
        if other.code == "USD":
            return in_usd
        return in_usd * other.rate


def parse_currency_line(line: str, separator: str = SEPARATOR) -> Currency:
    """Build a currency from one line of the currency file."""
    parts = split(line, separator)
    if len(parts) < 4:
        raise ValueError(f"expected 4 fields, got {len(parts)}: {line!r}")
    return Currency(parts[0], parts[1], parts[2], float(parts[3]))


def currency_to_line(currency: Currency, separator: str = SEPARATOR) -> str:
    """The currency as one line of the currency file."""
    return separator.join(
        (currency.country, currency.code, currency.name, f"{currency.rate:.6f}")
    )


class CurrencyStore:
    """Currencies kept one per line in a text file."""

    def __init__(self, path: str | Path = CURRENCIES_FILE) -> None:
        self.path = Path(path)

    def list_all(self) -> list[Currency]:
        """Every currency in file order; none if the file is missing."""
        if not self.path.exists():
            return []
        with self.path.open(encoding="utf-8") as handle:
            return [
                parse_currency_line(line.rstrip("\r\n")) for line in handle if line.strip()
            ]

    def _write_all(self, currencies: list[Currency]) -> None:
        with self.path.open("w", encoding="utf-8") as handle:
            for currency in currencies:
                handle.write(currency_to_line(currency) + "\n")

    def find_by_code(self, code: str) -> Currency | None:
        """The currency with this code, given in any case, or None."""
        wanted = upper_all(code)
        return next((c for c in self.list_all() if c.code == wanted), None)

    def find_by_country(self, country: str) -> Currency | None:
        """The currency of this country, matched ignoring case, or None."""
        wanted = upper_all(country)
        return next((c for c in self.list_all() if upper_all(c.country) == wanted), None)

    def exists(self, code: str) -> bool:
        """Whether a currency with this code is stored."""
        return self.find_by_code(code) is not None

    def update_rate(self, currency: Currency, new_rate: float) -> None:
        """Set the currency's rate and write it back to the file."""
        currency.rate = new_rate
        currencies = self.list_all()
        for index, stored in enumerate(currencies):
            if stored.code == currency.code:
                currencies[index] = currency
                break
        self._write_all(currencies)