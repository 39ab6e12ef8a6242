"""Bank clients kept in a text file, with deposits, withdrawals and transfers."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from pathlib import Path

from bankdesk.dates import system_datetime_string
from bankdesk.person import Person
from bankdesk.textutil import split

SEPARATOR = "#//#"
CLIENTS_FILE = "Clients.txt"
TRANSFERS_FILE = "TransferRegister.txt"


class ClientMode(Enum):
    """Where a client object stands relative to the client file."""

    EMPTY = 0
    UPDATE = 1
    ADD_NEW = 2


class SaveResult(Enum):
    """Outcome of :meth:`ClientStore.save`."""

    FAILED_EMPTY_OBJECT = 0
    SUCCEEDED = 1
    FAILED_ACCOUNT_NUMBER_EXISTS = 2


@dataclass
class BankClient(Person):
    """A client account: contact details, pin code and balance."""

    account_number: str = ""
    pin_code: str = ""
    account_balance: float = 0.0
    mode: ClientMode = ClientMode.EMPTY
    marked_for_delete: bool = field(default=False, compare=False)

    def is_empty(self) -> bool:
        """Whether this object stands for no client at all."""
        return self.mode is ClientMode.EMPTY


@dataclass
class TransferRecord:
    """One line of the transfer register."""

    date_time: str
    source_account_number: str
    destination_account_number: str
    transfer_amount: float
    source_account_balance: float
    destination_account_balance: float
    user_name: str


def _empty_client() -> BankClient:
    return BankClient("", "", "", "")


def _fields_of(line: str, separator: str, count: int) -> list[str]:
    parts = split(line, separator)
    if len(parts) < count:
        raise ValueError(f"expected {count} fields, got {len(parts)}: {line!r}")
    return parts


def _format_amount(amount: float) -> str:
    return f"{amount:.6f}"


def parse_client_line(line: str, separator: str = SEPARATOR) -> BankClient:
    """Build a stored client from one line of the client file."""
    parts = _fields_of(line, separator, 7)
    first, last, email, phone, account, pin, balance = parts[:7]
    return BankClient(
        first, last, email, phone,
        account_number=account,
        pin_code=pin,
        account_balance=float(balance),
        mode=ClientMode.UPDATE,
    )


def client_to_line(client: BankClient, separator: str = SEPARATOR) -> str:
    """The client as one line of the client file."""
    return separator.join(
        (
            client.first_name,
            client.last_name,
            client.email,
            client.phone,
            client.account_number,
            client.pin_code,
            _format_amount(client.account_balance),
        )
    )


def parse_transfer_line(line: str, separator: str = SEPARATOR) -> TransferRecord:
    """Build a transfer record from one line of the transfer register."""
    parts = _fields_of(line, separator, 7)
    return TransferRecord(
        date_time=parts[0],
        source_account_number=parts[1],
        destination_account_number=parts[2],
        transfer_amount=float(parts[3]),
        source_account_balance=float(parts[4]),
        destination_account_balance=float(parts[5]),
        user_name=parts[6],
    )


def _transfer_to_line(record: TransferRecord, separator: str = SEPARATOR) -> str:
    return separator.join(
        (
            record.date_time,
            record.source_account_number,
            record.destination_account_number,
            _format_amount(record.transfer_amount),
            _format_amount(record.source_account_balance),
            _format_amount(record.destination_account_balance),
            record.user_name,
        )
    )


def _read_lines(path: Path) -> list[str]:
    if not path.exists():
        return []
    with path.open(encoding="utf-8") as handle:
        return [line.rstrip("\r\n") for line in handle if line.strip()]


class ClientStore:
    """Client records and the transfer register, each kept in a text file."""

    def __init__(
        self,
        clients_path: str | Path = CLIENTS_FILE,
        transfers_path: str | Path = TRANSFERS_FILE,
    ) -> None:
        self.clients_path = Path(clients_path)
        self.transfers_path = Path(transfers_path)

    def load_all(self) -> list[BankClient]:
        """Every client in the file, in file order; none if the file is missing."""
        return [parse_client_line(line) for line in _read_lines(self.clients_path)]

    def _write_all(self, clients: list[BankClient]) -> None:
        with self.clients_path.open("w", encoding="utf-8") as handle:
            for client in clients:
                if not client.marked_for_delete:
                    handle.write(client_to_line(client) + "\n")

    def _append(self, path: Path, line: str) -> None:
        with path.open("a", encoding="utf-8") as handle:
            handle.write(line + "\n")

    def find(self, account_number: str, pin_code: str | None = None) -> BankClient:
        """The client with this account number (and pin, if given), or an empty client."""
        for client in self.load_all():
            if client.account_number == account_number and (
                pin_code is None or client.pin_code == pin_code
            ):
                return client
        return _empty_client()

    def exists(self, account_number: str) -> bool:
        """Whether a client with this account number is stored."""
        return not self.find(account_number).is_empty()

    def new_client(self, account_number: str) -> BankClient:
        """A blank client, ready to be filled in and saved as a new account."""
        return BankClient("", "", "", "", account_number=account_number, mode=ClientMode.ADD_NEW)

    def _update(self, client: BankClient) -> None:
        clients = self.load_all()
        for index, stored in enumerate(clients):
            if stored.account_number == client.account_number:
                clients[index] = client
                break
        self._write_all(clients)

    def save(self, client: BankClient) -> SaveResult:
        """Write the client to the file: update an existing one or add a new one."""
        if client.mode is ClientMode.EMPTY:
            return SaveResult.FAILED_EMPTY_OBJECT
        if client.mode is ClientMode.UPDATE:
            self._update(client)
            return SaveResult.SUCCEEDED
        if self.exists(client.account_number):
            return SaveResult.FAILED_ACCOUNT_NUMBER_EXISTS
        self._append(self.clients_path, client_to_line(client))
        client.mode = ClientMode.UPDATE
        return SaveResult.SUCCEEDED

    def delete(self, client: BankClient) -> bool:
        """Remove the client from the file and blank the given object."""
        clients = self.load_all()
        for stored in clients:
            if stored.account_number == client.account_number:
                stored.marked_for_delete = True
                break
        self._write_all(clients)
        empty = _empty_client()
        for spec in fields(BankClient):
            setattr(client, spec.name, getattr(empty, spec.name))
        return True

    def deposit(self, client: BankClient, amount: float) -> None:
        """Add ``amount`` to the balance and save."""
        client.account_balance += amount
        self.save(client)

    def withdraw(self, client: BankClient, amount: float) -> bool:
        """Take ``amount`` from the balance and save; False if it exceeds the balance."""
        if amount > client.account_balance:
            return False
        client.account_balance -= amount
        self.save(client)
        return True

    def total_balances(self) -> float:
        """Sum of every stored client's balance."""
        return sum(client.account_balance for client in self.load_all())

    def transfer(
        self,
        source: BankClient,
        destination: BankClient,
        amount: float,
        user_name: str,
    ) -> TransferRecord:
        """Move ``amount`` between two clients and log it in the transfer register."""
        if not self.withdraw(source, amount):
            raise ValueError(
                f"insufficient balance: {source.account_balance} < {amount}"
            )
        self.deposit(destination, amount)
        record = TransferRecord(
            date_time=system_datetime_string(),
            source_account_number=source.account_number,
            destination_account_number=destination.account_number,
            transfer_amount=amount,
            source_account_balance=source.account_balance,
            destination_account_balance=destination.account_balance,
            user_name=user_name,
        )
        self._append(self.transfers_path, _transfer_to_line(record))
        return record

    def transfers(self) -> list[TransferRecord]:
        """Every logged transfer, oldest first."""
        return [parse_transfer_line(line) for line in _read_lines(self.transfers_path)]