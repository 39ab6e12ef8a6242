"""A person with contact details."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Person:
    """Name and contact details shared by clients and users."""

    first_name: str
    last_name: str
    email: str
    phone: str

    def full_name(self) -> str:
        """First and last name separated by a space."""
        return f"{self.first_name} {self.last_name}"