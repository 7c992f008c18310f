"""Gym members and their subscriptions."""

from __future__ import annotations

from dataclasses import dataclass

from .dates import Date

SEPARATOR = "=============================="


@dataclass
class Member:
    """A member with a subscription lasting ``months`` months from ``joined``."""

    member_id: str
    first_name: str
    last_name: str
    joined: Date
    months: int

    @property
    def expires(self) -> Date | None:
        """Expiry date of the subscription, or None when the duration is not positive."""
        if self.months <= 0:
            return None
        return self.joined.expiry(self.months)

    def renew(self, months: int) -> None:
        """Extend the subscription by ``months`` months."""
        if months <= 0:
            raise ValueError("DATI NON VALIDI")
        self.months += months

    def describe(self) -> str:
        """Full, multi-line description of the member."""
        expires = self.expires
        return "\n".join(
            [
                SEPARATOR,
                f"ID: {self.member_id}",
                f"Nome: {self.first_name}",
                f"Cognome: {self.last_name}",
                f"Data di Iscrizione: {self.joined}",
                f"Durata Abbonamento: {self.months} Mesi",
                f"Data di Scadenza: {expires if expires is not None else 'Valori inesistenti'}",
            ]
        ) + "\n"

    def summary_row(self) -> str:
        """One table row: ID, last name, first name."""
        return f"{self.member_id:<8} {self.last_name:<15} {self.first_name:<15}"

    def to_record(self) -> str:
        """The line that stores this member in the members file."""
        return (
            f"{self.member_id} {self.first_name} {self.last_name} "
            f"{self.joined.day} {self.joined.month} {self.joined.year} {self.months}"
        )