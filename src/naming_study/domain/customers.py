"""Labeled entities for the noun/verb example (6)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CustomerBad:
    """Action named as a noun: ``customer()`` says nothing about what happens."""

    name: str

    def customer(self) -> None:
        print(f"Bad: customer() called for {self.name}")


@dataclass(frozen=True, slots=True)
class CustomerGood:
    """Action named as a verb."""

    name: str

    def save(self) -> None:
        print(f"Good: save() called for {self.name}")
