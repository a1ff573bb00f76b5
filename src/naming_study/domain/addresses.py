"""
Address holders used by the context examples (7 and 8).

``Address`` names its fields so the surrounding type supplies the context:
``address.state`` is unambiguous where a bare ``state`` variable is not.

``GSDAccountAddress`` carries the same data under an application prefix
("GSD") that adds nothing but length. Both holders answer ``get_city()``
identically for the same positional arguments.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Address:
    """Context-rich address.

    Attributes:
        state: Top-level region, e.g. ``"서울"``.
        city: Locality within the region, e.g. ``"강남구"``.
        zip_code: Postal code.
    """

    state: str
    city: str
    zip_code: str

    def get_state(self) -> str:
        return self.state

    def get_city(self) -> str:
        return self.city


@dataclass(frozen=True, slots=True)
class GSDAccountAddress:
    """Address whose type name repeats context the caller already has."""

    state: str
    city: str
    zip_code: str

    def get_city(self) -> str:
        return self.city
