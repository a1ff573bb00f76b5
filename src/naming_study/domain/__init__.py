"""
Value holders exercised by the demonstration routines.

Every type here is a frozen dataclass: constructed once inside a routine,
read or invoked once, then discarded.
"""

from naming_study.domain.addresses import Address, GSDAccountAddress
from naming_study.domain.customers import CustomerBad, CustomerGood

__all__ = [
    "Address",
    "CustomerBad",
    "CustomerGood",
    "GSDAccountAddress",
]
