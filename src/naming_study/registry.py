"""Example registry.

Adapts the ``exampleN_<slug>`` naming convention of :mod:`naming_study.lessons`
into a typed, queryable catalog.

Usage::

    from naming_study.registry import EXAMPLES, get_example, run_examples

    for ex in EXAMPLES:
        print(ex.number, ex.slug, ex.title)

    run_examples([7, 8])
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterable

from naming_study import lessons
from naming_study.core.errors import ExampleNotFoundError
from naming_study.core.logging import get_logger

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Data model
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ExampleInfo:
    """Metadata for a single demonstration routine.

    Attributes:
        number: Section number, 1 through 9.
        slug: Kebab-case name, e.g. ``"intention-revealing"``.
        title: Korean section title printed in the header.
        func: The routine itself.
    """

    number: int
    slug: str
    title: str
    func: Callable[[], None]

    @property
    def header(self) -> str:
        return lessons.format_header(self.number)

    def to_dict(self) -> dict[str, object]:
        return {"number": self.number, "slug": self.slug, "title": self.title}


_NUM_PREFIX = re.compile(r"^example(\d+)_")


def _build(func: Callable[[], None]) -> ExampleInfo:
    m = _NUM_PREFIX.match(func.__name__)
    if m is None:
        raise ValueError(f"Not an example routine: {func.__name__}")
    number = int(m.group(1))
    slug = func.__name__[m.end():].replace("_", "-")
    return ExampleInfo(number=number, slug=slug, title=lessons.TITLES[number], func=func)


EXAMPLES: tuple[ExampleInfo, ...] = tuple(
    sorted((_build(f) for f in lessons.EXAMPLE_ROUTINES), key=lambda ex: ex.number)
)

_BY_NUMBER: dict[int, ExampleInfo] = {ex.number: ex for ex in EXAMPLES}


# ---------------------------------------------------------------------------
# Lookup and execution
# ---------------------------------------------------------------------------


def get_example(number: int) -> ExampleInfo:
    """Return the example registered under ``number``."""
    try:
        return _BY_NUMBER[number]
    except KeyError:
        raise ExampleNotFoundError(number, sorted(_BY_NUMBER)) from None


def run_example(number: int) -> None:
    """Run one demonstration routine."""
    ex = get_example(number)
    logger.debug("example_started", number=ex.number, slug=ex.slug)
    ex.func()
    logger.debug("example_finished", number=ex.number, slug=ex.slug)


def run_examples(numbers: Iterable[int] | None = None) -> list[ExampleInfo]:
    """Run the given examples once each, in ascending order.

    All nine run when ``numbers`` is None. Every number is resolved before
    anything is printed, so an unknown number produces no partial output.

    Returns the examples that ran.
    """
    if numbers is None:
        selected = list(EXAMPLES)
    else:
        selected = [get_example(n) for n in sorted(set(numbers))]

    logger.info("examples_run", count=len(selected))
    for ex in selected:
        run_example(ex.number)
    return selected
