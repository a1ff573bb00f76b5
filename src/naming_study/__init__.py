"""
naming-study - before/after demonstrations of meaningful names.

- naming_study.lessons: the nine demonstration routines
- naming_study.domain: value holders the routines construct
- naming_study.registry: typed catalog of the routines
- naming_study.cli: Typer command line
"""

__version__ = "0.1.0"

from naming_study.lessons import main, run_all  # noqa: E402

__all__ = ["__version__", "main", "run_all"]
