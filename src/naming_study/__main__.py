"""Run all demonstrations: ``python -m naming_study``."""

from naming_study.lessons import main

if __name__ == "__main__":
    main()
