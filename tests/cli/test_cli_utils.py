"""
Tests for CLI utilities.
"""

from __future__ import annotations

import json

import pytest
import typer

from naming_study.cli.utils import fail, output_examples
from naming_study.core.errors import ExampleNotFoundError
from naming_study.registry import EXAMPLES


class TestOutputExamples:
    def test_json(self, capsys):
        output_examples(EXAMPLES[:2], as_json=True)
        payload = json.loads(capsys.readouterr().out)

        assert [item["slug"] for item in payload] == ["intention-revealing", "avoid-misleading-info"]

    def test_empty_json(self, capsys):
        output_examples([], as_json=True)
        assert json.loads(capsys.readouterr().out) == []


class TestFail:
    def test_exits_with_code(self, capsys):
        with pytest.raises(typer.Exit) as exc_info:
            fail(ExampleNotFoundError(10, [1]), code=3)

        assert exc_info.value.exit_code == 3
        assert "LOOKUP" in capsys.readouterr().err
