"""Tests for naming_study.registry."""

import pytest
from structlog.testing import capture_logs

from naming_study import lessons
from naming_study.core.errors import ExampleNotFoundError
from naming_study.core.logging import configure_logging
from naming_study.registry import EXAMPLES, ExampleInfo, get_example, run_example, run_examples


class TestCatalog:
    def test_nine_examples_in_order(self):
        assert [ex.number for ex in EXAMPLES] == list(range(1, 10))

    def test_slugs_derived_from_function_names(self):
        assert EXAMPLES[0].slug == "intention-revealing"
        assert EXAMPLES[7].slug == "remove-unnecessary-context"

    def test_titles_match_lessons(self):
        for ex in EXAMPLES:
            assert ex.title == lessons.TITLES[ex.number]

    def test_header(self):
        assert get_example(6).header == "===== 6. 명사와 동사의 구분 ====="

    def test_to_dict(self):
        assert get_example(1).to_dict() == {
            "number": 1,
            "slug": "intention-revealing",
            "title": "의도를 분명히 하라",
        }

    def test_info_is_frozen(self):
        ex = get_example(1)
        with pytest.raises(AttributeError):
            ex.number = 2  # type: ignore[misc]

    def test_info_type(self):
        assert all(isinstance(ex, ExampleInfo) for ex in EXAMPLES)


class TestGetExample:
    def test_known_number(self):
        assert get_example(3).func is lessons.example3_consistent_vocabulary

    @pytest.mark.parametrize("number", [0, 10, -1])
    def test_unknown_number(self, number):
        with pytest.raises(ExampleNotFoundError) as exc_info:
            get_example(number)

        assert exc_info.value.number == number
        assert exc_info.value.available == list(range(1, 10))


class TestRunExamples:
    def test_all_matches_run_all(self, capsys, expected_full_output):
        ran = run_examples()

        assert capsys.readouterr().out == expected_full_output
        assert len(ran) == 9

    def test_subset_runs_ascending_and_deduplicated(self, capsys):
        ran = run_examples([8, 7, 8])
        out = capsys.readouterr().out

        assert [ex.number for ex in ran] == [7, 8]
        assert out.index("===== 7.") < out.index("===== 8.")
        assert out.count("===== 8.") == 1

    def test_unknown_number_prints_nothing(self, capsys):
        with pytest.raises(ExampleNotFoundError):
            run_examples([1, 42])

        assert capsys.readouterr().out == ""

    def test_run_example_logs_start_and_finish(self, capsys):
        configure_logging(level="DEBUG")
        with capture_logs() as logs:
            run_example(5)

        events = [entry["event"] for entry in logs]
        assert events == ["example_started", "example_finished"]
        assert logs[0]["number"] == 5
        assert logs[0]["slug"] == "no-encoding-prefix"
        assert "userCount = 10" in capsys.readouterr().out
