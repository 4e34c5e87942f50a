"""
Unit tests for ExampleRunner.

These tests verify seeding, shared per-example state, capture naming and
that every failure comes back as a value instead of an exception.
"""

import ast
from pathlib import Path

import pytest

from plotdocs.core.example_runner import (
    ExampleCapture,
    ExampleExecutionError,
    ExampleFailure,
    ExampleRunner,
    image_filename_for,
)
from plotdocs.core.example_spec import ExampleSpec, MediaKind


class TestRunSuccess:
    """Examples that execute and capture cleanly."""

    def test_static_example_captured_as_png(
        self, fake_backend, working_example: ExampleSpec, tmp_path: Path
    ) -> None:
        """Static examples are rasterized to <backend>_example_<i>.png."""
        runner = ExampleRunner(fake_backend, tmp_path)

        outcome = runner.run(4, working_example)

        assert isinstance(outcome, ExampleCapture)
        assert outcome.image_filename == "fake_example_4.png"
        assert outcome.image_path.exists()

    def test_animated_example_captured_as_gif(
        self, fake_backend, animated_example: ExampleSpec, tmp_path: Path
    ) -> None:
        """Animated examples hand their animation variable to the backend."""
        runner = ExampleRunner(fake_backend, tmp_path)

        outcome = runner.run(2, animated_example)

        assert isinstance(outcome, ExampleCapture)
        assert outcome.image_filename == "fake_example_2.gif"
        assert fake_backend.saved_paths == [tmp_path / "fake_example_2.gif"]

    def test_statements_share_one_namespace(self, fake_backend, tmp_path: Path) -> None:
        """Later statements see variables bound by earlier ones."""
        example = ExampleSpec(
            header="Shared",
            description="",
            statements=(ast.parse("value = 21"), ast.parse("record.append(value * 2)")),
        )
        outcome = ExampleRunner(fake_backend, tmp_path).run(1, example)

        assert isinstance(outcome, ExampleCapture)
        assert fake_backend.recorded == [42]

    def test_expression_statement_executes(self, fake_backend, tmp_path: Path) -> None:
        """Bare expression nodes are wrapped and executed."""
        expression = ast.parse("record.append('ran')", mode="eval").body
        example = ExampleSpec(header="Expr", description="", statements=(expression,))

        outcome = ExampleRunner(fake_backend, tmp_path).run(1, example)

        assert isinstance(outcome, ExampleCapture)
        assert fake_backend.recorded == ["ran"]

    def test_examples_do_not_share_variables(self, fake_backend, tmp_path: Path) -> None:
        """Each run starts from a fresh namespace."""
        runner = ExampleRunner(fake_backend, tmp_path)
        runner.run(1, ExampleSpec.from_source("Define", "", "leftover = 1"))

        outcome = runner.run(2, ExampleSpec.from_source("Use", "", "record.append(leftover)"))

        assert isinstance(outcome, ExampleFailure)
        assert isinstance(outcome.cause, NameError)


class TestSeeding:
    """Random state is reset before every example."""

    def test_same_example_same_random_values(
        self, fake_backend, working_example: ExampleSpec, tmp_path: Path
    ) -> None:
        runner = ExampleRunner(fake_backend, tmp_path)
        runner.run(1, working_example)
        runner.run(1, working_example)

        first, second = fake_backend.recorded
        assert first == second

    def test_different_seed_changes_values(
        self, fake_backend, working_example: ExampleSpec, tmp_path: Path
    ) -> None:
        ExampleRunner(fake_backend, tmp_path, random_seed=1).run(1, working_example)
        ExampleRunner(fake_backend, tmp_path, random_seed=2).run(1, working_example)

        first, second = fake_backend.recorded
        assert first != second

    def test_python_random_is_seeded(self, fake_backend, tmp_path: Path) -> None:
        example = ExampleSpec.from_source(
            "Stdlib random", "", "import random\nrecord.append(random.random())\n"
        )
        runner = ExampleRunner(fake_backend, tmp_path)
        runner.run(1, example)
        runner.run(1, example)

        first, second = fake_backend.recorded
        assert first == second


class TestRunFailure:
    """Failures are returned, never raised."""

    def test_execution_error_returned(
        self, fake_backend, failing_example: ExampleSpec, tmp_path: Path
    ) -> None:
        outcome = ExampleRunner(fake_backend, tmp_path).run(3, failing_example)

        assert isinstance(outcome, ExampleFailure)
        assert isinstance(outcome.cause, ValueError)
        assert fake_backend.saved_paths == []

    def test_missing_animation_variable(self, fake_backend, tmp_path: Path) -> None:
        """An animated example without its handle fails at capture."""
        example = ExampleSpec.from_source(
            "No anim", "", "x = 1", media_kind=MediaKind.ANIMATED
        )
        outcome = ExampleRunner(fake_backend, tmp_path).run(1, example)

        assert isinstance(outcome, ExampleFailure)
        assert isinstance(outcome.cause, ExampleExecutionError)
        assert "anim" in str(outcome.cause)

    def test_capture_error_returned(self, fake_backend, tmp_path: Path) -> None:
        """A backend refusing the animation handle is a failure too."""
        example = ExampleSpec.from_source(
            "Wrong anim", "", "anim = [1, 2, 3]", media_kind=MediaKind.ANIMATED
        )
        outcome = ExampleRunner(fake_backend, tmp_path).run(1, example)

        assert isinstance(outcome, ExampleFailure)
        assert "Cannot encode list" in str(outcome.cause)

    def test_backend_state_released_after_failure(
        self, fake_backend, failing_example: ExampleSpec, working_example: ExampleSpec,
        tmp_path: Path,
    ) -> None:
        """Both failed and captured examples hand cleanup back to the backend."""
        runner = ExampleRunner(fake_backend, tmp_path)
        runner.run(1, failing_example)
        runner.run(2, working_example)

        assert fake_backend.release_count == 2

    def test_describe_mentions_backend_index_and_origin(
        self, fake_backend, tmp_path: Path
    ) -> None:
        example = ExampleSpec.from_source(
            "Located", "", "x = 1\n1 / 0\n", filename="catalog.py"
        )
        outcome = ExampleRunner(fake_backend, tmp_path).run(7, example)

        assert isinstance(outcome, ExampleFailure)
        message = outcome.describe("fake")
        assert message.startswith("Example fake:7 (catalog.py:1) failed with:")
        assert "ZeroDivisionError" in message


class TestImageFilename:

    @pytest.mark.parametrize(
        "media_kind, expected",
        [
            (MediaKind.STATIC, "gr_example_3.png"),
            (MediaKind.ANIMATED, "gr_example_3.gif"),
        ],
    )
    def test_name_follows_backend_index_and_kind(self, media_kind, expected) -> None:
        example = ExampleSpec.from_source("Name", "", "anim = 1", media_kind=media_kind)
        assert image_filename_for("gr", 3, example) == expected
