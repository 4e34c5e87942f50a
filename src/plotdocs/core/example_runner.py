"""
ExampleRunner: execute one catalog example and capture its media.

Every run returns a value instead of raising: an ExampleCapture when the
example executed and its figure or animation was saved, an ExampleFailure
carrying the cause otherwise. Callers fold these outcomes into a document
without a single broken example aborting the build.
"""

from __future__ import annotations

import ast
import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

import numpy as np

from plotdocs.backends.base_backend import BaseBackend
from plotdocs.config import DEFAULT_ANIMATION_FPS, DEFAULT_DPI, DEFAULT_RANDOM_SEED
from plotdocs.core.example_spec import CodeStatement, ExampleSpec, SourceMarker
from plotdocs.core.expression_normalizer import is_source_marker, strip_source_markers

logger = logging.getLogger(__name__)


class ExampleExecutionError(RuntimeError):
    """
    Raised when an example runs but leaves nothing that can be captured.

    Typically an animated example that never assigned its animation
    variable.
    """
    pass


@dataclass(frozen=True, slots=True)
class ExampleCapture:
    """Successful run: the example executed and its media was written."""
    index: int
    example: ExampleSpec
    image_path: Path

    @property
    def image_filename(self) -> str:
        return self.image_path.name


@dataclass(frozen=True, slots=True)
class ExampleFailure:
    """Failed run: execution or capture raised `cause`."""
    index: int
    example: ExampleSpec
    cause: Exception

    @property
    def origin(self) -> SourceMarker | None:
        return self.example.origin

    def describe(self, backend_name: str) -> str:
        """One-line warning text for logs and reports."""
        location = f" ({self.origin})" if self.origin is not None else ""
        return (
            f"Example {backend_name}:{self.index}{location} failed with: "
            f"{type(self.cause).__name__}: {self.cause}"
        )


ExampleOutcome = Union[ExampleCapture, ExampleFailure]


def image_filename_for(backend_name: str, index: int, example: ExampleSpec) -> str:
    """Deterministic media file name of one example."""
    return f"{backend_name}_example_{index}.{example.media_kind.file_extension}"


def _as_module(statement: CodeStatement) -> ast.Module:
    """Wrap a marker-free node so it can be compiled in exec mode."""
    if isinstance(statement, ast.Module):
        return statement
    if isinstance(statement, ast.stmt):
        return ast.Module(body=[statement], type_ignores=[])
    if isinstance(statement, ast.expr):
        return ast.Module(body=[ast.Expr(value=statement)], type_ignores=[])
    raise ExampleExecutionError(
        f"Cannot execute a {type(statement).__name__} node; expected a module, "
        "statement or expression."
    )


class ExampleRunner:
    """
    Execute catalog examples for one backend and capture their output.

    Example
    -------
    >>> runner = ExampleRunner(backend, image_dir=Path("docs/img/matplotlib"))
    >>> outcome = runner.run(1, catalog[0])
    >>> isinstance(outcome, ExampleCapture)
    True

    Parameters
    ----------
    backend : BaseBackend
        Active backend the examples draw with.
    image_dir : Path
        Existing directory receiving the captured media.
    random_seed : int, default=1234
        Seed restored before each example.
    animation_fps : int, default=15
        Frame rate for animated examples.
    dpi : int, default=100
        Resolution for still images.
    """

    def __init__(
        self,
        backend: BaseBackend,
        image_dir: Path,
        random_seed: int = DEFAULT_RANDOM_SEED,
        animation_fps: int = DEFAULT_ANIMATION_FPS,
        dpi: int = DEFAULT_DPI,
    ) -> None:
        self._backend = backend
        self._image_dir = Path(image_dir)
        self._random_seed = random_seed
        self._animation_fps = animation_fps
        self._dpi = dpi

    @property
    def backend(self) -> BaseBackend:
        return self._backend

    def run(self, index: int, example: ExampleSpec) -> ExampleOutcome:
        """
        Seed, execute and capture one example.

        Any exception raised by the example code or by the capture step is
        returned inside an ExampleFailure; nothing propagates. The backend
        releases the example's figures afterwards in both cases.
        """
        try:
            self._reset_random_state()
            namespace = self._backend.example_namespace()
            for statement in example.statements:
                self._execute_statement(statement, namespace, example)
            image_path = self._capture(index, example, namespace)
        except Exception as example_error:
            return ExampleFailure(index=index, example=example, cause=example_error)
        finally:
            self._backend.release_example_state()

        logger.debug("Captured example %s:%d to %s", self._backend.name, index, image_path)
        return ExampleCapture(index=index, example=example, image_path=image_path)

    def _reset_random_state(self) -> None:
        random.seed(self._random_seed)
        np.random.seed(self._random_seed)

    def _execute_statement(
        self,
        statement: CodeStatement,
        namespace: dict[str, Any],
        example: ExampleSpec,
    ) -> None:
        if is_source_marker(statement):
            return

        module = _as_module(strip_source_markers(statement))  # type: ignore[arg-type]
        ast.fix_missing_locations(module)
        origin = example.origin
        filename = origin.filename if origin is not None else f"<{example.header}>"
        compiled = compile(module, filename, "exec")
        exec(compiled, namespace)

    def _capture(self, index: int, example: ExampleSpec, namespace: dict[str, Any]) -> Path:
        image_path = self._image_dir / image_filename_for(self._backend.name, index, example)

        if example.is_animated:
            animation = namespace.get(example.animation_variable)
            if animation is None:
                raise ExampleExecutionError(
                    f"Animated example '{example.header}' did not define "
                    f"'{example.animation_variable}'."
                )
            self._backend.save_animation(animation, image_path, self._animation_fps)
        else:
            self._backend.save_figure(image_path, self._dpi)

        return image_path

    def __repr__(self) -> str:
        return f"<ExampleRunner backend={self._backend.name!r} image_dir={str(self._image_dir)!r}>"
