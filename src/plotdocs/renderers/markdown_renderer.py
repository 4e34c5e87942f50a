"""
Markdown page generator: run the whole example catalog on one backend.

Produces ``<docs_dir>/<backend>.md`` plus one image per example under
``<docs_dir>/img/<backend>/``. Examples that fail are left out of the page
and reported as warnings; they never stop the run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Collection, Iterable, Iterator, Sequence

from plotdocs.backends.base_backend import BaseBackend
from plotdocs.backends.registry import BackendRegistry, backend_registry
from plotdocs.config import DocsConfig
from plotdocs.core.example_runner import (
    ExampleCapture,
    ExampleFailure,
    ExampleOutcome,
    ExampleRunner,
)
from plotdocs.core.example_spec import ExampleSpec
from plotdocs.core.expression_normalizer import format_code_block
from plotdocs.renderers.markdown_format import (
    fenced_code_block,
    markdown_code_list,
    markdown_symbol_list,
)

logger = logging.getLogger(__name__)

# Catalog positions are reported and used in image names starting from 1
FIRST_EXAMPLE_INDEX = 1


@dataclass(frozen=True)
class MarkdownReport:
    """What one Markdown run produced."""
    backend_name: str
    markdown_path: Path
    rendered_indices: tuple[int, ...]
    warnings: tuple[str, ...]

    @property
    def failed_count(self) -> int:
        return len(self.warnings)


class MarkdownDocRenderer:
    """
    Render the example catalog of one backend to a Markdown page.

    Example
    -------
    >>> renderer = MarkdownDocRenderer(DocsConfig(docs_dir=Path("docs/examples")))
    >>> report = renderer.render(MatplotlibBackend(), EXAMPLES)
    >>> report.warnings
    ()

    Parameters
    ----------
    config : DocsConfig, optional
        Output locations and capture settings. Defaults to ``DocsConfig()``.
    """

    def __init__(self, config: DocsConfig | None = None) -> None:
        self._config = config or DocsConfig()

    @property
    def config(self) -> DocsConfig:
        return self._config

    def render(
        self,
        backend: BaseBackend,
        catalog: Sequence[ExampleSpec],
        skip: Collection[int] = (),
    ) -> MarkdownReport:
        """
        Execute every example on `backend` and write its Markdown page.

        Parameters
        ----------
        backend : BaseBackend
            Backend to document; activated before the first example.
        catalog : sequence of ExampleSpec
            Examples in page order.
        skip : collection of int, optional
            Catalog indices (starting at 1) to leave out.

        Returns
        -------
        MarkdownReport
            Written path, indices that made it to the page, and one warning
            per failed example.

        Raises
        ------
        OSError
            If the image directory or the Markdown file cannot be created.
        """
        backend.activate()

        image_dir = self._config.image_dir(backend.name)
        image_dir.mkdir(parents=True, exist_ok=True)
        runner = ExampleRunner(
            backend,
            image_dir,
            random_seed=self._config.random_seed,
            animation_fps=self._config.animation_fps,
            dpi=self._config.dpi,
        )

        markdown_path = self._config.markdown_path(backend.name)
        rendered_indices: list[int] = []
        warnings: list[str] = []

        with markdown_path.open("w", encoding="utf-8") as markdown_file:
            markdown_file.write(self.initialize_section(backend))

            for outcome in self.iter_outcomes(runner, catalog, skip):
                if isinstance(outcome, ExampleFailure):
                    warning = outcome.describe(backend.name)
                    logger.warning(warning)
                    warnings.append(warning)
                    continue
                markdown_file.write(self.example_section(backend.name, outcome))
                rendered_indices.append(outcome.index)

            markdown_file.write(self.capability_footer(backend))
            markdown_file.write(self.timestamp_line())

        logger.info(
            "Wrote %s: %d examples rendered, %d failed",
            markdown_path,
            len(rendered_indices),
            len(warnings),
        )
        return MarkdownReport(
            backend_name=backend.name,
            markdown_path=markdown_path,
            rendered_indices=tuple(rendered_indices),
            warnings=tuple(warnings),
        )

    @staticmethod
    def iter_outcomes(
        runner: ExampleRunner,
        catalog: Iterable[ExampleSpec],
        skip: Collection[int] = (),
    ) -> Iterator[ExampleOutcome]:
        """Run the catalog in order, yielding one outcome per example not skipped."""
        for index, example in enumerate(catalog, start=FIRST_EXAMPLE_INDEX):
            if index in skip:
                continue
            yield runner.run(index, example)

    def initialize_section(self, backend: BaseBackend) -> str:
        init_code = backend.initialization_source.rstrip("\n") + "\n"
        return "### Initialize\n\n" + fenced_code_block(init_code, self._config.code_language)

    def example_section(self, backend_name: str, capture: ExampleCapture) -> str:
        """Heading, description, normalized code and image link of one example."""
        example = capture.example
        image_link = self._config.image_link(backend_name, capture.image_filename)
        return (
            f"### {example.header}\n\n"
            f"{example.description}\n\n"
            + fenced_code_block(format_code_block(example.statements), self._config.code_language)
            + f"![]({image_link})\n\n"
        )

    def capability_footer(self, backend: BaseBackend) -> str:
        sigil = self._config.symbol_prefix
        lines = [
            f"- Supported arguments: {markdown_code_list(backend.supported_attributes())}",
            "- Supported values for seriestype: "
            f"{markdown_symbol_list(backend.supported_series_types(), sigil)}",
            f"- Supported values for linestyle: {markdown_symbol_list(backend.supported_styles(), sigil)}",
            f"- Supported values for marker: {markdown_symbol_list(backend.supported_markers(), sigil)}",
        ]
        return "".join(f"{line}\n" for line in lines)

    def timestamp_line(self) -> str:
        generated_at = self._config.clock().isoformat(timespec="seconds")
        return f"(Automatically generated: {generated_at})\n"

    def __repr__(self) -> str:
        return f"<MarkdownDocRenderer docs_dir={str(self._config.docs_dir)!r}>"


def generate_markdown(
    backend_name: str,
    catalog: Sequence[ExampleSpec] | None = None,
    skip: Collection[int] = (),
    config: DocsConfig | None = None,
    registry: BackendRegistry = backend_registry,
) -> MarkdownReport:
    """
    Select a registered backend by name and write its Markdown page.

    Uses the built-in example catalog when `catalog` is omitted.
    """
    if catalog is None:
        from plotdocs.catalog import EXAMPLES
        catalog = EXAMPLES

    backend = registry.create(backend_name)
    return MarkdownDocRenderer(config).render(backend, catalog, skip=skip)
