"""
Unit tests for the rcParams-based attribute registry.
"""

import inspect

from matplotlib.lines import Line2D

from plotdocs.backends.matplotlib_attributes import (
    line_property_aliases,
    line_property_summaries,
    matplotlib_attribute_registry,
)
from plotdocs.tables.attribute_table import build_attribute_table


SYNTHETIC_RC_PARAMS = {
    "lines.linewidth": 1.5,
    "lines.linestyle": "-",
    "axes.grid": False,
    "figure.dpi": 100.0,
    "xtick.direction": "out",
    "font.size": 10.0,
    "backend": "agg",
}


class TestMatplotlibAttributeRegistry:

    def test_groups_by_rc_prefix(self) -> None:
        registry = matplotlib_attribute_registry(SYNTHETIC_RC_PARAMS)

        assert dict(registry.defaults_for("Series")) == {
            "lines.linestyle": "-",
            "lines.linewidth": 1.5,
        }
        assert dict(registry.defaults_for("Subplot")) == {"axes.grid": False}
        assert dict(registry.defaults_for("Plot")) == {"figure.dpi": 100.0}
        assert dict(registry.defaults_for("Axis")) == {"xtick.direction": "out"}

    def test_ungrouped_settings_ignored(self) -> None:
        registry = matplotlib_attribute_registry(SYNTHETIC_RC_PARAMS)
        assert "font.size" not in registry.descriptions
        assert "backend" not in registry.descriptions

    def test_line_aliases_point_at_series_keys(self) -> None:
        registry = matplotlib_attribute_registry(SYNTHETIC_RC_PARAMS)
        assert registry.aliases["lw"] == "lines.linewidth"
        assert registry.aliases["ls"] == "lines.linestyle"

    def test_aliases_without_matching_key_dropped(self) -> None:
        """Aliases of properties missing from rcParams are not kept."""
        registry = matplotlib_attribute_registry(SYNTHETIC_RC_PARAMS)
        assert "c" not in registry.aliases

    def test_rows_have_type_labels(self) -> None:
        registry = matplotlib_attribute_registry(SYNTHETIC_RC_PARAMS)
        rows = build_attribute_table("Series", registry.defaults_for("Series"), registry)

        width_row = next(row for row in rows if row.name == "lines.linewidth")
        assert width_row.type_label == "float"
        assert width_row.aliases == ("lw",)
        assert width_row.description.endswith("Default from rcParams['lines.linewidth'].")

    def test_series_description_from_setter_docstring(self) -> None:
        """Series rows say what the property does, not only its type."""
        registry = matplotlib_attribute_registry(SYNTHETIC_RC_PARAMS)
        rows = build_attribute_table("Series", registry.defaults_for("Series"), registry)

        width_row = next(row for row in rows if row.name == "lines.linewidth")
        summary = line_property_summaries()["linewidth"]
        assert width_row.description.startswith(summary)
        assert width_row.description != width_row.type_label

    def test_other_groups_keep_rc_description(self) -> None:
        registry = matplotlib_attribute_registry(SYNTHETIC_RC_PARAMS)
        assert registry.descriptions["axes.grid"] == "bool. Default from rcParams['axes.grid']."

    def test_default_rc_params_build(self) -> None:
        """The installed matplotlib defaults produce non-empty groups."""
        registry = matplotlib_attribute_registry()
        assert "lines.linewidth" in registry.defaults_for("Series")


class TestLinePropertySummaries:

    def test_first_paragraph_of_setter_doc(self) -> None:
        first_paragraph = inspect.getdoc(Line2D.set_linewidth).split("\n\n", 1)[0]
        assert line_property_summaries()["linewidth"] == " ".join(first_paragraph.split())

    def test_summaries_are_single_line(self) -> None:
        assert all("\n" not in summary for summary in line_property_summaries().values())


class TestLinePropertyAliases:

    def test_known_aliases(self) -> None:
        aliases = line_property_aliases()
        assert aliases["lw"] == "lines.linewidth"
        assert aliases["c"] == "lines.color"
