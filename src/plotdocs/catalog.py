"""
Built-in example catalog for the matplotlib backend.

Examples run in order in a namespace that already holds ``plt``, ``np``
and ``matplotlib``. Random data is drawn from ``np.random`` so the seed
restored before each example makes every image reproducible.
"""

from __future__ import annotations

from textwrap import dedent

from plotdocs.core.example_spec import ExampleSpec, MediaKind


def _example(
    header: str,
    description: str,
    source: str,
    media_kind: MediaKind = MediaKind.STATIC,
) -> ExampleSpec:
    return ExampleSpec.from_source(
        header,
        description,
        dedent(source).strip() + "\n",
        media_kind=media_kind,
        filename=f"<catalog: {header}>",
    )


EXAMPLES: tuple[ExampleSpec, ...] = (
    _example(
        "Lines",
        "A plot can be built from several calls to `plot`, one per series.",
        """
        x = np.linspace(0, 2 * np.pi, 200)
        fig, ax = plt.subplots()
        for k in range(1, 4):
            ax.plot(x, np.sin(k * x) / k, label=f"k = {k}")
        ax.legend()
        """,
    ),
    _example(
        "Animation",
        "Any figure can be animated with `FuncAnimation`; each frame redraws the line.",
        """
        from matplotlib.animation import FuncAnimation
        x = np.linspace(0, 2 * np.pi, 100)
        fig, ax = plt.subplots()
        (line,) = ax.plot(x, np.sin(x))
        ax.set_ylim(-1.1, 1.1)

        def update(frame):
            line.set_ydata(np.sin(x + frame / 5))
            return (line,)

        anim = FuncAnimation(fig, update, frames=30, blit=True)
        """,
        media_kind=MediaKind.ANIMATED,
    ),
    _example(
        "Scatter",
        "Marker size and color can follow the data.",
        """
        points = np.random.randn(2, 150)
        sizes = 200 * np.random.rand(150)
        fig, ax = plt.subplots()
        ax.scatter(points[0], points[1], s=sizes, c=sizes, alpha=0.6, cmap="viridis")
        """,
    ),
    _example(
        "Histogram",
        "Samples are binned with `hist`; the density curve is a plain line on top.",
        """
        samples = np.random.normal(loc=0.0, scale=1.0, size=1000)
        fig, ax = plt.subplots()
        ax.hist(samples, bins=30, density=True, alpha=0.5)
        grid = np.linspace(-4, 4, 200)
        ax.plot(grid, np.exp(-grid ** 2 / 2) / np.sqrt(2 * np.pi))
        """,
    ),
    _example(
        "Line styles",
        "Every supported line style, one line each.",
        """
        fig, ax = plt.subplots()
        for offset, style in enumerate(["-", "--", "-.", ":"]):
            ax.plot([0, 1], [offset, offset], linestyle=style, label=repr(style))
        ax.legend()
        """,
    ),
    _example(
        "Markers",
        "Markers are chosen per series and can be combined with a line style.",
        """
        x = np.arange(10)
        fig, ax = plt.subplots()
        for offset, marker in enumerate(["o", "s", "^", "x", "*"]):
            ax.plot(x, x + 3 * offset, marker=marker, linestyle="none")
        """,
    ),
    _example(
        "Scales",
        "Axis scales are set per axis.",
        """
        x = np.linspace(0.1, 10, 100)
        fig, (left, right) = plt.subplots(1, 2)
        left.plot(x, np.exp(x))
        left.set_yscale("log")
        right.plot(x, x ** 3)
        right.set_xscale("log")
        right.set_yscale("log")
        """,
    ),
    _example(
        "Bars",
        "Grouped bars are drawn by shifting each series along x.",
        """
        labels = ["a", "b", "c", "d"]
        positions = np.arange(len(labels))
        fig, ax = plt.subplots()
        ax.bar(positions - 0.2, [3, 5, 2, 6], width=0.4)
        ax.bar(positions + 0.2, [4, 1, 5, 3], width=0.4)
        ax.set_xticks(positions, labels)
        """,
    ),
    _example(
        "Contours",
        "Filled contours of a function sampled on a grid, with a colorbar.",
        """
        x, y = np.meshgrid(np.linspace(-3, 3, 100), np.linspace(-3, 3, 100))
        z = np.exp(-(x ** 2 + y ** 2)) - 0.5 * np.exp(-((x - 1) ** 2 + (y - 1) ** 2))
        fig, ax = plt.subplots()
        filled = ax.contourf(x, y, z, levels=15)
        fig.colorbar(filled)
        """,
    ),
    _example(
        "Area",
        "Areas are drawn as the region between a curve and zero.",
        """
        x = np.linspace(0, 10, 100)
        fig, ax = plt.subplots()
        ax.fill_between(x, np.sin(x) + 1.5, alpha=0.4)
        ax.fill_between(x, np.cos(x) + 1.5, alpha=0.4)
        """,
    ),
)
