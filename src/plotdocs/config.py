"""
Settings shared by the documentation builders.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Callable


DEFAULT_RANDOM_SEED = 1234
DEFAULT_ANIMATION_FPS = 15
DEFAULT_DPI = 100


@dataclass(frozen=True)
class DocsConfig:
    """
    Where documentation goes and how examples are captured.

    Parameters
    ----------
    docs_dir : Path, default=Path("docs/examples")
        Directory receiving the Markdown pages.
    image_dir_name : str, default="img"
        Subdirectory of `docs_dir` holding one image folder per backend.
    random_seed : int, default=1234
        Seed restored before every example so stochastic plots repeat.
    animation_fps : int, default=15
        Frame rate of captured animations.
    dpi : int, default=100
        Resolution of still images.
    symbol_prefix : str, default=":"
        Sigil written in front of every symbol in the capability footer.
    code_language : str, default="python"
        Info string of the fenced code blocks.
    clock : callable, default=datetime.now
        Source of the generation timestamp.
    """

    docs_dir: Path = Path("docs/examples")
    image_dir_name: str = "img"
    random_seed: int = DEFAULT_RANDOM_SEED
    animation_fps: int = DEFAULT_ANIMATION_FPS
    dpi: int = DEFAULT_DPI
    symbol_prefix: str = ":"
    code_language: str = "python"
    clock: Callable[[], datetime] = field(default=datetime.now, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "docs_dir", Path(self.docs_dir))
        if self.animation_fps <= 0:
            raise ValueError(f"animation_fps must be positive, got {self.animation_fps}.")
        if self.dpi <= 0:
            raise ValueError(f"dpi must be positive, got {self.dpi}.")

    def image_dir(self, backend_name: str) -> Path:
        """Folder receiving the images of one backend."""
        return self.docs_dir / self.image_dir_name / backend_name

    def image_link(self, backend_name: str, image_filename: str) -> str:
        """Image path as written in the Markdown page, relative to `docs_dir`."""
        return f"{self.image_dir_name}/{backend_name}/{image_filename}"

    def markdown_path(self, backend_name: str) -> Path:
        return self.docs_dir / f"{backend_name}.md"
