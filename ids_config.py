"""Render configuration."""

from dataclasses import dataclass

DEFAULT_FONT_SIZE = 72
DEFAULT_COLOR = 'black'
DEFAULT_MAX_DEPTH = 32


@dataclass
class RenderOptions:
    font_size: float = DEFAULT_FONT_SIZE
    color: str = DEFAULT_COLOR

    # recursion bound for nested operators
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self):
        if self.font_size <= 0:
            raise ValueError(f"font_size must be positive, got {self.font_size}")
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {self.max_depth}")
