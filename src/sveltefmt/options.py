"""Formatting options."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

EmbedErrorPolicy = Literal["fallback", "raise"]


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Options consumed by the printer and renderer.

    Attributes:
        print_width: Line width the renderer tries to stay within.
        tab_width: Spaces per indentation level (also the visual width of a tab).
        use_tabs: Indent with tabs instead of spaces.
        embed_errors: What to do when an embedded formatter raises:
            ``"fallback"`` prints the region's original content,
            ``"raise"`` aborts with :class:`~sveltefmt.exceptions.EmbedError`.
    """

    print_width: int = 80
    tab_width: int = 2
    use_tabs: bool = False
    embed_errors: EmbedErrorPolicy = "fallback"

    def __post_init__(self) -> None:
        if self.print_width <= 0:
            raise ValueError(f"print_width must be positive, got {self.print_width}")
        if self.tab_width <= 0:
            raise ValueError(f"tab_width must be positive, got {self.tab_width}")
        if self.embed_errors not in ("fallback", "raise"):
            raise ValueError(
                f"embed_errors must be 'fallback' or 'raise', got {self.embed_errors!r}"
            )

    @property
    def indentation(self) -> str:
        """One level of indentation."""
        return "\t" if self.use_tabs else " " * self.tab_width
