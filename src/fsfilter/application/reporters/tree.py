"""Tree reporter: filter hierarchy → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from fsfilter.domain.ports.file_filter import ConditionalFileFilter
from fsfilter.infrastructure.filters.composite import NotFileFilter

if TYPE_CHECKING:
    from fsfilter.domain.ports.file_filter import IOFileFilter


@dataclass(frozen=True, slots=True)
class TreeConfig:
    """Configuration for tree reporter.

    All fields have defaults (convenience).
    Immutable (frozen dataclass).

    Attributes:
        width: Console width in columns (must be > 0).
        color: Emit ANSI styles. False = plain text.
        guide_style: rich style for tree guide lines.
        null_label: Label for empty (None) child slots.
    """

    width: int = 120
    color: bool = False
    guide_style: str = "dim"
    null_label: str = "null"

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width <= 0:
            raise ValueError(f"width must be > 0, got {self.width}")


class TreeReporter:
    """Renders a filter and its children as an indented tree.

    Composites (ConditionalFileFilter) and NotFileFilter become
    branches labelled with their class name; leaves use str().
    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: TreeConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or TreeConfig()

    def report(self, file_filter: IOFileFilter | None) -> str:
        """Format filter hierarchy as string.

        Args:
            file_filter: Root filter. None renders the null label.

        Returns:
            Tree text, one filter per line.
        """
        output = StringIO()
        console = Console(
            file=output,
            width=self._config.width,
            force_terminal=self._config.color,
            color_system="standard" if self._config.color else None,
            highlight=False,
        )
        tree = Tree(self._label(file_filter), guide_style=self._config.guide_style)
        self._add_children(tree, file_filter)
        console.print(tree)
        return output.getvalue()

    def _add_children(self, branch: Tree, file_filter: IOFileFilter | None) -> None:
        for child in self._children(file_filter):
            self._add_children(branch.add(self._label(child)), child)

    def _children(self, file_filter: IOFileFilter | None) -> tuple[IOFileFilter | None, ...]:
        if isinstance(file_filter, NotFileFilter):
            return (file_filter.file_filter,)
        if isinstance(file_filter, ConditionalFileFilter):
            return file_filter.get_filters()
        return ()

    def _label(self, file_filter: IOFileFilter | None) -> Text:
        if file_filter is None:
            return Text(self._config.null_label, style="red")
        if isinstance(file_filter, (ConditionalFileFilter, NotFileFilter)):
            return Text(type(file_filter).__name__, style="bold")
        return Text(str(file_filter))
