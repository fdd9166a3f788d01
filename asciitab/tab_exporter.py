"""TabExporter: renders a Tab as plain text or Markdown and writes it out."""

from __future__ import annotations

import logging
from typing import Final

from asciitab.tab_models import Tab
from asciitab.tab_renderers import MarkdownTabRenderer, TabRenderer, TextTabRenderer

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS: Final[set[str]] = {"text", "md"}


class TabExporter:
    """
    Convert a Tab into file content via a pluggable renderer.

    Supported formats:
    - ``text``: bare ASCII tablature, one line per string.
    - ``md``: Markdown heading plus the tablature in a fenced code block.
    """

    def __init__(self, title: str = "", output_format: str = "text", labels: bool = False) -> None:
        self.title = title
        self.labels = labels
        normalized = output_format.strip().lower()
        if normalized not in SUPPORTED_FORMATS:
            supported = ", ".join(sorted(SUPPORTED_FORMATS))
            raise ValueError(f"Unsupported output format '{output_format}'. Use one of: {supported}.")
        self.output_format = normalized
        self.renderer = self._build_renderer(normalized)

    def _build_renderer(self, output_format: str) -> TabRenderer:
        if output_format == "md":
            return MarkdownTabRenderer()
        return TextTabRenderer()

    @property
    def default_extension(self) -> str:
        return self.renderer.default_extension

    def render(self, tab: Tab) -> str:
        """
        Render ``tab`` in the selected format.

        Raises:
            EmptyTabError: If the tab has nothing to render.
        """
        return self.renderer.render(tab, title=self.title, labels=self.labels)

    def export(self, tab: Tab, output_path: str) -> None:
        """
        Render ``tab`` and write it to ``output_path`` as UTF-8 text.

        Raises:
            EmptyTabError: If the tab has nothing to render.
            OSError: If the output file cannot be written.
        """
        content = self.render(tab)
        with open(output_path, "w", encoding="utf-8") as fh:
            fh.write(content)
        logger.debug("Wrote %s tab to %s", self.output_format, output_path)
