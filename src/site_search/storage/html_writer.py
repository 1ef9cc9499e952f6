"""HTML file writer for rendered search pages."""

import re
from datetime import datetime
from pathlib import Path

import aiofiles
import structlog

from ..page.regions import Page

logger = structlog.get_logger()


class HtmlWriter:
    """Handles HTML file output for rendered search pages."""

    def __init__(self, output_dir: str = "./output"):
        """Initialize HTML writer.

        Args:
            output_dir: Directory for HTML output files
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def _sanitize_filename(self, text: str) -> str:
        """Sanitize text for use in filename.

        Args:
            text: Text to sanitize

        Returns:
            Sanitized filename-safe string
        """
        sanitized = re.sub(r"[^\w\-]", "_", text)
        sanitized = re.sub(r"_+", "_", sanitized)
        sanitized = sanitized.strip("_")
        return sanitized[:50] or "search"

    def _generate_filename(self, query: str) -> str:
        """Generate unique filename for a rendered page.

        Args:
            query: Search query

        Returns:
            Filename with timestamp
        """
        timestamp = datetime.utcnow().strftime("%Y%m%d_%H%M%S")
        safe_query = self._sanitize_filename(query)
        return f"{safe_query}_{timestamp}.html"

    async def write_page(self, page: Page, query: str) -> str:
        """Write a rendered page to an HTML file.

        Args:
            page: Page to render
            query: Search query the page shows

        Returns:
            Path to the saved file
        """
        filepath = self.output_dir / self._generate_filename(query)

        async with aiofiles.open(filepath, "w", encoding="utf-8") as f:
            await f.write(page.render())

        logger.info("saved_search_page", filepath=str(filepath), query=query)
        return str(filepath)
