"""Response parser: extracts format records from free-form model output.

Expected layout of each block in the generation text::

    🧩 JSON (JavaScript Object Notation)
    💡 Best For: APIs, programming, structured data transfer.
    ```json
    { ... }
    ```

Strategy:
- Scan with the strict pattern, which requires a parenthesized subtitle on
  the header line.
- Only when the strict pass finds nothing at all and the text contains a
  code fence, scan once more with a relaxed pattern that accepts a bare
  header (custom formats are usually emitted without a subtitle).
- Anything matching neither pattern is ignored.
"""

from __future__ import annotations

import re

from src.core.formats.constants import DESCRIPTION_MARKER, FORMAT_MARKER
from src.core.formats.models import ParsedRecord
from src.utils.logging import get_logger

logger = get_logger(__name__)

_FENCE = "```"

_STRICT_PATTERN = re.compile(
    rf"{FORMAT_MARKER}\s(.*?)\s\((.*?)\)\n"
    rf"{DESCRIPTION_MARKER}\s(.*?)\n"
    rf"{_FENCE}(\w*)\n([\s\S]*?){_FENCE}"
)

_FALLBACK_PATTERN = re.compile(
    rf"{FORMAT_MARKER}\s(.*?)\n"
    rf"{DESCRIPTION_MARKER}\s(.*?)\n"
    rf"{_FENCE}(\w*)\n([\s\S]*?){_FENCE}"
)


class ResponseParser:
    """Parse generation text into a list of :class:`ParsedRecord`.

    Stateless; a single instance may be shared freely.
    """

    def parse(self, raw: str | None) -> list[ParsedRecord]:
        """Return every record found in *raw*, in order of appearance.

        Never raises; unparseable input simply yields an empty list.
        """
        if not raw or not isinstance(raw, str):
            return []

        records = [
            self._build_record(
                title=f"{match.group(1)} ({match.group(2)})",
                description=match.group(3),
                language=match.group(4),
                code=match.group(5),
            )
            for match in _STRICT_PATTERN.finditer(raw)
        ]

        if not records and _FENCE in raw:
            records = [
                self._build_record(
                    title=match.group(1),
                    description=match.group(2),
                    language=match.group(3),
                    code=match.group(4),
                )
                for match in _FALLBACK_PATTERN.finditer(raw)
            ]
            if records:
                logger.debug("response_parsed_with_fallback", record_count=len(records))

        if not records:
            logger.info("response_unparsed", response_len=len(raw))

        return records

    @staticmethod
    def _build_record(title: str, description: str, language: str, code: str) -> ParsedRecord:
        return ParsedRecord(
            title=title,
            description=description,
            language=language.lower() or "text",
            code=code.strip(),
        )
