"""Format vocabulary, prompt assembly, and response parsing.

- :class:`PromptAssembler` builds the instruction sent to the model.
- :class:`ResponseParser` extracts :class:`ParsedRecord` items from the reply.
- :class:`FormatRegistry` tracks predefined/custom formats and selection.
"""

from src.core.formats.assembler import PromptAssembler
from src.core.formats.models import ConversionResult, FormatSpec, ParsedRecord
from src.core.formats.registry import FormatRegistry
from src.core.formats.response_parser import ResponseParser

__all__ = [
    "PromptAssembler",
    "ResponseParser",
    "FormatRegistry",
    "FormatSpec",
    "ParsedRecord",
    "ConversionResult",
]
