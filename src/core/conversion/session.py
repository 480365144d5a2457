"""Conversion session: one user's in-memory state and the submit operation.

A session mirrors what the user sees: the prompt being edited, the format
registry, the chosen context style, the latest parsed records, the latest
error, and whether a request is currently in flight.  :meth:`convert` is the
only operation that talks to the generation service.
"""

from __future__ import annotations

import uuid
from typing import Protocol

from src.core.formats.assembler import PromptAssembler
from src.core.formats.constants import CONTEXT_STYLES, DEFAULT_CONTEXT_STYLE, EXAMPLE_PROMPT
from src.core.formats.models import ConversionResult, ParsedRecord
from src.core.formats.registry import FormatRegistry
from src.core.formats.response_parser import ResponseParser
from src.core.prompts.conversion import SYSTEM_INSTRUCTION
from src.utils.exceptions import ValidationError
from src.utils.logging import get_logger

logger = get_logger("conversion.session")

GENERIC_ERROR_MESSAGE = "An unexpected error occurred."


class TextGenerator(Protocol):
    """Anything that can turn a system + user message pair into text."""

    async def complete(self, system: str, user: str) -> str: ...


class ConversionSession:
    """State and behaviour behind a single user's converter form.

    Parameters
    ----------
    session_id:
        Identifier used by :class:`~src.core.conversion.store.SessionStore`.
        Generated when omitted.
    assembler, parser:
        Collaborators; fresh defaults are created when not supplied.
    """

    def __init__(
        self,
        session_id: str | None = None,
        assembler: PromptAssembler | None = None,
        parser: ResponseParser | None = None,
    ):
        self.session_id = session_id or uuid.uuid4().hex[:12]
        self.prompt: str = ""
        self.registry = FormatRegistry()
        self.context_style: str = DEFAULT_CONTEXT_STYLE
        self.outputs: list[ParsedRecord] = []
        self.error: str | None = None
        self.is_loading: bool = False
        self.assembler = assembler or PromptAssembler()
        self.parser = parser or ResponseParser()

    def set_context_style(self, style: str) -> None:
        if style not in CONTEXT_STYLES:
            raise ValidationError(
                f"Unknown context style: {style}. Supported: {', '.join(CONTEXT_STYLES)}"
            )
        self.context_style = style

    def load_example(self) -> str:
        self.prompt = EXAMPLE_PROMPT
        return self.prompt

    def can_submit(self) -> bool:
        """True when the prompt is non-blank, formats are active and nothing is pending."""
        return bool(self.prompt.strip()) and not self.is_loading and self.registry.has_selection()

    async def convert(
        self,
        generator: TextGenerator,
        prompt: str | None = None,
    ) -> ConversionResult | None:
        """Submit the current prompt for conversion.

        Returns ``None`` without contacting *generator* when the submission
        is not allowed (blank prompt, no active formats, or a request
        already pending).  Otherwise the previous results and error are
        cleared, the generation call is awaited, and its reply is parsed.
        A failure of the call is recorded as the session error and never
        propagates.  A pending request also leaves *prompt* unapplied.
        """
        if prompt is not None and not self.is_loading:
            self.prompt = prompt

        active = self.registry.active_formats()
        if not self.can_submit() or not active:
            logger.info(
                "conversion_skipped",
                session_id=self.session_id,
                is_loading=self.is_loading,
                prompt_blank=not self.prompt.strip(),
                active_count=len(active),
            )
            return None

        self.is_loading = True
        self.error = None
        self.outputs = []

        logger.info(
            "conversion_started",
            session_id=self.session_id,
            formats=[spec.name for spec in active],
            context_style=self.context_style,
        )

        try:
            instruction = self.assembler.assemble(self.prompt, active, self.context_style)
            response_text = await generator.complete(SYSTEM_INSTRUCTION, instruction)
            self.outputs = self.parser.parse(response_text)
            logger.info(
                "conversion_completed",
                session_id=self.session_id,
                record_count=len(self.outputs),
            )
        except Exception as exc:
            self.error = str(exc) or GENERIC_ERROR_MESSAGE
            self.outputs = []
            logger.error(
                "conversion_failed",
                session_id=self.session_id,
                error_type=type(exc).__name__,
                error=self.error,
            )
        finally:
            self.is_loading = False

        return ConversionResult(outputs=list(self.outputs), error=self.error)
