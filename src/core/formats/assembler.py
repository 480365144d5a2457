"""Prompt assembler: turns the user's selections into one instruction string.

The generated text lists every active format (numbered, using the expanded
display name for predefined formats), tells the model how to lay out each
block, adds a section of custom-format rules when any are active, applies
the chosen context style, and finally quotes the user's prompt verbatim.
"""

from __future__ import annotations

from typing import Sequence

from src.core.formats.constants import FORMAT_DISPLAY_NAMES
from src.core.formats.models import FormatSpec
from src.core.prompts.conversion import (
    CONVERSION_USER_TEMPLATE,
    CUSTOM_INSTRUCTION_ITEM,
    CUSTOM_INSTRUCTIONS_TEMPLATE,
)
from src.utils.exceptions import ValidationError


class PromptAssembler:
    """Build the conversion instruction sent to the generation service.

    Parameters
    ----------
    display_names:
        Mapping of format name to its human-readable expansion.  Defaults
        to the six predefined formats.
    """

    def __init__(self, display_names: dict[str, str] | None = None):
        self.display_names = (
            dict(FORMAT_DISPLAY_NAMES) if display_names is None else display_names
        )

    def assemble(
        self,
        user_prompt: str,
        active_formats: Sequence[FormatSpec],
        context_style: str,
    ) -> str:
        """Return the full instruction text.

        Raises :class:`ValidationError` when the prompt is blank or no
        formats are active.
        """
        if not user_prompt or not user_prompt.strip():
            raise ValidationError("Prompt must not be empty.")
        if not active_formats:
            raise ValidationError("At least one output format must be selected.")

        format_list = "\n".join(
            f"{index}. {self.display_name(spec.name)}"
            for index, spec in enumerate(active_formats, start=1)
        )

        return CONVERSION_USER_TEMPLATE.format(
            format_count=len(active_formats),
            format_list=format_list,
            custom_instructions=self._custom_instructions_block(active_formats),
            context_style=context_style,
            user_prompt=user_prompt,
        )

    def display_name(self, name: str) -> str:
        return self.display_names.get(name, name)

    @staticmethod
    def _custom_instructions_block(active_formats: Sequence[FormatSpec]) -> str:
        items = [
            CUSTOM_INSTRUCTION_ITEM.format(name=spec.name, instructions=spec.instructions)
            for spec in active_formats
            if spec.instructions and spec.instructions.strip()
        ]
        if not items:
            return ""
        return CUSTOM_INSTRUCTIONS_TEMPLATE.format(instructions_list="\n".join(items))
