"""Tests for the prompt assembler."""
import pytest

from src.core.formats.assembler import PromptAssembler
from src.core.formats.models import FormatSpec
from src.utils.exceptions import ValidationError


def _specs(*names):
    return [FormatSpec(name=n) for n in names]


class TestFormatList:
    def test_numbered_in_selection_order_with_display_names(self):
        text = PromptAssembler().assemble("Users list", _specs("YAML", "JSON"), "Technical")
        assert "into 2 different structured data prompt formats" in text
        assert "1. YAML (YAML Ain’t Markup Language)\n2. JSON (JavaScript Object Notation)" in text

    def test_custom_format_uses_own_name(self):
        specs = _specs("CSV") + [FormatSpec(name="Markdown Table", instructions="Use pipes.")]
        text = PromptAssembler().assemble("Users list", specs, "Concise")
        assert "1. CSV (Comma-Separated Values)\n2. Markdown Table" in text

    def test_custom_display_names(self):
        assembler = PromptAssembler(display_names={"INI": "INI (Initialization File)"})
        text = assembler.assemble("x", _specs("INI", "JSON"), "Formal")
        assert "1. INI (Initialization File)\n2. JSON" in text


class TestCustomInstructions:
    def test_block_omitted_without_custom_formats(self):
        text = PromptAssembler().assemble("x", _specs("JSON", "XML"), "Formal")
        assert "Custom Format Instructions" not in text

    def test_block_lists_each_custom_format(self):
        specs = [
            FormatSpec(name="JSON"),
            FormatSpec(name="Markdown Table", instructions="Use pipes."),
            FormatSpec(name="INI", instructions="Group by section."),
        ]
        text = PromptAssembler().assemble("x", specs, "Formal")
        assert "**Custom Format Instructions:**" in text
        assert '*   For the "Markdown Table" format: Use pipes.' in text
        assert '*   For the "INI" format: Group by section.' in text
        assert 'For the "JSON" format' not in text

    def test_blank_instructions_do_not_create_block(self):
        specs = [FormatSpec(name="Thing", instructions="   ")]
        text = PromptAssembler().assemble("x", specs, "Formal")
        assert "Custom Format Instructions" not in text


class TestLayout:
    def test_context_style_and_quoted_input_last(self):
        text = PromptAssembler().assemble("Make {a} list", _specs("JSON"), "Creative")
        assert "Apply a **Creative** tone and context to all generated formats." in text
        assert text.endswith('**Input:**\n"Make {a} list"')

    def test_deterministic(self):
        assembler = PromptAssembler()
        specs = _specs("JSON", "TOML")
        assert assembler.assemble("p", specs, "Formal") == assembler.assemble("p", specs, "Formal")


class TestPreconditions:
    def test_blank_prompt_rejected(self):
        with pytest.raises(ValidationError):
            PromptAssembler().assemble("   ", _specs("JSON"), "Formal")

    def test_no_formats_rejected(self):
        with pytest.raises(ValidationError):
            PromptAssembler().assemble("prompt", [], "Formal")
