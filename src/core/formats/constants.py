"""Fixed vocabulary shared by the prompt assembler and response parser."""

# Header glyph that opens each format block in the model's response.
FORMAT_MARKER: str = "\U0001F9E9"  # 🧩
# Glyph that opens the one-line "best for" description under the header.
DESCRIPTION_MARKER: str = "\U0001F4A1"  # 💡

PREDEFINED_FORMATS: tuple[str, ...] = ("JSON", "TOON", "YAML", "CSV", "XML", "TOML")

FORMAT_DISPLAY_NAMES: dict[str, str] = {
    "JSON": "JSON (JavaScript Object Notation)",
    "TOON": "TOON (Token-Oriented Object Notation)",
    "YAML": "YAML (YAML Ain’t Markup Language)",
    "CSV": "CSV (Comma-Separated Values)",
    "XML": "XML (eXtensible Markup Language)",
    "TOML": "TOML (Tom's Obvious Minimal Language)",
}

CONTEXT_STYLES: tuple[str, ...] = (
    "Professional",
    "Formal",
    "Corporate",
    "Authoritative",
    "Technical",
    "Business-like",
    "Objective",
    "Conversational",
    "Creative",
    "Concise",
)

DEFAULT_CONTEXT_STYLE: str = CONTEXT_STYLES[0]

EXAMPLE_PROMPT: str = (
    "I have three users: (1, Alice, admin), (2, Bob, user), (3, Charlie, guest). "
    "Convert this data into structured formats."
)
