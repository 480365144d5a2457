"""Data models for target formats and the records parsed out of a response."""

from pydantic import BaseModel, Field


class FormatSpec(BaseModel):
    """A target structured-data format.

    Attributes:
        name: Unique (case-insensitively) format name, e.g. ``"JSON"``.
        instructions: User-supplied rules for custom formats; ``None`` for
            the predefined ones.
    """

    name: str
    instructions: str | None = None

    @property
    def is_custom(self) -> bool:
        return self.instructions is not None


class ParsedRecord(BaseModel):
    """One format rendering extracted from the generation text.

    Attributes:
        title: Header line, e.g. ``"JSON (JavaScript Object Notation)"``.
        description: The single-line "best for" summary.
        language: Code-fence language tag, lower-cased; ``"text"`` when the
            fence carried none.
        code: Fenced body with outer whitespace stripped.
    """

    title: str
    description: str
    language: str = "text"
    code: str


class ConversionResult(BaseModel):
    """Outcome of one submission: the parsed records or an error message."""

    outputs: list[ParsedRecord] = Field(default_factory=list)
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.error is None
