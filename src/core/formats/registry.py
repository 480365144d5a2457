"""Per-session registry of predefined and custom formats and their selection."""

from __future__ import annotations

from src.core.formats.constants import PREDEFINED_FORMATS
from src.core.formats.models import FormatSpec
from src.utils.exceptions import FormatExistsError, FormatNotFoundError, ValidationError
from src.utils.logging import get_logger

logger = get_logger(__name__)


class FormatRegistry:
    """Holds the formats a user can convert into and which ones are active.

    Predefined formats are fixed and start selected.  Custom formats are
    added and removed by the user; a new one starts selected.  Selection is
    tracked by name, so removing a custom format also drops its entry.

    Typical lifecycle::

        registry = FormatRegistry()
        registry.add_custom("Markdown Table", "Use a GitHub-flavoured table.")
        registry.toggle("CSV")
        active = registry.active_formats()
    """

    def __init__(self, predefined: tuple[str, ...] = PREDEFINED_FORMATS) -> None:
        self._predefined: list[FormatSpec] = [FormatSpec(name=name) for name in predefined]
        self._custom: list[FormatSpec] = []
        self._selected: dict[str, bool] = {name: True for name in predefined}

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    @property
    def predefined(self) -> list[FormatSpec]:
        return list(self._predefined)

    @property
    def custom(self) -> list[FormatSpec]:
        return list(self._custom)

    @property
    def selection(self) -> dict[str, bool]:
        return dict(self._selected)

    def all_names(self) -> list[str]:
        return [f.name for f in self._predefined] + [f.name for f in self._custom]

    def exists(self, name: str) -> bool:
        """Case-insensitive check against every known format name."""
        wanted = name.strip().lower()
        return any(existing.lower() == wanted for existing in self.all_names())

    def is_selected(self, name: str) -> bool:
        return self._selected.get(name, False)

    def active_formats(self) -> list[FormatSpec]:
        """Selected predefined formats (fixed order), then selected custom ones."""
        return [
            spec
            for spec in self._predefined + self._custom
            if self._selected.get(spec.name, False)
        ]

    def has_selection(self) -> bool:
        return any(self._selected.values())

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_custom(self, name: str, instructions: str) -> FormatSpec:
        """Register a custom format and select it.

        Raises :class:`ValidationError` when either field is blank or the
        name contains a slash (names are used as URL path segments) and
        :class:`FormatExistsError` when the name clashes (ignoring case) with
        an existing format.
        """
        name = (name or "").strip()
        instructions = (instructions or "").strip()
        if not name or not instructions:
            raise ValidationError("Both fields are required.")
        if "/" in name:
            raise ValidationError("Format names cannot contain '/'.")
        if self.exists(name):
            raise FormatExistsError(name)

        spec = FormatSpec(name=name, instructions=instructions)
        self._custom.append(spec)
        self._selected[name] = True
        logger.info("custom_format_added", name=name)
        return spec

    def remove_custom(self, name: str) -> None:
        """Remove a custom format together with its selection entry."""
        for index, spec in enumerate(self._custom):
            if spec.name == name:
                del self._custom[index]
                self._selected.pop(name, None)
                logger.info("custom_format_removed", name=name)
                return
        raise FormatNotFoundError(name)

    def toggle(self, name: str) -> bool:
        """Flip the selection of *name* and return the new state."""
        return self.set_selected(name, not self.is_selected(name))

    def set_selected(self, name: str, selected: bool) -> bool:
        if name not in self.all_names():
            raise FormatNotFoundError(name)
        self._selected[name] = selected
        return selected
