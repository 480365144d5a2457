"""Theme preference store -- persists the user's light/dark choice.

The preference is a single ``theme`` key in a small JSON file.  When the
file or key is missing the configured default is used instead.
"""

from __future__ import annotations

import asyncio
import json
from enum import Enum
from pathlib import Path

import aiofiles  # type: ignore[import-untyped]

from src.utils.exceptions import PreferenceStoreError
from src.utils.file_utils import ensure_dir
from src.utils.logging import get_logger

logger = get_logger("preferences.theme")

THEME_KEY = "theme"


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"

    def toggled(self) -> "Theme":
        return Theme.DARK if self is Theme.LIGHT else Theme.LIGHT


class ThemeStore:
    """Read and write the persisted theme preference.

    Parameters
    ----------
    path:
        Location of the JSON preferences file.  Its parent directory is
        created on first write.
    default:
        Theme reported when nothing valid has been stored yet.
    """

    def __init__(self, path: str, default: str = Theme.LIGHT.value) -> None:
        self.path = Path(path)
        try:
            self.default = Theme(default)
        except ValueError:
            logger.warning("invalid_default_theme", value=default)
            self.default = Theme.LIGHT
        # Serialises read-modify-write cycles on the file.
        self._lock = asyncio.Lock()

    async def get(self) -> Theme:
        """Return the stored theme, or the default when none is stored."""
        data = await self._read()
        stored = data.get(THEME_KEY)
        if stored is None:
            return self.default
        try:
            return Theme(stored)
        except ValueError:
            logger.warning("invalid_stored_theme", value=stored, path=str(self.path))
            return self.default

    async def set(self, theme: Theme | str) -> Theme:
        try:
            theme = Theme(theme)
        except ValueError as exc:
            raise PreferenceStoreError(f"Unknown theme: {theme}") from exc

        async with self._lock:
            return await self._save(theme)

    async def toggle(self) -> Theme:
        """Flip light/dark, persist the result, and return it."""
        async with self._lock:
            current = await self.get()
            return await self._save(current.toggled())

    async def _save(self, theme: Theme) -> Theme:
        data = await self._read()
        data[THEME_KEY] = theme.value
        await self._write(data)
        logger.info("theme_saved", theme=theme.value)
        return theme

    async def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            async with aiofiles.open(self.path, mode="r", encoding="utf-8") as fh:
                raw = await fh.read()
        except OSError as exc:
            raise PreferenceStoreError(f"Cannot read {self.path}: {exc}") from exc

        try:
            data = json.loads(raw) if raw.strip() else {}
        except json.JSONDecodeError:
            logger.warning("preferences_corrupt", path=str(self.path))
            return {}
        return data if isinstance(data, dict) else {}

    async def _write(self, data: dict) -> None:
        try:
            ensure_dir(self.path.parent)
            async with aiofiles.open(self.path, mode="w", encoding="utf-8") as fh:
                await fh.write(json.dumps(data, indent=2))
        except OSError as exc:
            raise PreferenceStoreError(f"Cannot write {self.path}: {exc}") from exc
