"""Discovery, loading, validation and activation of themes."""

from __future__ import annotations

import dataclasses
import os
import re
import threading
from dataclasses import dataclass
from pathlib import Path

from termite.themes.styles import Styles, build_styles
from termite.themes.theme import Theme, parse_theme

_HEX_COLOR = re.compile(r"#[0-9a-fA-F]{6}")

_REQUIRED_FIELDS = (
    "background",
    "surface",
    "primary",
    "text",
    "text_muted",
    "unread_indicator",
    "unread_subject",
    "read_subject",
    "border",
    "border_focus",
    "selection",
    "selection_text",
    "status_bar_bg",
    "status_bar_text",
    "success",
    "warning",
    "danger",
    "info",
)


class ThemeError(Exception):
    """Raised when a theme cannot be found, parsed or validated."""


@dataclass(frozen=True)
class ThemeInfo:
    """A discovered theme; ``path`` is empty for built-in themes."""

    name: str
    id: str
    path: str = ""
    builtin: bool = False


@dataclass(frozen=True)
class StylesUpdatedMsg:
    """Announces that the active theme changed."""

    styles: Styles


def _read_theme(path: Path, theme_id: str) -> Theme:
    theme = parse_theme(path.read_text(encoding="utf-8"))
    if not theme.name:
        theme = dataclasses.replace(theme, name=theme_id)
    return theme


def _theme_files(directory: Path) -> list[Path]:
    return sorted(p for p in directory.iterdir() if p.suffix == ".toml" and not p.is_dir())


class ThemeManager:
    """Finds themes in a built-in and a user directory and keeps one active.

    User themes override built-in themes with the same ID (the file stem).
    """

    def __init__(
        self,
        builtin_dir: str | os.PathLike[str] | None = None,
        user_dir: str | os.PathLike[str] | None = None,
        default: str = "dark",
    ) -> None:
        self.builtin_dir = Path(builtin_dir) if builtin_dir is not None else None
        self.user_dir = (
            Path(user_dir) if user_dir is not None else Path.home() / ".termite" / "themes"
        )
        self._lock = threading.Lock()
        self._current: Theme | None = None
        self._styles: Styles | None = None
        try:
            self.apply(default)
        except ThemeError as exc:
            raise ThemeError(f"failed to apply default theme: {exc}") from exc

    def _user_themes_dir(self) -> Path | None:
        try:
            self.user_dir.mkdir(parents=True, exist_ok=True)
        except OSError:
            return None
        return self.user_dir

    def current(self) -> Theme:
        """Return the active theme."""
        with self._lock:
            assert self._current is not None
            return self._current

    def current_styles(self) -> Styles:
        """Return the styles built for the active theme."""
        with self._lock:
            assert self._styles is not None
            return self._styles

    def discover(self) -> list[ThemeInfo]:
        """List all built-in and user themes, sorted by ID."""
        seen: dict[str, ThemeInfo] = {}

        if self.builtin_dir is not None:
            try:
                builtin_files = _theme_files(self.builtin_dir)
            except OSError as exc:
                raise ThemeError(f"reading built-in themes: {exc}") from exc
            for path in builtin_files:
                try:
                    theme = parse_theme(path.read_text(encoding="utf-8"))
                except (OSError, ValueError):
                    continue
                seen[path.stem] = ThemeInfo(theme.name or path.stem, path.stem, "", True)

        user_dir = self._user_themes_dir()
        if user_dir is not None:
            try:
                user_files = _theme_files(user_dir)
            except OSError:
                user_files = []
            for path in user_files:
                try:
                    theme = parse_theme(path.read_text(encoding="utf-8"))
                except (OSError, ValueError):
                    continue
                seen[path.stem] = ThemeInfo(theme.name or path.stem, path.stem, str(path), False)

        return sorted(seen.values(), key=lambda info: info.id)

    def load(self, theme_id: str) -> Theme:
        """Read a theme by ID, preferring a user theme over a built-in one."""
        user_dir = self._user_themes_dir()
        if user_dir is not None:
            try:
                return _read_theme(user_dir / f"{theme_id}.toml", theme_id)
            except (OSError, ValueError):
                pass

        if self.builtin_dir is None:
            raise ThemeError(f'built-in theme "{theme_id}" not found')
        path = self.builtin_dir / f"{theme_id}.toml"
        try:
            text = path.read_text(encoding="utf-8")
        except OSError:
            raise ThemeError(f'built-in theme "{theme_id}" not found') from None
        try:
            theme = parse_theme(text)
        except ValueError as exc:
            raise ThemeError(f'parsing built-in theme "{theme_id}": {exc}') from exc
        if not theme.name:
            theme = dataclasses.replace(theme, name=theme_id)
        return theme

    def validate(self, theme: Theme | None) -> None:
        """Raise :class:`ThemeError` unless every required colour is a ``#rrggbb`` value."""
        if theme is None:
            raise ThemeError("theme is missing")
        for name in _REQUIRED_FIELDS:
            value = getattr(theme, name)
            if not value:
                raise ThemeError(f'theme "{theme.name}": missing required field "{name}"')
            if not _HEX_COLOR.fullmatch(value):
                raise ThemeError(
                    f'theme "{theme.name}": field "{name}" has invalid hex color "{value}"'
                )

    def apply(self, theme_id: str) -> None:
        """Load, validate and activate the theme ``theme_id``."""
        try:
            theme = self.load(theme_id)
        except ThemeError as exc:
            raise ThemeError(f'loading theme "{theme_id}": {exc}') from exc
        try:
            self.validate(theme)
        except ThemeError as exc:
            raise ThemeError(f'validating theme "{theme_id}": {exc}') from exc
        styles = build_styles(theme)
        with self._lock:
            self._current = theme
            self._styles = styles

    def apply_msg(self, theme_id: str) -> StylesUpdatedMsg:
        """Apply ``theme_id`` and return the message announcing the new styles."""
        self.apply(theme_id)
        return StylesUpdatedMsg(self.current_styles())