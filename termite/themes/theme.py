"""Theme colour definitions and their parsing from TOML."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any


@dataclass(frozen=True)
class ForestPalette:
    """Characters and colours of the animated forest scene."""

    trunk_chars: tuple[str, ...] = ()
    branch_chars: tuple[str, ...] = ()
    leaf_chars: tuple[str, ...] = ()
    ground_chars: tuple[str, ...] = ()
    trunk_color: str = ""
    branch_color: str = ""
    leaf_color_1: str = ""
    leaf_color_2: str = ""
    leaf_color_3: str = ""
    ground_color: str = ""
    firefly_color: str = ""


@dataclass(frozen=True)
class Theme:
    """All colour values of a theme; each field name is its TOML key."""

    name: str = ""

    # Backgrounds
    background: str = ""
    surface: str = ""
    surface_alt: str = ""
    surface_highlight: str = ""

    # Accents
    primary: str = ""
    secondary: str = ""
    accent: str = ""

    # Text
    text: str = ""
    text_muted: str = ""
    text_dim: str = ""

    # Unread state
    unread_indicator: str = ""
    unread_subject: str = ""
    read_subject: str = ""
    read_preview: str = ""

    # Chrome
    border: str = ""
    border_focus: str = ""
    selection: str = ""
    selection_text: str = ""
    status_bar_bg: str = ""
    status_bar_text: str = ""
    command_bar_bg: str = ""
    command_border: str = ""

    # Semantic
    success: str = ""
    warning: str = ""
    danger: str = ""
    info: str = ""

    forest: ForestPalette = field(default_factory=ForestPalette)


def _string(key: str, value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(f"field {key!r}: expected a string, got {type(value).__name__}")
    return value


def _string_list(key: str, value: Any) -> tuple[str, ...]:
    if not isinstance(value, list):
        raise ValueError(f"field {key!r}: expected an array, got {type(value).__name__}")
    return tuple(_string(key, item) for item in value)


def _palette_from_mapping(data: Any) -> ForestPalette:
    if not isinstance(data, Mapping):
        raise ValueError(f"field 'forest': expected a table, got {type(data).__name__}")
    values: dict[str, Any] = {}
    for f in fields(ForestPalette):
        if f.name not in data:
            continue
        raw = data[f.name]
        values[f.name] = (
            _string_list(f.name, raw) if f.name.endswith("_chars") else _string(f.name, raw)
        )
    return ForestPalette(**values)


def theme_from_mapping(data: Mapping[str, Any]) -> Theme:
    """Build a theme from decoded TOML; unknown keys are ignored.

    Raises :class:`ValueError` when a known key holds a value of the wrong type.
    """
    values: dict[str, Any] = {}
    for f in fields(Theme):
        if f.name not in data:
            continue
        raw = data[f.name]
        if f.name == "forest":
            values[f.name] = _palette_from_mapping(raw)
        else:
            values[f.name] = _string(f.name, raw)
    return Theme(**values)


def parse_theme(text: str) -> Theme:
    """Parse a theme from TOML text; raises :class:`ValueError` on bad input."""
    return theme_from_mapping(tomllib.loads(text))