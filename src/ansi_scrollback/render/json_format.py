"""Render styled runs to structured JSON.

Each run becomes one object using the stable color names; default
values are left out:

[
  {"text": "error: ", "fg": "bright-red", "bold": true},
  {"text": "file not found"}
]
"""

import json
from typing import Any, Iterable

from ansi_scrollback.core.color import Color
from ansi_scrollback.core.run import StyledRun
from ansi_scrollback.core.style import DECORATIONS, Style


class JsonRenderer:
    """
    Render runs to JSON.

    Colors are written as stored on the Style (reverse is kept as a
    flag, not swapped), so JsonParser can restore the exact runs.
    """

    def __init__(self, indent: int | None = 2, include_defaults: bool = False):
        """
        Args:
            indent: JSON indentation (None for compact)
            include_defaults: Write every field, not only non-default ones
        """
        self.indent = indent
        self.include_defaults = include_defaults

    def render(self, runs: Iterable[StyledRun]) -> str:
        """Render runs to a JSON string."""
        return json.dumps(self.to_list(runs), indent=self.indent, ensure_ascii=False)

    def to_list(self, runs: Iterable[StyledRun]) -> list[dict[str, Any]]:
        return [self.run_to_dict(run) for run in runs]

    def run_to_dict(self, run: StyledRun) -> dict[str, Any]:
        style = run.style
        data: dict[str, Any] = {"text": run.text}
        if self.include_defaults or style.foreground is not Color.DEFAULT:
            data["fg"] = style.foreground.value
        if self.include_defaults or style.background is not Color.DEFAULT:
            data["bg"] = style.background.value
        for name in DECORATIONS:
            value = getattr(style, name)
            if value or self.include_defaults:
                data[name] = value
        return data


class JsonParser:
    """Parse JsonRenderer output back into runs."""

    def parse(self, json_str: str) -> list[StyledRun]:
        data = json.loads(json_str)
        if not isinstance(data, list):
            raise ValueError("Expected a JSON list of runs")
        return [self.run_from_dict(item) for item in data]

    def run_from_dict(self, data: dict[str, Any]) -> StyledRun:
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object for a run, got {type(data).__name__}")

        flags: dict[str, bool] = {}
        for name in DECORATIONS:
            value = data.get(name, False)
            if not isinstance(value, bool):
                raise ValueError(f"{name!r} must be true or false, got {value!r}")
            flags[name] = value

        text = data.get("text", "")
        if not isinstance(text, str):
            raise ValueError(f"'text' must be a string, got {text!r}")

        style = Style(
            foreground=self._parse_color(data.get("fg", "default")),
            background=self._parse_color(data.get("bg", "default")),
            **flags,
        )
        return StyledRun(style, text)

    def _parse_color(self, value: Any) -> Color:
        if not isinstance(value, str):
            raise ValueError(f"Color must be a name, got {value!r}")
        return Color.from_name(value)
