"""Color representation for SGR-styled text."""

from enum import Enum


_HUES = ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white")


class Color(Enum):
    """
    One of the 16 ANSI palette colors, or the terminal default.

    The enum value is the stable symbolic name handed to presentation
    layers ("red", "bright-red", "default").
    """
    DEFAULT = "default"

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"

    BRIGHT_BLACK = "bright-black"
    BRIGHT_RED = "bright-red"
    BRIGHT_GREEN = "bright-green"
    BRIGHT_YELLOW = "bright-yellow"
    BRIGHT_BLUE = "bright-blue"
    BRIGHT_MAGENTA = "bright-magenta"
    BRIGHT_CYAN = "bright-cyan"
    BRIGHT_WHITE = "bright-white"

    @property
    def is_bright(self) -> bool:
        return self.value.startswith("bright-")

    @property
    def index(self) -> int | None:
        """Palette index 0-15, or None for the default color."""
        if self is Color.DEFAULT:
            return None
        hue = self.value.removeprefix("bright-")
        return _HUES.index(hue) + (8 if self.is_bright else 0)

    @classmethod
    def from_index(cls, index: int) -> "Color":
        """Create a Color from a 0-15 palette index."""
        if not 0 <= index <= 15:
            raise ValueError(f"Palette index must be 0-15, got {index}")
        hue = _HUES[index % 8]
        return cls(f"bright-{hue}" if index >= 8 else hue)

    @classmethod
    def from_name(cls, name: str) -> "Color":
        """Resolve a symbolic name back to a Color."""
        try:
            return cls(name.lower())
        except ValueError:
            raise ValueError(f"Unknown color name: {name!r}") from None

    @classmethod
    def from_sgr(cls, code: int) -> "Color":
        """Create a Color from an SGR code (30-37, 40-47, 90-97, 100-107)."""
        if 30 <= code <= 37:
            return cls.from_index(code - 30)
        elif 40 <= code <= 47:
            return cls.from_index(code - 40)
        elif 90 <= code <= 97:
            return cls.from_index(code - 90 + 8)
        elif 100 <= code <= 107:
            return cls.from_index(code - 100 + 8)
        else:
            raise ValueError(f"Invalid SGR color code: {code}")

    def to_sgr_fg(self) -> str:
        """Return SGR parameter for this color as foreground."""
        index = self.index
        if index is None:
            return "39"
        return str(30 + index) if index < 8 else str(90 + index - 8)

    def to_sgr_bg(self) -> str:
        """Return SGR parameter for this color as background."""
        index = self.index
        if index is None:
            return "49"
        return str(40 + index) if index < 8 else str(100 + index - 8)
