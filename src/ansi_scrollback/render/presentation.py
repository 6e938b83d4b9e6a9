"""Map a Style to the names a presentation layer consumes."""

from dataclasses import dataclass

from ansi_scrollback.core.color import Color
from ansi_scrollback.core.style import Style


@dataclass(frozen=True, slots=True)
class PresentationStyle:
    """
    Presentation-facing view of a Style.

    Colors are symbolic names ("red", "bright-blue", "default") and
    reverse video has already been resolved by swapping them.
    """
    foreground: str = Color.DEFAULT.value
    background: str = Color.DEFAULT.value
    decorations: tuple[str, ...] = ()

    def css_classes(self, prefix: str = "") -> list[str]:
        """
        CSS class names for this style.

        Default colors are omitted, except under reverse video where a
        swapped default becomes "fg-inverse" / "bg-inverse".
        """
        reverse = self.has("reverse")
        classes: list[str] = []
        if self.foreground != Color.DEFAULT.value:
            classes.append(f"{prefix}fg-{self.foreground}")
        elif reverse:
            classes.append(f"{prefix}fg-inverse")
        if self.background != Color.DEFAULT.value:
            classes.append(f"{prefix}bg-{self.background}")
        elif reverse:
            classes.append(f"{prefix}bg-inverse")
        classes.extend(f"{prefix}{name}" for name in self.decorations)
        return classes

    def has(self, decoration: str) -> bool:
        return decoration in self.decorations


def to_presentation(style: Style) -> PresentationStyle:
    """Build the presentation view, swapping colors for reverse video."""
    foreground = style.foreground.value
    background = style.background.value
    if style.reverse:
        foreground, background = background, foreground
    return PresentationStyle(
        foreground=foreground,
        background=background,
        decorations=style.decorations,
    )
