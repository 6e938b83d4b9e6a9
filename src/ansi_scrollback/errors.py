"""Exceptions raised by ansi-scrollback."""


class ParseError(ValueError):
    """
    A malformed escape sequence was found while tokenizing.

    Attributes:
        position: Index of the ESC that starts the bad sequence
        offset: Index of the offending character (len(text) if the
            input ended early)
        description: Human-readable reason
    """

    def __init__(self, position: int, offset: int, description: str):
        self.position = position
        self.offset = offset
        self.description = description
        super().__init__(f"{description} (sequence at {position}, offset {offset})")
