"""
Error type for malformed markup.

Parsing is fail-fast: the first problem aborts the whole parse and surfaces as
a single MarkupSyntaxError. Subclassing SyntaxError lets callers catch it with
`except SyntaxError`.
"""

from __future__ import annotations


class MarkupSyntaxError(SyntaxError):
    """Malformed bracket markup.

    `position` is the offset into the sanitized (stripped) input where the
    problem was detected, or None when no location applies.
    """

    def __init__(self, message: str, position: int | None = None):
        super().__init__(message)
        self.message = message
        self.position = position

    def __str__(self) -> str:
        if self.position is None:
            return self.message
        return f"{self.message} (at offset {self.position})"

    def excerpt(self, text: str, width: int = 20) -> str:
        """
        Two-line window of `text` around the error with a caret under it.

        `text` must be the same sanitized input the offset refers to.
        Returns "" when the error has no position.
        """
        if self.position is None:
            return ""
        pos = min(max(self.position, 0), len(text))
        start = max(0, pos - width)
        end = min(len(text), pos + width)
        window = text[start:end]
        # Keep the excerpt on one line so the caret lines up
        window = "".join(" " if ch.isspace() else ch for ch in window)
        return f"{window}\n{' ' * (pos - start)}^"
