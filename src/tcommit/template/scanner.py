"""Split raw template text into literal runs and marker bodies."""

from collections.abc import Iterator

OPEN_MARKER = "{{"
CLOSE_MARKER = "}}"


class Scanner:
    """Iterable over ``(literal, body)`` pairs of a template text.

    ``body`` is the untrimmed text between ``{{`` and the nearest following
    ``}}``. The last pair always has ``body=None`` and carries the remaining
    text, which may be empty. An ``{{`` with no closing ``}}`` after it is
    left in that remaining text as plain literal text.

    Each call to ``iter()`` starts a fresh scan.
    """

    def __init__(self, text: str):
        self._text = text

    def __iter__(self) -> Iterator[tuple[str, str | None]]:
        text = self._text
        pos = 0
        while True:
            start = text.find(OPEN_MARKER, pos)
            if start == -1:
                break
            end = text.find(CLOSE_MARKER, start + len(OPEN_MARKER))
            if end == -1:
                break
            yield text[pos:start], text[start + len(OPEN_MARKER):end]
            pos = end + len(CLOSE_MARKER)
        yield text[pos:], None
