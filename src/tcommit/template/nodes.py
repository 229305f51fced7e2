"""Immutable nodes making up a parsed template."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TextNode:
    text: str


@dataclass(frozen=True)
class VarNode:
    """A placeholder resolved through a replacer at render time.

    Attributes:
        key: Lookup key passed to the replacer.
        choices: Allowed values, in marker order. Empty means any value.
        default: Fallback used when the key is missing. ``None`` means no
            default; the empty string is a valid default.
    """

    key: str
    choices: tuple[str, ...] = ()
    default: str | None = None

    @property
    def has_default(self) -> bool:
        return self.default is not None

    def accepts(self, value: str) -> bool:
        return not self.choices or value in self.choices


Node = TextNode | VarNode
