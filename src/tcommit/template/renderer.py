"""Write template nodes to an output sink."""

import io
from collections.abc import Iterable
from typing import Protocol

from tcommit.template.errors import InvalidValueError, NoReplacementError
from tcommit.template.nodes import Node, TextNode, VarNode
from tcommit.template.replacer import Replacer


class Writer(Protocol):
    def write(self, data) -> object: ...


def render_nodes(nodes: Iterable[Node], writer: Writer, replacer: Replacer) -> None:
    """Write each node's contribution in order, stopping at the first error.

    Binary writers receive UTF-8 encoded bytes. Text already written before
    a failing node is left in ``writer``.
    """
    binary = isinstance(writer, (io.RawIOBase, io.BufferedIOBase))
    for node in nodes:
        chunk = render_node(node, replacer)
        writer.write(chunk.encode("utf-8") if binary else chunk)


def render_node(node: Node, replacer: Replacer) -> str:
    if isinstance(node, TextNode):
        return node.text
    if isinstance(node, VarNode):
        return resolve_variable(node, replacer)
    raise TypeError(f"Unknown template node: {node!r}")


def resolve_variable(node: VarNode, replacer: Replacer) -> str:
    """Look up a variable's value, applying its choices and default.

    Raises:
        InvalidValueError: The replacer's value is not an allowed choice.
        NoReplacementError: The key is missing and there is no default.
    """
    value, found = replacer.get(node.key)
    if found:
        if not node.accepts(value):
            raise InvalidValueError(node.key, value, node.choices)
        return value
    if node.has_default:
        return node.default
    raise NoReplacementError(node.key)
