"""Template: a parsed commit message template ready to render.

A Template is immutable once built, so one instance can be rendered any
number of times, from any number of threads, against different replacers.
"""

import io
from dataclasses import dataclass
from typing import IO

from tcommit.template.nodes import Node, TextNode, VarNode
from tcommit.template.renderer import Writer, render_nodes
from tcommit.template.replacer import Replacer
from tcommit.template.scanner import Scanner
from tcommit.template.token_parser import parse_token


@dataclass(frozen=True)
class Template:
    nodes: tuple[Node, ...] = ()

    @property
    def variables(self) -> list[VarNode]:
        """Variable nodes in order of first appearance, one per key."""
        seen = set()
        result = []
        for node in self.nodes:
            if isinstance(node, VarNode) and node.key not in seen:
                seen.add(node.key)
                result.append(node)
        return result

    def execute(self, replacer: Replacer) -> str:
        """Render the template to a string."""
        buf = io.StringIO()
        self.execute_to(buf, replacer)
        return buf.getvalue()

    def execute_to(self, writer: Writer, replacer: Replacer) -> None:
        """Render the template into ``writer`` node by node.

        On failure, whatever was written before the failing variable stays in
        ``writer``. A binary stream such as ``io.BytesIO`` receives UTF-8
        bytes. Use :meth:`execute` when the output must be all or nothing.

        Raises:
            NoReplacementError: A key is missing and has no default.
            InvalidValueError: A value is not one of the allowed choices.
        """
        render_nodes(self.nodes, writer, replacer)


def parse_string(text: str) -> Template:
    """Parse template text into a Template.

    Raises:
        InvalidTokenSyntaxError: If any marker is not a variable reference.
    """
    nodes = []
    for literal, body in Scanner(text):
        if literal:
            nodes.append(TextNode(literal))
        if body is not None:
            nodes.append(parse_token(body))
    return Template(tuple(nodes))


def parse(stream: IO) -> Template:
    """Read ``stream`` to the end and parse its contents.

    Byte streams are decoded as UTF-8.
    """
    data = stream.read()
    if isinstance(data, bytes):
        data = data.decode("utf-8")
    return parse_string(data)
