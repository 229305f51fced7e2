"""Parse a single marker body into a variable node.

Grammar of a body (surrounding whitespace ignored)::

    .KEY
    .KEY: PART | PART | ...

A part starting with ``@`` is the default value; any other part is an
allowed value.
"""

from tcommit.template.errors import InvalidTokenSyntaxError
from tcommit.template.nodes import VarNode

VARIABLE_SIGIL = "."
CHOICE_SEPARATOR = ":"
PART_DELIMITER = "|"
DEFAULT_SIGIL = "@"


def parse_token(body: str) -> VarNode:
    """Build a VarNode from the text between ``{{`` and ``}}``.

    Raises:
        InvalidTokenSyntaxError: If the body does not start with ``.``.
    """
    token = body.strip()
    if not token.startswith(VARIABLE_SIGIL):
        raise InvalidTokenSyntaxError(token)

    rest = token[len(VARIABLE_SIGIL):]
    if CHOICE_SEPARATOR not in rest:
        return VarNode(key=rest.strip())

    key, params = rest.split(CHOICE_SEPARATOR, 1)
    choices, default = _parse_parts(params)
    return VarNode(key=key.strip(), choices=choices, default=default)


def _parse_parts(params: str) -> tuple[tuple[str, ...], str | None]:
    choices = []
    default = None
    for part in params.split(PART_DELIMITER):
        part = part.strip()
        if not part:
            continue
        if part.startswith(DEFAULT_SIGIL):
            # the last default wins
            default = part[len(DEFAULT_SIGIL):]
        else:
            choices.append(part)
    return tuple(choices), default
