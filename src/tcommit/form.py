"""Interactive form: ask the user for each template variable."""

import click

from tcommit.template.nodes import TextNode


def _prompt_text(node):
    if node.choices:
        return f"{node.key} [{'|'.join(node.choices)}]"
    return node.key


def _variables_with_context(template):
    """Yield ``(text_before, node)`` for the first occurrence of each key."""
    seen = set()
    text_before = ""
    for node in template.nodes:
        if isinstance(node, TextNode):
            text_before += node.text
            continue
        if node.key not in seen:
            seen.add(node.key)
            yield text_before, node
        text_before = ""


def fill_replacements(template, replacements):
    """Prompt for every variable not already in ``replacements``.

    The template text leading up to a variable is shown before its prompt.
    Answers that are empty or equal to the variable's default are not
    recorded, so rendering falls back to the default (or reports the key as
    missing).

    Returns:
        A new mapping with the given replacements plus the recorded answers.
    """
    result = dict(replacements)
    for text_before, node in _variables_with_context(template):
        if node.key in result:
            continue
        if text_before.strip():
            click.echo(text_before.strip(), err=True)
        answer = click.prompt(
            _prompt_text(node),
            default=node.default if node.has_default else "",
            show_default=node.has_default,
            err=True,
        )
        if answer == "" or (node.has_default and answer == node.default):
            continue
        result[node.key] = answer
    return result
