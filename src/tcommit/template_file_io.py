"""Template file I/O and error reporting for CLI commands."""

import sys
from contextlib import contextmanager

import click
from git.exc import GitCommandError

from tcommit.template.template import parse


@contextmanager
def with_error_handling():
    try:
        yield
    except (ValueError, GitCommandError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@contextmanager
def with_template_file(template_file):
    with open(template_file, "r", encoding="utf-8") as f:
        yield parse(f)
