"""Top-level Click group for the tcommit CLI."""

import click

from tcommit.commit_opts import DEFAULT_TEMPLATE_FILE, CommitOpts
from tcommit.form import fill_replacements
from tcommit.git_repository import GitRepository
from tcommit.template.replacer import replacer_from_map
from tcommit.template_file_io import with_error_handling, with_template_file


def _template_options(command):
    command = click.argument(
        "template_file",
        default=DEFAULT_TEMPLATE_FILE,
        type=click.Path(exists=True, dir_okay=False),
    )(command)
    command = click.option(
        "-r", "--replace", "replace_flags",
        multiple=True,
        envvar="TCOMMIT_REPLACE",
        help="Replacement in format key=value (can be given multiple times)",
    )(command)
    command = click.option(
        "-e", "--execute", is_flag=True,
        help="Run git commit with the generated message",
    )(command)
    return command


def _finish(opts, template, replacements):
    message = template.execute(replacer_from_map(replacements))
    click.echo(message)
    if opts.execute:
        output = GitRepository.discover().commit(message)
        click.echo(output, err=True)


@click.group()
def main():
    """tcommit - template-based commit message generator.

    Templates contain markers such as {{.type}}, {{.type:feat|fix}} or
    {{.scope:@core}}: a key, optional allowed values and an optional
    default prefixed with @.
    """


@main.command("render")
@_template_options
def render_cmd(template_file, replace_flags, execute):
    """Render TEMPLATE using --replace values.

    \b
    Examples:
      tcommit render template.txt -r type=feat -r scope=auth
      tcommit render template.txt -r type=feat -r scope=auth --execute
    """
    with with_error_handling():
        opts = CommitOpts.from_flags(template_file, replace_flags, execute)
        with with_template_file(opts.template_file) as template:
            _finish(opts, template, opts.replacements)


@main.command("form")
@_template_options
def form_cmd(template_file, replace_flags, execute):
    """Fill in TEMPLATE variables interactively, then render it."""
    with with_error_handling():
        opts = CommitOpts.from_flags(template_file, replace_flags, execute)
        with with_template_file(opts.template_file) as template:
            replacements = fill_replacements(template, opts.replacements)
            _finish(opts, template, replacements)
