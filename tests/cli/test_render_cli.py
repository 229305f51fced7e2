"""CLI tests for tcommit render."""

import pytest
from click.testing import CliRunner

from tcommit.cli import main


def run(*args, env=None):
    return CliRunner().invoke(main, ["render", *args], env=env)


@pytest.fixture
def template_file(tmp_path):
    def write(content):
        path = tmp_path / "template.txt"
        path.write_text(content, encoding="utf-8")
        return str(path)
    return write


@pytest.mark.unit
class TestRenderCommand:

    def test_prints_rendered_message(self, template_file):
        path = template_file("{{.type:feat|fix}}({{.scope:@core}}): {{.subject}}")

        result = run(path, "-r", "type=feat", "--replace", "subject=add login")

        assert result.exit_code == 0
        assert result.output == "feat(core): add login\n"

    def test_reads_replacements_from_environment(self, template_file):
        path = template_file("{{.type}}: {{.subject}}")

        result = run(path, env={"TCOMMIT_REPLACE": "type=fix subject=typo"})

        assert result.exit_code == 0
        assert result.output == "fix: typo\n"

    def test_defaults_to_dot_tcommit_file(self, tmp_path, monkeypatch):
        (tmp_path / ".tcommit").write_text("chore: {{.what:@deps}}", encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        result = run()

        assert result.exit_code == 0
        assert result.output == "chore: deps\n"

    def test_missing_template_file_is_usage_error(self, tmp_path):
        result = run(str(tmp_path / "nope.txt"))

        assert result.exit_code == 2

    def test_missing_replacement_exits_with_error(self, template_file):
        path = template_file("Hello {{.name}}!")

        result = run(path)

        assert result.exit_code == 1
        assert "Error: no replacement for key 'name'" in result.output

    def test_invalid_value_exits_with_error(self, template_file):
        path = template_file("{{.type:feat|fix}}")

        result = run(path, "-r", "type=docs")

        assert result.exit_code == 1
        assert "invalid value for key 'type' - 'docs'; allowed: feat, fix" in result.output

    def test_invalid_template_syntax_exits_with_error(self, template_file):
        path = template_file("Hello {{name}}!")

        result = run(path, "-r", "name=x")

        assert result.exit_code == 1
        assert "Error: invalid token syntax: 'name'" in result.output

    def test_malformed_replacement_flag_exits_with_error(self, template_file):
        path = template_file("x")

        result = run(path, "-r", "novalue")

        assert result.exit_code == 1
        assert "invalid replacement format: novalue (expected key=value)" in result.output
