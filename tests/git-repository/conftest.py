"""Shared fixtures for git repository tests."""

import os

import pytest
from git import Repo


@pytest.fixture
def repo(tmp_path):
    """A repository with one committed file, README.md."""
    repo = Repo.init(tmp_path)
    repo.config_writer().set_value("user", "email", "test@test.com").release()
    repo.config_writer().set_value("user", "name", "Test").release()
    (tmp_path / "README.md").write_text("# Test\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")
    return repo


@pytest.fixture
def stage_change(repo):
    def stage(name="feature.txt", content="feature\n"):
        path = repo.working_tree_dir + "/" + name
        with open(path, "w") as f:
            f.write(content)
        repo.index.add([name])
    return stage


@pytest.fixture
def failing_pre_commit_hook(repo):
    """Install a pre-commit hook that rejects every commit."""
    hooks_dir = os.path.join(repo.git_dir, "hooks")
    os.makedirs(hooks_dir, exist_ok=True)
    hook = os.path.join(hooks_dir, "pre-commit")
    with open(hook, "w") as f:
        f.write("#!/bin/sh\necho 'commit rejected by hook' >&2\nexit 1\n")
    os.chmod(hook, 0o755)
    return hook
