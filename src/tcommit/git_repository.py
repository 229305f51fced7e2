"""GitRepository: wraps GitPython Repo for committing generated messages."""

from git import Repo
from git.exc import InvalidGitRepositoryError, NoSuchPathError


class GitStateError(ValueError):
    """The repository is not in a state that allows committing."""


class GitRepository:
    """Wraps a GitPython Repo with the checks needed before a commit.

    Args:
        repo: A GitPython Repo instance.
    """

    def __init__(self, repo):
        self._repo = repo

    @classmethod
    def discover(cls, path="."):
        """Open the repository containing ``path``.

        Raises:
            GitStateError: If ``path`` is not inside a git working tree.
        """
        try:
            repo = Repo(path, search_parent_directories=True)
        except (InvalidGitRepositoryError, NoSuchPathError):
            raise GitStateError(f"not a git repository: {path}")
        return cls(repo)

    @property
    def working_tree_dir(self):
        return self._repo.working_tree_dir

    @property
    def current_branch(self):
        """Name of the checked-out branch, or None when HEAD is detached."""
        if self._repo.head.is_detached:
            return None
        return self._repo.active_branch.name

    def has_staged_changes(self):
        if not self._repo.head.is_valid():
            # no commits yet: everything in the index is staged
            return bool(self._repo.index.entries)
        return bool(self._repo.index.diff("HEAD"))

    def has_unstaged_changes(self):
        return bool(self._repo.index.diff(None))

    def validate_commit_state(self):
        """Raise GitStateError unless the staged changes are ready to commit."""
        if not self.has_staged_changes():
            raise GitStateError("no staged changes to commit")
        if self.has_unstaged_changes():
            raise GitStateError("you have unstaged changes. Please stage them first")
        if self.current_branch is None:
            raise GitStateError("detached HEAD state. Please checkout a branch")

    def commit(self, message):
        """Commit the staged changes with ``message``.

        Runs ``git commit`` so that the repository's commit hooks apply.

        Returns:
            The output of ``git commit``.
        """
        self.validate_commit_state()
        return self._repo.git.commit("-m", message)
