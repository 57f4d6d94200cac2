"""Thin wrapper around the git command line."""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

__all__ = ["GitError", "GitRepository"]


LOGGER = logging.getLogger(__name__)


class GitError(RuntimeError):
    """Raised when a git command cannot be run or exits with an error."""

    def __init__(self, command: list[str], detail: str) -> None:
        self.command = command
        self.detail = detail
        super().__init__(f"git {' '.join(command)} failed: {detail}")


class GitRepository:
    """Run git commands against the repository rooted at ``root``."""

    def __init__(self, root: Path | str, executable: str = "git") -> None:
        self._root = Path(root)
        self._executable = executable

    @property
    def root(self) -> Path:
        return self._root

    @property
    def metadata_dir(self) -> Path:
        return self._root / ".git"

    def run(self, *args: str) -> str:
        """Run ``git <args>`` inside :attr:`root` and return its stdout."""

        command = list(args)
        LOGGER.debug("running git %s in %s", " ".join(command), self._root)
        try:
            result = subprocess.run(
                [self._executable, *command],
                cwd=self._root,
                capture_output=True,
                check=True,
                text=True,
            )
        except FileNotFoundError as exc:
            raise GitError(command, f"executable {self._executable!r} not found") from exc
        except subprocess.CalledProcessError as exc:
            detail = (exc.stderr or exc.stdout or "").strip() or f"exit status {exc.returncode}"
            raise GitError(command, detail) from exc
        return result.stdout

    def reset(self) -> bool:
        """Delete existing repository metadata. Returns ``True`` if any existed."""

        if not self.metadata_dir.exists() and not self.metadata_dir.is_symlink():
            return False
        if self.metadata_dir.is_dir() and not self.metadata_dir.is_symlink():
            shutil.rmtree(self.metadata_dir)
        else:
            self.metadata_dir.unlink()
        return True

    def init(self) -> None:
        self.run("init")

    def add_all(self) -> None:
        self.run("add", "--all")

    def commit(self, message: str) -> str:
        """Commit the index with ``message`` and return the new commit hash."""

        self.run("commit", "--message", message)
        return self.run("rev-parse", "HEAD").strip()

    def commit_count(self) -> int:
        return int(self.run("rev-list", "--count", "HEAD").strip())
