import os
import subprocess
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from gitbrowse.config import Settings
from gitbrowse.web.api import create_app

_GIT_ENV = {
    **os.environ,
    "GIT_AUTHOR_NAME": "Test User",
    "GIT_AUTHOR_EMAIL": "test@example.com",
    "GIT_COMMITTER_NAME": "Test User",
    "GIT_COMMITTER_EMAIL": "test@example.com",
}


def run_git(repo: Path, *args: str) -> str:
    """Run git in ``repo`` and return stripped stdout."""
    result = subprocess.run(
        ["git", "-C", str(repo), *args],
        capture_output=True, check=True, text=True, env=_GIT_ENV,
    )
    return result.stdout.strip()


def commit_file(repo: Path, file_path: str, content: str, message: str) -> None:
    """Write ``content`` to ``file_path`` and commit it."""
    full_path = repo / file_path
    full_path.parent.mkdir(parents=True, exist_ok=True)
    full_path.write_text(content, encoding="utf-8")
    run_git(repo, "add", file_path)
    run_git(repo, "commit", "-m", message)


@pytest.fixture
def git():
    """The `run_git` helper, for tests that inspect the source repository."""
    return run_git


@pytest.fixture
def work_repo(tmp_path: Path) -> Path:
    """A working repository on branch master with a few files and a feature branch."""
    repo = tmp_path / "work"
    subprocess.run(["git", "init", str(repo)], capture_output=True, check=True)
    run_git(repo, "symbolic-ref", "HEAD", "refs/heads/master")
    commit_file(repo, "README.md", "# Demo\n", "Initial commit")
    commit_file(repo, "src/main.py", "print('héllo wörld')\n", "Add main")
    commit_file(repo, "notes.txt", "plain notes\n", "Add notes")
    run_git(repo, "checkout", "-q", "-b", "feature/docs")
    commit_file(repo, "docs/guide.md", "# Guide\n", "Add guide")
    run_git(repo, "checkout", "-q", "master")
    return repo


@pytest.fixture
def repos_root(tmp_path: Path, work_repo: Path) -> Path:
    """A storage root holding ``demo.git``, a bare clone of ``work_repo``."""
    root = tmp_path / "repos"
    root.mkdir()
    subprocess.run(
        ["git", "clone", "-q", "--bare", str(work_repo), str(root / "demo.git")],
        capture_output=True, check=True,
    )
    return root


@pytest.fixture
def settings(repos_root: Path) -> Settings:
    return Settings(repos_root=repos_root)


@pytest.fixture
def client(settings: Settings):
    with TestClient(create_app(settings)) as c:
        yield c
