import os
from pathlib import Path

from gitbrowse.domain.errors import RepositoryNotFound, StorageUnavailable
from gitbrowse.domain.models import REPO_SUFFIX, Repository, ValidRepository


class RepositoryResolver:
    """Maps slugs to folders under the repository-storage root.

    Only existence is checked. Whether a folder really holds a repository is
    left to the git invocation that runs inside it.
    """

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)

    def resolve(self, slug: str) -> ValidRepository:
        # basename() drops any directory part, so "../x" and "a/b" cannot escape the root.
        folder = os.path.basename(slug) + REPO_SUFFIX
        path = self._root / folder
        try:
            os.stat(path)
        except FileNotFoundError:
            raise RepositoryNotFound(slug)
        except OSError as e:
            raise StorageUnavailable(str(e))
        return ValidRepository(slug=slug, folder=folder, path=str(path.resolve()))

    def list_repositories(self) -> list[Repository]:
        try:
            names = os.listdir(self._root)
        except OSError as e:
            raise StorageUnavailable(str(e))
        return [Repository.from_folder(name) for name in sorted(names)]
