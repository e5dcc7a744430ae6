from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote

from gitbrowse.domain.models import EntryType

API_PREFIX = "/api"


@dataclass(frozen=True)
class LinkBuilder:
    """Absolute URLs for every resource, rooted at the request's base URL."""

    base_url: str

    @classmethod
    def for_base_url(cls, base_url: str) -> LinkBuilder:
        return cls(base_url=base_url.rstrip("/"))

    def api(self) -> str:
        return f"{self.base_url}{API_PREFIX}"

    def repos(self) -> str:
        return f"{self.api()}/repos"

    def repo(self, slug: str) -> str:
        return f"{self.repos()}/{quote(slug, safe='')}"

    def tree(self, slug: str, revision: str | None = None) -> str:
        url = f"{self.repo(slug)}/tree"
        if revision is None:
            return url
        return f"{url}/{quote(revision, safe='/')}"

    def blob(self, slug: str, object_hash: str) -> str:
        return f"{self.repo(slug)}/blob/{quote(object_hash, safe='')}"

    def entry(self, slug: str, entry_type: EntryType, object_hash: str) -> str:
        if entry_type == "tree":
            return self.tree(slug, object_hash)
        return self.blob(slug, object_hash)
