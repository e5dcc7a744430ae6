from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

REPO_SUFFIX = ".git"
DEFAULT_REVISION = "master"

EntryType = Literal["tree", "blob"]


@dataclass(frozen=True)
class Repository:
    """A repository discovered in the storage root."""

    slug: str

    @property
    def name(self) -> str:
        # Only the first character is upper-cased; the rest is kept as-is.
        return self.slug[:1].upper() + self.slug[1:]

    @classmethod
    def from_folder(cls, folder: str) -> Repository:
        if folder.endswith(REPO_SUFFIX) and folder != REPO_SUFFIX:
            return cls(slug=folder[: -len(REPO_SUFFIX)])
        return cls(slug=folder)


@dataclass(frozen=True)
class ValidRepository:
    """A slug that resolved to an existing folder under the storage root."""

    slug: str
    folder: str
    path: str


@dataclass(frozen=True)
class TreeEntry:
    """One line of a tree listing.

    Build entries with :meth:`subtree` or :meth:`blob`; the ``type`` tag
    decides which link key the entry exposes.
    """

    type: EntryType
    mode: str
    hash: str
    name: str
    link: str

    def __post_init__(self) -> None:
        if self.type not in ("tree", "blob"):
            raise ValueError(f"Unsupported tree entry type: {self.type}")
        if not self.name:
            raise ValueError("Tree entry name must not be empty")
        if not self.hash:
            raise ValueError("Tree entry hash must not be empty")

    @classmethod
    def subtree(cls, mode: str, hash: str, name: str, link: str) -> TreeEntry:
        return cls("tree", mode, hash, name, link)

    @classmethod
    def blob(cls, mode: str, hash: str, name: str, link: str) -> TreeEntry:
        return cls("blob", mode, hash, name, link)

    @property
    def is_subtree(self) -> bool:
        return self.type == "tree"

    @property
    def links(self) -> dict[str, str]:
        return {self.type: self.link}


@dataclass(frozen=True)
class Tree:
    """Entries of a repository at one revision, in listing order."""

    slug: str
    revision: str
    entries: list[TreeEntry]
