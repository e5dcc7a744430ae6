from __future__ import annotations

from typing import Generic, Literal, TypeVar

from pydantic import BaseModel

ResultT = TypeVar("ResultT")


class ApiIndex(BaseModel):
    links: dict[str, str]


class RepositoryResource(BaseModel):
    name: str
    slug: str
    links: dict[str, str]


class RepositoryIndex(BaseModel):
    repos: list[RepositoryResource]
    links: dict[str, str]


class TreeEntryResource(BaseModel):
    type: Literal["tree", "blob"]
    mode: str
    hash: str
    name: str
    links: dict[str, str]


class TreeResource(BaseModel):
    entries: list[TreeEntryResource]
    links: dict[str, str]


class ApiSuccess(BaseModel, Generic[ResultT]):
    success: Literal[True] = True
    result: ResultT


class ApiFailure(BaseModel):
    success: Literal[False] = False
    error: str
