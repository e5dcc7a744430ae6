"""API resources assembled from the resolver, the git reader and the links.

Every operation takes a ``RequestContext`` built for the current request,
so links always point back at the host the client actually called.
"""

from __future__ import annotations

from dataclasses import dataclass

from gitbrowse.application.links import LinkBuilder
from gitbrowse.domain.models import DEFAULT_REVISION, Repository, Tree, TreeEntry
from gitbrowse.infrastructure.git_cli_reader import GitCliReader
from gitbrowse.infrastructure.process_runner import ProcessRunner
from gitbrowse.infrastructure.repository_resolver import RepositoryResolver


@dataclass(frozen=True)
class RequestContext:
    links: LinkBuilder
    resolver: RepositoryResolver
    runner: ProcessRunner


def api_index(ctx: RequestContext) -> dict:
    return {
        "links": {
            "self": ctx.links.api(),
            "repos": ctx.links.repos(),
        }
    }


def repository_index(ctx: RequestContext) -> dict:
    repos = ctx.resolver.list_repositories()
    return {
        "repos": [_repository_resource(ctx, repo) for repo in repos],
        "links": {
            "self": ctx.links.repos(),
            "parent": ctx.links.api(),
        },
    }


def get_repository(ctx: RequestContext, slug: str) -> dict:
    ctx.resolver.resolve(slug)
    return _repository_resource(ctx, Repository(slug=slug))


async def get_tree(ctx: RequestContext, slug: str, revision: str | None = None) -> dict:
    repository = ctx.resolver.resolve(slug)
    revision = revision or DEFAULT_REVISION
    reader = GitCliReader(repository, ctx.runner)
    entries = await reader.ls_tree(
        revision, lambda entry_type, object_hash: ctx.links.entry(slug, entry_type, object_hash)
    )
    return _tree_resource(ctx, Tree(slug=slug, revision=revision, entries=entries))


async def get_blob(ctx: RequestContext, slug: str, object_hash: str) -> bytes:
    repository = ctx.resolver.resolve(slug)
    return await GitCliReader(repository, ctx.runner).show(object_hash)


def _repository_resource(ctx: RequestContext, repo: Repository) -> dict:
    return {
        "name": repo.name,
        "slug": repo.slug,
        "links": {
            "self": ctx.links.repo(repo.slug),
            "parent": ctx.links.repos(),
            "tree": ctx.links.tree(repo.slug),
        },
    }


def _tree_resource(ctx: RequestContext, tree: Tree) -> dict:
    return {
        "entries": [_entry_resource(entry) for entry in tree.entries],
        "links": {"self": ctx.links.tree(tree.slug, tree.revision)},
    }


def _entry_resource(entry: TreeEntry) -> dict:
    return {
        "type": entry.type,
        "mode": entry.mode,
        "hash": entry.hash,
        "name": entry.name,
        "links": entry.links,
    }
