from __future__ import annotations

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse, Response

from gitbrowse.application import use_cases
from gitbrowse.application.links import LinkBuilder
from gitbrowse.application.use_cases import RequestContext
from gitbrowse.config import Settings
from gitbrowse.domain.errors import ApiError
from gitbrowse.infrastructure.process_runner import ProcessRunner
from gitbrowse.infrastructure.repository_resolver import RepositoryResolver
from gitbrowse.web.models import (
    ApiFailure,
    ApiIndex,
    ApiSuccess,
    RepositoryIndex,
    RepositoryResource,
    TreeResource,
)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the API app; ``settings`` defaults to the environment."""
    app = FastAPI(title="gitbrowse")
    app.state.settings = settings or Settings.from_env()

    def _context(request: Request) -> RequestContext:
        # A fresh context per request; nothing request-specific outlives it.
        current: Settings = request.app.state.settings
        return RequestContext(
            links=LinkBuilder.for_base_url(str(request.base_url)),
            resolver=RepositoryResolver(current.repos_root),
            runner=ProcessRunner(current.git_binary),
        )

    @app.exception_handler(ApiError)
    async def _api_error(request: Request, exc: ApiError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=ApiFailure(error=exc.message).model_dump(),
        )

    @app.get("/api", response_model=ApiSuccess[ApiIndex])
    def index(ctx: RequestContext = Depends(_context)):
        return ApiSuccess(result=use_cases.api_index(ctx))

    @app.get("/api/repos", response_model=ApiSuccess[RepositoryIndex])
    def list_repos(ctx: RequestContext = Depends(_context)):
        return ApiSuccess(result=use_cases.repository_index(ctx))

    @app.get("/api/repos/{slug}", response_model=ApiSuccess[RepositoryResource])
    def get_repo(slug: str, ctx: RequestContext = Depends(_context)):
        return ApiSuccess(result=use_cases.get_repository(ctx, slug))

    @app.get("/api/repos/{slug}/tree", response_model=ApiSuccess[TreeResource])
    async def get_default_tree(slug: str, ctx: RequestContext = Depends(_context)):
        return ApiSuccess(result=await use_cases.get_tree(ctx, slug))

    # Branch names may contain slashes, so the revision takes the rest of the path.
    @app.get("/api/repos/{slug}/tree/{revision:path}", response_model=ApiSuccess[TreeResource])
    async def get_tree(slug: str, revision: str, ctx: RequestContext = Depends(_context)):
        return ApiSuccess(result=await use_cases.get_tree(ctx, slug, revision))

    @app.get("/api/repos/{slug}/blob/{object_hash}")
    async def get_blob(slug: str, object_hash: str, ctx: RequestContext = Depends(_context)):
        content = await use_cases.get_blob(ctx, slug, object_hash)
        # Always labelled text/plain, even for binary blobs.
        return Response(content=content, media_type="text/plain")

    return app
