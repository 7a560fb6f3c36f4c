"""HTTP server - FastAPI routes over the API views."""

from contextlib import asynccontextmanager

import duckdb
from fastapi import Depends, FastAPI, Header, Query, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

import settings
from app.container import Container
from app.repositories.db import open_store
from web.api.cache import get_cache_status, publish
from web.api.cache.schemas import CacheStatusResponse, PublishResponse
from web.api.content import get_content, save_section
from web.api.content.schemas import ContentResponse, SectionRequest, SuccessResponse
from web.api.context import get_context
from web.api.context.schemas import ContextResponse
from web.api.errors import NotFoundError, UnauthorizedError, ValidationError
from web.api.leads import delete_lead, list_leads, submit_lead
from web.api.leads.schemas import LeadsResponse, LeadSubmitRequest, MessageResponse
from web.auth import TokenAuthorizer, token_from_header


def get_container(request: Request) -> Container:
    return request.app.state.container


def require_admin(request: Request, authorization: str | None = Header(default=None)) -> None:
    """Reject the request before any store access unless the token is valid."""
    if not request.app.state.authorizer.is_authorized(token_from_header(authorization)):
        raise UnauthorizedError()


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ValidationError)
    async def _validation(_: Request, exc: ValidationError):
        return _error(400, exc.message)

    @app.exception_handler(RequestValidationError)
    async def _bad_request(_: Request, exc: RequestValidationError):
        return _error(400, "Invalid request body")

    @app.exception_handler(UnauthorizedError)
    async def _unauthorized(_: Request, exc: UnauthorizedError):
        return _error(401, exc.message)

    @app.exception_handler(NotFoundError)
    async def _not_found(_: Request, exc: NotFoundError):
        return _error(404, exc.message)

    @app.exception_handler(duckdb.Error)
    async def _store_failure(request: Request, exc: duckdb.Error):
        logger.error("Store failure on {} {}: {}", request.method, request.url.path, exc)
        return _error(500, "Store operation failed")

    @app.exception_handler(Exception)
    async def _unhandled(request: Request, exc: Exception):
        logger.exception("Unhandled error on {} {}: {}", request.method, request.url.path, exc)
        return _error(500, "Internal server error")


def _register_routes(app: FastAPI) -> None:
    @app.get("/healthz")
    def healthz():
        return {"ok": True}

    @app.get("/context", response_model=ContextResponse)
    async def read_context(
        response: Response,
        lang: str | None = Query(default=None),
        container: Container = Depends(get_container),
    ):
        body, source = await get_context(container, lang or container.languages[0])
        response.headers["Cache-Control"] = settings.CONTEXT_CACHE_CONTROL
        response.headers["X-Context-Source"] = source
        return body

    @app.get("/content", response_model=ContentResponse)
    def read_content(
        response: Response,
        lang: str | None = Query(default=None),
        if_none_match: str | None = Header(default=None),
        container: Container = Depends(get_container),
    ):
        body, etag = get_content(container, lang or container.languages[0])
        headers = {"Cache-Control": settings.CONTENT_CACHE_CONTROL, "ETag": etag}
        if if_none_match == etag:
            return Response(status_code=304, headers=headers)
        response.headers.update(headers)
        return body

    @app.post("/content", response_model=SuccessResponse, dependencies=[Depends(require_admin)])
    def write_content(body: SectionRequest, container: Container = Depends(get_container)):
        return save_section(container, body)

    @app.get("/cache", response_model=CacheStatusResponse)
    def cache_status(container: Container = Depends(get_container)):
        return get_cache_status(container)

    @app.post("/cache", response_model=PublishResponse, dependencies=[Depends(require_admin)])
    def publish_cache(container: Container = Depends(get_container)):
        return publish(container)

    @app.post("/leads", response_model=MessageResponse)
    async def capture_lead(body: LeadSubmitRequest, container: Container = Depends(get_container)):
        return await submit_lead(container, body)

    @app.get("/leads", response_model=LeadsResponse, dependencies=[Depends(require_admin)])
    def read_leads(container: Container = Depends(get_container)):
        return list_leads(container)

    @app.delete("/leads", response_model=MessageResponse, dependencies=[Depends(require_admin)])
    def remove_lead(
        lead_id: str | None = Query(default=None, alias="id"),
        container: Container = Depends(get_container),
    ):
        return delete_lead(container, lead_id)


def create_app(
    container: Container | None = None,
    authorizer: TokenAuthorizer | None = None,
) -> FastAPI:
    """Build the application; opens the configured store when no container is given."""
    owns_store = container is None
    if container is None:
        container = Container.from_settings(open_store(settings.DB_PATH))

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        yield
        if owns_store:
            container.store.close()

    app = FastAPI(title="Content Knowledge Base API", version="1.0.0", lifespan=lifespan)
    app.state.container = container
    app.state.authorizer = authorizer or TokenAuthorizer(settings.JWT_SECRET, settings.JWT_ALGORITHM)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    _register_error_handlers(app)
    _register_routes(app)

    logger.info("API ready: languages={}", ", ".join(container.languages))
    return app
