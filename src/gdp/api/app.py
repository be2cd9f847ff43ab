"""FastAPI application factory."""
from __future__ import annotations
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlmodel import SQLModel
from gdp.domain.exceptions import (
    NotFoundError, InvalidRequestError, AuthenticationMissingError, AuthorizationDeniedError,
)
from gdp.logging import logger


def create_app() -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        from gdp.infra.db.engine import engine  # triggers pragmas + mapper registration
        SQLModel.metadata.create_all(engine)
        yield

    app = FastAPI(
        title="GDP API",
        version="0.3.0",
        lifespan=lifespan,
    )

    # Import routers inside create_app() to avoid circular imports at module load time
    from gdp.api.routers.users import router as users_router
    from gdp.api.routers.projects import router as projects_router
    from gdp.api.routers.conges import router as conges_router
    from gdp.api.routers.dashboard import router as dashboard_router
    from gdp.api.routers.notifications import router as notifications_router
    from gdp.api.routers.periodic_tasks import router as periodic_tasks_router

    app.include_router(users_router)
    app.include_router(projects_router)
    app.include_router(conges_router)
    app.include_router(dashboard_router)
    app.include_router(notifications_router)
    app.include_router(periodic_tasks_router)

    @app.exception_handler(NotFoundError)
    def _not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": exc.message})

    @app.exception_handler(InvalidRequestError)
    def _invalid(request: Request, exc: InvalidRequestError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": exc.message})

    @app.exception_handler(AuthenticationMissingError)
    def _unauthenticated(request: Request, exc: AuthenticationMissingError) -> JSONResponse:
        return JSONResponse(
            status_code=401,
            content={"detail": exc.message},
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(AuthorizationDeniedError)
    def _forbidden(request: Request, exc: AuthorizationDeniedError) -> JSONResponse:
        logger.warning("Denied %s %s: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=403, content={"detail": exc.message})

    @app.get("/health", tags=["ops"])
    def health() -> dict:
        return {"status": "ok"}

    return app
