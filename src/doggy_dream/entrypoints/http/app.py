from fastapi import FastAPI

from doggy_dream.entrypoints.http.exception_handlers import register_exception_handlers
from doggy_dream.entrypoints.http.routes.auth import router as auth_router
from doggy_dream.entrypoints.http.routes.health import router as health_router
from doggy_dream.entrypoints.http.routes.search import router as search_router


def build_app() -> FastAPI:
    app = FastAPI(
        title="Doggy Dream Home API",
        description="""
        Searchable catalog of adoptable dogs backed by the remote dog catalog service.

        ## Features
        - Search dogs with breed filters, sorting and pagination
        - Apply or clear breed filters from a form
        - Log in to the upstream catalog service

        ## Authentication
        The upstream session cookie is relayed on login and must be sent back
        with every search. The service itself stores no session state.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        Upstream failures also report the pipeline stage and upstream status.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(search_router)

    return app


app = build_app()
