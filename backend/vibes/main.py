import logging
from contextlib import asynccontextmanager

import sentry_sdk
import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vibes.api import health, skills
from vibes.config import settings
from vibes.dependencies import Runtime, create_runtime

structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
        logging.getLevelName(settings.log_level)
    ),
)

if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn, traces_sample_rate=0.2, environment=settings.environment)


def create_app(runtime: Runtime | None = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        log = structlog.get_logger()
        log.info(
            "app.startup",
            environment=settings.environment,
            agents=app.state.runtime.agents.available(),
            catalogs=app.state.runtime.catalogs.catalog_ids(),
        )
        yield

    app = FastAPI(
        title="Vibes Skill Runtime",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.runtime = runtime or create_runtime()

    origins = [o.strip() for o in settings.allowed_origins.split(",") if o.strip()] if settings.allowed_origins else ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(skills.router, prefix="/skills", tags=["skills"])
    return app


app = create_app()
