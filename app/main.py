import sentry_sdk
import structlog
from fastapi import FastAPI
from sentry_sdk.integrations.starlette import StarletteIntegration
from starlette.middleware.cors import CORSMiddleware

from app.api import errors
from app.api.routers.check_ins import router as check_ins_router
from app.api.routers.gyms import router as gyms_router
from app.api.routers.healthz import router as healthz_router
from app.api.routers.readyz import router as readyz_router
from app.core.config import Settings, get_settings
from app.logging import setup_logging
from app.middleware.request_id import request_id_middleware


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.app_env)

    # Sentry is a no-op without a DSN
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.app_env,
            integrations=[StarletteIntegration()],
            send_default_pii=False,
        )

    app = FastAPI(title="Gym Check-In API")
    app.middleware("http")(request_id_middleware)

    allow_origins = [o.strip() for o in settings.allow_origins.split(",") if o.strip()]
    if allow_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=allow_origins,
            allow_credentials=True,
            allow_methods=["GET", "POST", "PATCH", "OPTIONS", "HEAD"],
            allow_headers=["*"],
        )

    errors.install(app)
    app.include_router(gyms_router)
    app.include_router(check_ins_router)
    app.include_router(healthz_router)
    app.include_router(readyz_router)

    structlog.get_logger(__name__).info(
        "app_startup", env=settings.app_env, check_in_timezone=settings.check_in_timezone
    )
    return app


app = create_app()
