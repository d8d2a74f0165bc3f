from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from first_program.core.config.environment_config import EnvironmentConfig
from first_program.core.di.service_locator import ServiceLocator
from first_program.core.utils.logger import get_logger, setup_logging
from first_program.presentation.api.v1.conversion_router import router as conversion_router
from first_program.presentation.api.v1.oracle_router import router as oracle_router


logger = get_logger("api")


def create_app(config: Optional[EnvironmentConfig] = None) -> FastAPI:
    cfg = config or ServiceLocator.config()
    app = FastAPI(title=cfg.app_name, version=cfg.app_version)

    # Enable permissive CORS (allow all origins). Use with caution in production.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.on_event("startup")
    async def on_startup():
        setup_logging(level=cfg.log_level, log_dir=cfg.log_dir, to_file=cfg.log_to_file)
        logger.info("Starting %s v%s (%s)", cfg.app_name, cfg.app_version, cfg.app_env)

    @app.get("/")
    def root():
        return {"status": "ok", "message": f"{cfg.app_name} running"}

    # Feature flags decide which routers are mounted
    if cfg.enable_type_conversion:
        app.include_router(conversion_router)
    if cfg.enable_oracle_service:
        app.include_router(oracle_router)
    return app


app = create_app()
