# app/main.py
import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import Settings, get_settings
from app.core.deps import auth_middleware
from app.core.errors import register_error_handlers
from app.routes.auth import router as auth_router
from app.routes.db import router as db_router
from app.routes.enlaces import router as enlaces_router
from app.routes.formularios import router as formularios_router
from app.routes.posts import router as posts_router
from app.routes.usuarios import router as usuarios_router

logger = logging.getLogger("app")


def create_app(settings: Settings | None = None) -> FastAPI:
    # Sin JWT_SECRET / API_KEY no arranca (RuntimeError en get_settings)
    settings = settings or get_settings()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="Backend institucional",
        version="0.1.0",
        default_response_class=JSONResponse,
    )

    # Pipeline de autorización (API key, allow-list, token) sobre el path crudo.
    # Se registra antes que CORS para quedar por dentro de él.
    app.middleware("http")(auth_middleware(settings))

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "Authorization", "x-api-key"],
    )

    # =========================
    # 🔒 FUERZA UTF-8 EN JSON
    # =========================
    @app.middleware("http")
    async def force_utf8_json(request: Request, call_next):
        response = await call_next(request)
        content_type = response.headers.get("content-type", "")
        if "application/json" in content_type:
            response.headers["Content-Type"] = "application/json; charset=utf-8"
        return response

    # Una línea por request: METHOD path status ms
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed = (time.perf_counter() - start) * 1000
        logger.info("%s %s %s %.1fms", request.method, request.url.path, response.status_code, elapsed)
        return response

    register_error_handlers(app)

    # Routers
    prefix = settings.api_prefix
    app.include_router(db_router)
    app.include_router(auth_router, prefix=prefix)
    app.include_router(usuarios_router, prefix=prefix)
    app.include_router(enlaces_router, prefix=prefix)
    app.include_router(formularios_router, prefix=prefix)
    app.include_router(posts_router, prefix=prefix)

    logger.info(
        "App lista (env=%s, prefix=%s, bypass=%s)",
        settings.env, prefix or "/", settings.auth_bypass,
    )
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=get_settings().port)
