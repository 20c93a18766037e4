# authserver/main.py

import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from .api import auth
from .config import Settings, load_settings
from .core.errors import StorageError
from .core.service import AuthService
from .core.store import SqlCredentialStore
from .database import create_db_engine, create_session_factory, init_db


logger = logging.getLogger("authserver.main")


def build_auth_service(settings: Settings) -> AuthService:
    engine = create_db_engine(settings.database_url)
    init_db(engine)
    store = SqlCredentialStore(create_session_factory(engine))
    return AuthService(store)


def create_app(service: AuthService | None = None, settings: Settings | None = None) -> FastAPI:
    settings = settings or load_settings()
    if service is None:
        service = build_auth_service(settings)

    app = FastAPI(title="Auth Server")
    app.state.auth_service = service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        logger.error("Storage failure on %s", request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=500,
            content={"status": "error", "message": "Storage unavailable"}
        )

    app.include_router(auth.router)
    return app


def run():
    import uvicorn

    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(create_app(settings=settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
