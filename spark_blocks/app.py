"""
spark_blocks — FastAPI app
Démarrer : uvicorn spark_blocks.app:app --reload --port 8002
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .core.config import LOG_FORMAT, LOG_LEVEL
from .router import router as spark_router

log = logging.getLogger(__name__)


def create_app() -> FastAPI:
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    app = FastAPI(title="Spark Blocks — import/export HTML", version=__version__, docs_url="/docs")
    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])
    app.include_router(spark_router)

    @app.get("/health")
    def health():
        return {"status": "ok", "version": __version__}

    log.info("spark_blocks %s prêt", __version__)
    return app


app = create_app()
