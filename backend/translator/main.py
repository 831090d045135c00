import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from .config import Settings
from .database import init_db
from .deepl import TranslationError
from .routers import languages, translate
from .logger import logger

STATIC_DIR = os.path.join(os.path.dirname(__file__), "static")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Creating database tables...")
    if init_db(languages.seed_languages):
        logger.info("Languages table was empty and has been populated.")

    yield


settings = Settings.from_env()

app = FastAPI(
    title="DeepL Translator",
    description="Web front-end and server-side proxy for the DeepL API",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(TranslationError)
async def translation_error_handler(request: Request, exc: TranslationError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


app.include_router(translate.router)
app.include_router(languages.router)

app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")


@app.get("/", include_in_schema=False)
async def index():
    return FileResponse(os.path.join(STATIC_DIR, "index.html"))


@app.get("/health")
async def health_check():
    return {"status": "healthy", "service": "DeepL Translator"}


logger.info("Application startup configuration complete.")


def run():
    uvicorn.run(app, host=settings.host, port=settings.port, log_level="info")


if __name__ == "__main__":
    run()
