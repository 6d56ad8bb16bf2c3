from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.auth_router import router as auth_router
from app.config import settings
from app.database import close_database, init_database
from app.exception_handlers import register_exception_handlers
from app.expressions.router import router as expressions_router
from app.lectures.router import router as lectures_router
from app.logging_config import setup_logging
from app.words.router import router as words_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    await init_database()
    yield
    await close_database()


app = FastAPI(
    title="Language Content Backend",
    description="Content management and bulk import for a language-learning product",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[origin.strip() for origin in settings.cors_origins.split(",")],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(auth_router, prefix="/api/v1/auth", tags=["auth"])
app.include_router(words_router, prefix="/api/v1/words", tags=["words"])
app.include_router(lectures_router, prefix="/api/v1/lectures", tags=["lectures"])
app.include_router(expressions_router, prefix="/api/v1/expressions", tags=["expressions"])


@app.get("/api/v1/health")
async def health():
    from app.database import check_health

    await check_health()
    return {"status": "healthy"}
