import aiosqlite
import structlog

from app.config import settings

logger = structlog.get_logger()

_db: aiosqlite.Connection | None = None

DDL_STATEMENTS = [
    """
    CREATE TABLE IF NOT EXISTS words (
        id TEXT PRIMARY KEY,
        word TEXT NOT NULL UNIQUE,
        language TEXT NOT NULL,
        definition TEXT NOT NULL DEFAULT '',
        difficulty TEXT NOT NULL DEFAULT 'hard',
        type TEXT NOT NULL DEFAULT '[]',
        examples TEXT NOT NULL DEFAULT '[]',
        sinonyms TEXT NOT NULL DEFAULT '[]',
        code_switching TEXT NOT NULL DEFAULT '[]',
        ipa TEXT,
        img TEXT,
        seen INTEGER NOT NULL DEFAULT 0,
        spanish TEXT,
        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS lectures (
        id TEXT PRIMARY KEY,
        content TEXT NOT NULL,
        level TEXT NOT NULL,
        language TEXT NOT NULL,
        type_write TEXT NOT NULL,
        time INTEGER NOT NULL DEFAULT 0,
        url_audio TEXT NOT NULL DEFAULT '',
        img TEXT NOT NULL DEFAULT '',
        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL
    )
    """,
    "CREATE INDEX IF NOT EXISTS idx_lectures_content ON lectures (content)",
    """
    CREATE TABLE IF NOT EXISTS expressions (
        id TEXT PRIMARY KEY,
        expression TEXT NOT NULL UNIQUE,
        language TEXT NOT NULL,
        definition TEXT NOT NULL DEFAULT '',
        difficulty TEXT NOT NULL DEFAULT 'hard',
        type TEXT NOT NULL DEFAULT '[]',
        examples TEXT NOT NULL DEFAULT '[]',
        context TEXT,
        img TEXT,
        spanish TEXT,
        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL
    )
    """,
]


async def create_schema(db: aiosqlite.Connection) -> None:
    for ddl in DDL_STATEMENTS:
        await db.execute(ddl)
    await db.commit()


async def init_database(db_path: str | None = None) -> None:
    global _db
    path = db_path or settings.db_path
    _db = await aiosqlite.connect(path)
    _db.row_factory = aiosqlite.Row
    await _db.execute("PRAGMA journal_mode=WAL")
    await _db.execute("PRAGMA foreign_keys=ON")

    await create_schema(_db)

    logger.info("database_initialized", path=path)


async def close_database() -> None:
    global _db
    if _db is not None:
        await _db.close()
        _db = None
        logger.info("database_closed")


def get_db() -> aiosqlite.Connection:
    if _db is None:
        raise RuntimeError("Database not initialized. Call init_database() first.")
    return _db


async def check_health() -> None:
    db = get_db()
    cursor = await db.execute("SELECT 1")
    await cursor.close()
