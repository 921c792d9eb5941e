import logging
import sqlite3
from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine
from catalog_api.core.config import settings

logger = logging.getLogger(__name__)

# SQLite-соединение используется из потоков threadpool, где FastAPI выполняет sync-роуты
connect_args = {"check_same_thread": False} if settings.is_sqlite else {}

engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.SQL_ECHO,
    connect_args=connect_args,
)


def sqlite_lower(value):
    if isinstance(value, str):
        return value.lower()
    return value


@event.listens_for(Engine, "connect")
def register_sqlite_functions(dbapi_connection, connection_record):
    """
    Встроенный lower() в SQLite переводит в нижний регистр только ASCII,
    а ilike компилируется в lower(..) LIKE lower(..). Подменяем на str.lower,
    чтобы поиск "торт" находил "Торт".
    """
    if isinstance(dbapi_connection, sqlite3.Connection):
        dbapi_connection.create_function("lower", 1, sqlite_lower, deterministic=True)


def create_tables(bind=None):
    """Создание всех таблиц"""
    # Импорт регистрирует таблицы в metadata до create_all
    from catalog_api import models  # noqa: F401

    bind = bind or engine
    logger.info("Creating tables on %s", bind.url.render_as_string(hide_password=True))
    SQLModel.metadata.create_all(bind)
