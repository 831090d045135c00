import os
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

# Каталог языков хранится в БД; по умолчанию локальный sqlite-файл.
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./translator.db")


def make_engine(url: str) -> Engine:
    # sqlite-соединение используется из разных потоков пула FastAPI
    if url.startswith("sqlite"):
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(url)


engine = make_engine(DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def init_db(seed) -> bool:
    """Создает таблицы и вызывает seed(db) в отдельной сессии."""
    from . import models  # noqa: F401  регистрирует модели в Base.metadata
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        return seed(db)
    finally:
        db.close()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
