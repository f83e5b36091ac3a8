# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import DeclarativeBase, Session, scoped_session, sessionmaker

from creative_hub.shared.config import DatabaseConfig
from creative_hub.shared.logging import logger


class Base(DeclarativeBase):
    pass


def _engine_kwargs(config: DatabaseConfig) -> dict[str, object]:
    if config.url and config.url.startswith("sqlite"):
        return {
            "connect_args": {
                "check_same_thread": False,
                "timeout": int(config.pool_timeout),
            }
        }
    return {
        "pool_size": config.pool_size,
        "max_overflow": config.max_overflow,
        "pool_timeout": config.pool_timeout,
    }


class Database:
    """Engine and session factory owned by one application instance."""

    def __init__(self, config: DatabaseConfig) -> None:
        if not config.url:
            raise ValueError("DATABASE_URL is not configured")
        self.engine: Engine = create_engine(
            config.url,
            echo=False,
            pool_pre_ping=True,
            **_engine_kwargs(config),
        )
        self.SessionLocal = scoped_session(
            sessionmaker(bind=self.engine, autoflush=False, expire_on_commit=False)
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        session = self.SessionLocal()
        logger.debug("db.session: opened scoped session")
        try:
            yield session
            session.commit()
            logger.debug("db.session: committed scoped session")
        except IntegrityError as exc:
            # Constraint violations are mapped to domain errors by repositories
            logger.warning(f"db.session: integrity error, rolling back: {exc.orig}")
            session.rollback()
            raise
        except Exception:
            logger.exception("db.session: error, rolling back")
            session.rollback()
            raise
        finally:
            session.close()
            self.SessionLocal.remove()
            logger.debug("db.session: closed scoped session")

    def init_db(self) -> None:
        # Import for side effect: registers tables on Base.metadata
        from creative_hub.infrastructure.db import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info("Database schema ensured")

    def ping(self) -> bool:
        with self.engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        return True

    def dispose(self) -> None:
        self.SessionLocal.remove()
        self.engine.dispose()
        logger.info("Database engine disposed")
