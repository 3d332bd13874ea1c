"""Database session management"""

from typing import Generator

from sqlalchemy import create_engine, event, false, or_
from sqlalchemy.orm import ORMExecuteState, Session, sessionmaker, with_loader_criteria

from propman.core.config import settings
from propman.db.base import BaseEntity

INCLUDE_DELETED = "include_deleted"

# Create engine
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,  # Verify connections before use
    pool_recycle=300,    # Recycle connections every 5 minutes
    echo=settings.SQL_DEBUG
)

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def not_deleted(entity):
    """SQL criterion matching rows whose soft-delete flag is NULL or false"""
    return or_(entity.is_deleted.is_(None), entity.is_deleted == false())


@event.listens_for(Session, "do_orm_execute")
def _filter_soft_deleted(execute_state: ORMExecuteState) -> None:
    """Hide soft-deleted rows from every ORM SELECT unless asked not to"""
    if (
        not execute_state.is_select
        or execute_state.is_column_load
        or execute_state.is_relationship_load
        or execute_state.execution_options.get(INCLUDE_DELETED, False)
    ):
        return

    execute_state.statement = execute_state.statement.options(
        with_loader_criteria(
            BaseEntity,
            lambda cls: or_(cls.is_deleted.is_(None), cls.is_deleted == false()),
            include_aliases=True,
        )
    )


def get_db() -> Generator[Session, None, None]:
    """Get database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
