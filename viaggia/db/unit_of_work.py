"""
Unit-of-Work Row Tracking

``AsyncSession.commit()`` does not report how many rows it wrote, but
``save_changes`` has to answer "did this unit of work touch at least one row".
A session-level ``after_flush`` listener counts the inserted, updated and
deleted instances of every flush (explicit, autoflush or commit-time) into
``session.info`` until the transaction ends.
"""

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

_ROWS_KEY = "viaggia.unit_of_work.rows"


@event.listens_for(Session, "after_flush")
def _count_flushed_rows(session: Session, flush_context) -> None:
    # new/dirty/deleted still hold the pre-flush state inside after_flush
    modified = sum(1 for obj in session.dirty if session.is_modified(obj))
    rows = len(session.new) + len(session.deleted) + modified
    if rows:
        session.info[_ROWS_KEY] = session.info.get(_ROWS_KEY, 0) + rows


@event.listens_for(Session, "after_soft_rollback")
def _reset_on_rollback(session: Session, previous_transaction) -> None:
    session.info.pop(_ROWS_KEY, None)


# Plain session.commit() calls end the unit of work too
@event.listens_for(Session, "after_commit")
def _reset_on_commit(session: Session) -> None:
    session.info.pop(_ROWS_KEY, None)


async def commit_unit_of_work(session: AsyncSession) -> int:
    """
    Flush pending changes, commit, and return the number of rows written
    since the last commit or rollback.
    """
    await session.flush()
    rows = session.info.pop(_ROWS_KEY, 0)
    await session.commit()
    return rows
