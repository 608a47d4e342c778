# backend/app/services/memo_repository.py
from sqlalchemy import select
from sqlalchemy.orm import Session

from backend.app.models.memo import Memo


def save_memo(session: Session, memo: Memo) -> Memo:
    """Inserts the memo, or replaces the text of the memo with the same id."""
    saved = session.merge(memo)
    session.flush()
    return saved


def find_memo_by_id(session: Session, memo_id: int) -> Memo | None:
    return session.get(Memo, memo_id)


def find_all_memos(session: Session) -> list[Memo]:
    return list(session.scalars(select(Memo).order_by(Memo.id)).all())
