# backend/app/models/memo.py
from sqlalchemy import Column, Integer, Text
from backend.app.db.session import Base


class Memo(Base):
    __tablename__ = "memo"

    id = Column(Integer, primary_key=True, autoincrement=False) # Chosen by the caller
    text = Column(Text, nullable=False)

    def __repr__(self):
        return f"<Memo(id={self.id}, text='{self.text}')>"
