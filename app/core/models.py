from sqlalchemy import Column, String, Integer
from app.core.database import Base


class IdSequence(Base):
    """Last number handed out for each id prefix ("T", "L", ...)."""

    __tablename__ = "id_sequences"

    prefix = Column(String(8), primary_key=True)
    last_value = Column(Integer, nullable=False, default=0)
