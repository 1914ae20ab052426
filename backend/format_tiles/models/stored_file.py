from sqlalchemy import BigInteger, Column, DateTime, Integer, String
from sqlalchemy.sql import func

from format_tiles.db.base import Base


class StoredFile(Base):
    __tablename__ = "files"

    id = Column(Integer, primary_key=True, index=True)
    context_id = Column(Integer, nullable=False, index=True)
    component = Column(String(100), nullable=False)
    filearea = Column(String(50), nullable=False)
    itemid = Column(Integer, nullable=False, default=0)
    filepath = Column(String(255), nullable=False, default="/")
    filename = Column(String(255), nullable=False)
    filesize = Column(BigInteger, nullable=False, default=0)
    mimetype = Column(String(100), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
