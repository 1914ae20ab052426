from sqlalchemy import Column, ForeignKey, Integer, String, Text

from format_tiles.db.base import Base


class UrlInstance(Base):
    __tablename__ = "url"

    id = Column(Integer, primary_key=True, index=True)
    course_id = Column(Integer, ForeignKey("courses.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    externalurl = Column(Text(), nullable=False)
    display = Column(Integer, nullable=False, default=0)


class PageInstance(Base):
    __tablename__ = "page"

    id = Column(Integer, primary_key=True, index=True)
    course_id = Column(Integer, ForeignKey("courses.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    intro = Column(Text(), nullable=True)
    introformat = Column(Integer, nullable=False, default=1)
    content = Column(Text(), nullable=True)
    contentformat = Column(Integer, nullable=False, default=1)
    revision = Column(Integer, nullable=False, default=0)
