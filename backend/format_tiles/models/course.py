from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from format_tiles.db.base import Base


class Course(Base):
    __tablename__ = "courses"

    id = Column(Integer, primary_key=True, index=True)
    context_id = Column(Integer, unique=True, nullable=False, index=True)
    shortname = Column(String(255), nullable=False)
    fullname = Column(Text(), nullable=False)
    enablecompletion = Column(Boolean, nullable=False, default=False)
    basecolour = Column(String(7), nullable=True)
    theme = Column(String(50), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    sections = relationship("CourseSection", back_populates="course", cascade="all, delete-orphan")
    modules = relationship("CourseModule", back_populates="course", cascade="all, delete-orphan")


class CourseSection(Base):
    __tablename__ = "course_sections"
    __table_args__ = (UniqueConstraint("course_id", "section", name="uq_course_section"),)

    id = Column(Integer, primary_key=True, index=True)
    course_id = Column(Integer, ForeignKey("courses.id"), nullable=False, index=True)
    section = Column(Integer, nullable=False)
    name = Column(String(255), nullable=True)
    visible = Column(Boolean, nullable=False, default=True)

    course = relationship("Course", back_populates="sections")
    modules = relationship("CourseModule", back_populates="section")
