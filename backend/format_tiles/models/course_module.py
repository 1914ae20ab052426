from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from format_tiles.db.base import Base


class CourseModule(Base):
    __tablename__ = "course_modules"

    id = Column(Integer, primary_key=True, index=True)
    course_id = Column(Integer, ForeignKey("courses.id"), nullable=False, index=True)
    section_id = Column(Integer, ForeignKey("course_sections.id"), nullable=False, index=True)
    context_id = Column(Integer, unique=True, nullable=False, index=True)
    modname = Column(String(50), nullable=False)
    instance = Column(Integer, nullable=False)
    name = Column(String(255), nullable=False)
    visible = Column(Boolean, nullable=False, default=True)
    completion = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    course = relationship("Course", back_populates="modules")
    section = relationship("CourseSection", back_populates="modules")

    @property
    def sectionnum(self) -> int:
        return self.section.section


class CourseModuleCompletion(Base):
    __tablename__ = "course_modules_completion"
    __table_args__ = (UniqueConstraint("coursemodule_id", "user_id", name="uq_cm_completion_user"),)

    id = Column(Integer, primary_key=True, index=True)
    coursemodule_id = Column(Integer, ForeignKey("course_modules.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    completionstate = Column(Integer, nullable=False, default=0)
    timemodified = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
