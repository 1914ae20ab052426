"""create course, module, file and instance tables

Revision ID: 0002_create_course_tables
Revises: 0001_create_core
Create Date: 2026-10-16 09:40:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0002_create_course_tables"
down_revision: Union[str, None] = "0001_create_core"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "courses",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("context_id", sa.Integer(), nullable=False),
        sa.Column("shortname", sa.String(length=255), nullable=False),
        sa.Column("fullname", sa.Text(), nullable=False),
        sa.Column("enablecompletion", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("basecolour", sa.String(length=7), nullable=True),
        sa.Column("theme", sa.String(length=50), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
    )
    op.create_index("ix_courses_id", "courses", ["id"], unique=False)
    op.create_index("ix_courses_context_id", "courses", ["context_id"], unique=True)

    op.create_table(
        "course_sections",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("course_id", sa.Integer(), sa.ForeignKey("courses.id"), nullable=False),
        sa.Column("section", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=True),
        sa.Column("visible", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.UniqueConstraint("course_id", "section", name="uq_course_section"),
    )
    op.create_index("ix_course_sections_id", "course_sections", ["id"], unique=False)
    op.create_index("ix_course_sections_course_id", "course_sections", ["course_id"], unique=False)

    op.create_table(
        "course_modules",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("course_id", sa.Integer(), sa.ForeignKey("courses.id"), nullable=False),
        sa.Column("section_id", sa.Integer(), sa.ForeignKey("course_sections.id"), nullable=False),
        sa.Column("context_id", sa.Integer(), nullable=False),
        sa.Column("modname", sa.String(length=50), nullable=False),
        sa.Column("instance", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("visible", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.Column("completion", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
    )
    op.create_index("ix_course_modules_id", "course_modules", ["id"], unique=False)
    op.create_index("ix_course_modules_course_id", "course_modules", ["course_id"], unique=False)
    op.create_index("ix_course_modules_section_id", "course_modules", ["section_id"], unique=False)
    op.create_index("ix_course_modules_context_id", "course_modules", ["context_id"], unique=True)

    op.create_table(
        "course_modules_completion",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "coursemodule_id",
            sa.Integer(),
            sa.ForeignKey("course_modules.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("completionstate", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("timemodified", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.UniqueConstraint("coursemodule_id", "user_id", name="uq_cm_completion_user"),
    )
    op.create_index("ix_course_modules_completion_id", "course_modules_completion", ["id"], unique=False)
    op.create_index(
        "ix_course_modules_completion_coursemodule_id",
        "course_modules_completion",
        ["coursemodule_id"],
        unique=False,
    )
    op.create_index("ix_course_modules_completion_user_id", "course_modules_completion", ["user_id"], unique=False)

    op.create_table(
        "user_capabilities",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("course_id", sa.Integer(), sa.ForeignKey("courses.id", ondelete="CASCADE"), nullable=True),
        sa.Column("capability", sa.String(length=255), nullable=False),
        sa.UniqueConstraint("user_id", "course_id", "capability", name="uq_user_capability"),
    )
    op.create_index("ix_user_capabilities_id", "user_capabilities", ["id"], unique=False)
    op.create_index("ix_user_capabilities_user_id", "user_capabilities", ["user_id"], unique=False)
    op.create_index("ix_user_capabilities_course_id", "user_capabilities", ["course_id"], unique=False)

    op.create_table(
        "files",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("context_id", sa.Integer(), nullable=False),
        sa.Column("component", sa.String(length=100), nullable=False),
        sa.Column("filearea", sa.String(length=50), nullable=False),
        sa.Column("itemid", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("filepath", sa.String(length=255), nullable=False, server_default="/"),
        sa.Column("filename", sa.String(length=255), nullable=False),
        sa.Column("filesize", sa.BigInteger(), nullable=False, server_default="0"),
        sa.Column("mimetype", sa.String(length=100), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
    )
    op.create_index("ix_files_id", "files", ["id"], unique=False)
    op.create_index("ix_files_context_id", "files", ["context_id"], unique=False)

    op.create_table(
        "url",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("course_id", sa.Integer(), sa.ForeignKey("courses.id"), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("externalurl", sa.Text(), nullable=False),
        sa.Column("display", sa.Integer(), nullable=False, server_default="0"),
    )
    op.create_index("ix_url_id", "url", ["id"], unique=False)
    op.create_index("ix_url_course_id", "url", ["course_id"], unique=False)

    op.create_table(
        "page",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("course_id", sa.Integer(), sa.ForeignKey("courses.id"), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("intro", sa.Text(), nullable=True),
        sa.Column("introformat", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("contentformat", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("revision", sa.Integer(), nullable=False, server_default="0"),
    )
    op.create_index("ix_page_id", "page", ["id"], unique=False)
    op.create_index("ix_page_course_id", "page", ["course_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_page_course_id", table_name="page")
    op.drop_index("ix_page_id", table_name="page")
    op.drop_table("page")

    op.drop_index("ix_url_course_id", table_name="url")
    op.drop_index("ix_url_id", table_name="url")
    op.drop_table("url")

    op.drop_index("ix_files_context_id", table_name="files")
    op.drop_index("ix_files_id", table_name="files")
    op.drop_table("files")

    op.drop_index("ix_user_capabilities_course_id", table_name="user_capabilities")
    op.drop_index("ix_user_capabilities_user_id", table_name="user_capabilities")
    op.drop_index("ix_user_capabilities_id", table_name="user_capabilities")
    op.drop_table("user_capabilities")

    op.drop_index("ix_course_modules_completion_user_id", table_name="course_modules_completion")
    op.drop_index("ix_course_modules_completion_coursemodule_id", table_name="course_modules_completion")
    op.drop_index("ix_course_modules_completion_id", table_name="course_modules_completion")
    op.drop_table("course_modules_completion")

    op.drop_index("ix_course_modules_context_id", table_name="course_modules")
    op.drop_index("ix_course_modules_section_id", table_name="course_modules")
    op.drop_index("ix_course_modules_course_id", table_name="course_modules")
    op.drop_index("ix_course_modules_id", table_name="course_modules")
    op.drop_table("course_modules")

    op.drop_index("ix_course_sections_course_id", table_name="course_sections")
    op.drop_index("ix_course_sections_id", table_name="course_sections")
    op.drop_table("course_sections")

    op.drop_index("ix_courses_context_id", table_name="courses")
    op.drop_index("ix_courses_id", table_name="courses")
    op.drop_table("courses")
