"""create users, preferences and plugin config

Revision ID: 0001_create_core
Revises: 
Create Date: 2026-10-16 09:10:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001_create_core"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("username", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.Column("is_guest", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("is_siteadmin", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
    )
    op.create_index("ix_users_id", "users", ["id"], unique=False)
    op.create_index("ix_users_username", "users", ["username"], unique=True)

    op.create_table(
        "user_preferences",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("value", sa.Text(), nullable=False),
        sa.UniqueConstraint("user_id", "name", name="uq_user_preference"),
    )
    op.create_index("ix_user_preferences_id", "user_preferences", ["id"], unique=False)
    op.create_index("ix_user_preferences_user_id", "user_preferences", ["user_id"], unique=False)

    op.create_table(
        "config_plugins",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("plugin", sa.String(length=100), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("value", sa.Text(), nullable=False, server_default=""),
        sa.UniqueConstraint("plugin", "name", name="uq_config_plugin"),
    )
    op.create_index("ix_config_plugins_id", "config_plugins", ["id"], unique=False)
    op.create_index("ix_config_plugins_plugin", "config_plugins", ["plugin"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_config_plugins_plugin", table_name="config_plugins")
    op.drop_index("ix_config_plugins_id", table_name="config_plugins")
    op.drop_table("config_plugins")

    op.drop_index("ix_user_preferences_user_id", table_name="user_preferences")
    op.drop_index("ix_user_preferences_id", table_name="user_preferences")
    op.drop_table("user_preferences")

    op.drop_index("ix_users_username", table_name="users")
    op.drop_index("ix_users_id", table_name="users")
    op.drop_table("users")
