"""init
Revision ID: 0001_init
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa

revision = "0001_init"
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("create_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False, unique=True),
        sa.Column("is_admin", sa.Boolean(), nullable=False, server_default=sa.text("false")),
    )

    op.create_table(
        "topics",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("create_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("update_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("category", sa.String(length=50), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("create_user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("is_delete", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("recommend", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("top", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("lock", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("visit_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("reply_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("last_reply_user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=True),
        sa.Column("last_reply_date", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_topics_category", "topics", ["category"])
    op.create_index("ix_topics_create_user_id", "topics", ["create_user_id"])
    op.create_index("ix_topics_is_delete", "topics", ["is_delete"])

    op.create_table(
        "comments",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("create_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("topic_id", sa.Integer(), sa.ForeignKey("topics.id"), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("create_user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("is_delete", sa.Boolean(), nullable=False, server_default=sa.text("false")),
    )
    op.create_index("ix_comments_topic_id", "comments", ["topic_id"])
    op.create_index("ix_comments_create_user_id", "comments", ["create_user_id"])

    op.create_table(
        "user_collects",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("create_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("topic_id", sa.Integer(), sa.ForeignKey("topics.id"), nullable=False),
        sa.UniqueConstraint("user_id", "topic_id", name="uq_user_collects_user_topic"),
    )
    op.create_index("ix_user_collects_user_id", "user_collects", ["user_id"])
    op.create_index("ix_user_collects_topic_id", "user_collects", ["topic_id"])

def downgrade():
    op.drop_index("ix_user_collects_topic_id", table_name="user_collects")
    op.drop_index("ix_user_collects_user_id", table_name="user_collects")
    op.drop_table("user_collects")
    op.drop_index("ix_comments_create_user_id", table_name="comments")
    op.drop_index("ix_comments_topic_id", table_name="comments")
    op.drop_table("comments")
    op.drop_index("ix_topics_is_delete", table_name="topics")
    op.drop_index("ix_topics_create_user_id", table_name="topics")
    op.drop_index("ix_topics_category", table_name="topics")
    op.drop_table("topics")
    op.drop_table("users")
