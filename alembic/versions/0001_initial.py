"""initial schema

Revision ID: 0001_initial
Revises: 
Create Date: 2026-10-19 00:00:00.000000
"""

from alembic import op
import sqlalchemy as sa


revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None


admin_role_enum = sa.Enum("admin", "superadmin", name="admin_role")
theme_enum = sa.Enum("light", "dark", name="theme")
subject_category_enum = sa.Enum(
    "programming", "mathematics", "languages", "science", "other", name="subject_category"
)
subject_level_enum = sa.Enum("beginner", "intermediate", "advanced", "all", name="subject_level")
topic_difficulty_enum = sa.Enum("easy", "medium", "hard", name="topic_difficulty")
content_type_enum = sa.Enum("text", "code", "example", "exercise", "quiz", name="content_type")


def upgrade() -> None:
    op.create_table(
        "admins",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("username", sa.String(), nullable=False, unique=True),
        sa.Column("email", sa.String(), nullable=False, unique=True, index=True),
        sa.Column("password_hash", sa.String(), nullable=False),
        sa.Column("role", admin_role_enum, nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=True),
    )

    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False, unique=True, index=True),
        sa.Column("password_hash", sa.String(), nullable=False),
        sa.Column("avatar", sa.String(), nullable=True),
        sa.Column("theme", theme_enum, nullable=False),
        sa.Column("language", sa.String(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=True),
    )

    op.create_table(
        "subjects",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("slug", sa.String(), nullable=False, unique=True, index=True),
        sa.Column("description", sa.String(), nullable=False),
        sa.Column("icon", sa.String(), nullable=True),
        sa.Column("category", subject_category_enum, nullable=False),
        sa.Column("level", subject_level_enum, nullable=True),
        sa.Column("order", sa.Integer(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=True),
    )

    op.create_table(
        "topics",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "subject_id",
            sa.Integer(),
            sa.ForeignKey("subjects.id", ondelete="SET NULL"),
            nullable=True,
            index=True,
        ),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("slug", sa.String(), nullable=False, index=True),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("order", sa.Integer(), nullable=False),
        sa.Column("estimated_time", sa.Integer(), nullable=True),
        sa.Column("difficulty", topic_difficulty_enum, nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.UniqueConstraint("subject_id", "slug", name="uq_topics_subject_slug"),
    )

    op.create_table(
        "topic_prerequisites",
        sa.Column("topic_id", sa.Integer(), sa.ForeignKey("topics.id", ondelete="CASCADE"), primary_key=True),
        sa.Column(
            "prerequisite_id", sa.Integer(), sa.ForeignKey("topics.id", ondelete="CASCADE"), primary_key=True
        ),
    )

    op.create_table(
        "contents",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "topic_id", sa.Integer(), sa.ForeignKey("topics.id", ondelete="CASCADE"), nullable=False, index=True
        ),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("type", content_type_enum, nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("code_language", sa.String(), nullable=True),
        sa.Column("examples", sa.JSON(), nullable=False),
        sa.Column("exercises", sa.JSON(), nullable=False),
        sa.Column("order", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=True),
    )

    op.create_table(
        "progress_entries",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("topic_id", sa.Integer(), sa.ForeignKey("topics.id", ondelete="CASCADE"), nullable=False),
        sa.Column("completed", sa.Boolean(), nullable=False),
        sa.Column("last_accessed", sa.DateTime(), nullable=False),
        sa.UniqueConstraint("user_id", "topic_id", name="uq_progress_user_topic"),
    )

    op.create_table(
        "user_bookmarks",
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
        sa.Column(
            "content_id", sa.Integer(), sa.ForeignKey("contents.id", ondelete="CASCADE"), primary_key=True
        ),
    )

    op.create_table(
        "notes",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("description", sa.String(), nullable=False),
        sa.Column("subject", sa.String(), nullable=False, index=True),
        sa.Column("file_name", sa.String(), nullable=False),
        sa.Column("file_url", sa.String(), nullable=False),
        sa.Column("file_size", sa.Integer(), nullable=False),
        sa.Column("downloads", sa.Integer(), nullable=False),
        sa.Column(
            "uploaded_by_id", sa.Integer(), sa.ForeignKey("admins.id", ondelete="SET NULL"), nullable=True
        ),
        sa.Column("created_at", sa.DateTime(), nullable=True),
    )


def downgrade() -> None:
    op.drop_table("notes")
    op.drop_table("user_bookmarks")
    op.drop_table("progress_entries")
    op.drop_table("contents")
    op.drop_table("topic_prerequisites")
    op.drop_table("topics")
    op.drop_table("subjects")
    op.drop_table("users")
    op.drop_table("admins")

    content_type_enum.drop(op.get_bind(), checkfirst=True)
    topic_difficulty_enum.drop(op.get_bind(), checkfirst=True)
    subject_level_enum.drop(op.get_bind(), checkfirst=True)
    subject_category_enum.drop(op.get_bind(), checkfirst=True)
    theme_enum.drop(op.get_bind(), checkfirst=True)
    admin_role_enum.drop(op.get_bind(), checkfirst=True)
