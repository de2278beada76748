"""initial schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-19 00:00:00

"""
from alembic import op
import sqlalchemy as sa


revision = "0001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    ]


def _directory_table(name: str, *extra: sa.Column) -> None:
    op.create_table(
        name,
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        *extra,
        sa.Column("mobile", sa.String(), nullable=True),
        sa.Column("address", sa.String(), nullable=True),
        sa.Column("location", sa.String(), nullable=True),
        sa.Column("image", sa.String(), nullable=True),
        *_timestamps(),
    )
    op.create_index(f"ix_{name}_id", name, ["id"])
    op.create_index(f"ix_{name}_name", name, ["name"])


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("mobile", sa.String(), nullable=False),
        sa.Column("password", sa.String(), nullable=False),
        sa.Column("location", sa.String(), nullable=True),
        sa.Column("address", sa.String(), nullable=True),
        sa.Column("verify_code", sa.String(), nullable=True),
        sa.Column("is_verified", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("role", sa.String(), nullable=False, server_default="USER"),
        *_timestamps(),
    )
    op.create_index("ix_users_id", "users", ["id"])
    op.create_index("ix_users_mobile", "users", ["mobile"], unique=True)

    op.create_table(
        "animals",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("type", sa.String(), nullable=False),
        sa.Column("gender", sa.String(), nullable=False),
        sa.Column("age", sa.Integer(), nullable=True),
        sa.Column("name", sa.String(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_animals_id", "animals", ["id"])
    op.create_index("ix_animals_user_id", "animals", ["user_id"])

    op.create_table(
        "animal_images",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("animal_id", sa.Integer(), sa.ForeignKey("animals.id", ondelete="CASCADE"), nullable=False),
        sa.Column("image", sa.String(), nullable=False),
        sa.Column("is_cover", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_animal_images_id", "animal_images", ["id"])
    op.create_index("ix_animal_images_animal_id", "animal_images", ["animal_id"])

    op.create_table(
        "posts",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("animal_id", sa.Integer(), sa.ForeignKey("animals.id", ondelete="CASCADE"), nullable=False),
        sa.Column("post_type", sa.String(), nullable=False),
        sa.Column("location", sa.String(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("image", sa.String(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_posts_id", "posts", ["id"])
    op.create_index("ix_posts_user_id", "posts", ["user_id"])
    op.create_index("ix_posts_animal_id", "posts", ["animal_id"])
    op.create_index("ix_posts_post_type", "posts", ["post_type"])

    op.create_table(
        "medical_cases",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("animal_id", sa.Integer(), sa.ForeignKey("animals.id", ondelete="SET NULL"), nullable=True),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("image", sa.String(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_medical_cases_id", "medical_cases", ["id"])
    op.create_index("ix_medical_cases_user_id", "medical_cases", ["user_id"])
    op.create_index("ix_medical_cases_animal_id", "medical_cases", ["animal_id"])

    _directory_table("veterinaries", sa.Column("specialty", sa.String(), nullable=True))
    _directory_table("pet_stores")
    _directory_table("charities")

    op.create_table(
        "advertisements",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("image", sa.String(), nullable=False),
        sa.Column("link", sa.String(), nullable=True),
        sa.Column("start_date", sa.DateTime(), nullable=False),
        sa.Column("end_date", sa.DateTime(), nullable=False),
        sa.Column("priority", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("clicks", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("views", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
    )
    op.create_index("ix_advertisements_id", "advertisements", ["id"])
    op.create_index("ix_advertisements_end_date", "advertisements", ["end_date"])
    op.create_index("ix_advertisements_is_active", "advertisements", ["is_active"])


def downgrade() -> None:
    for table in (
        "advertisements",
        "charities",
        "pet_stores",
        "veterinaries",
        "medical_cases",
        "posts",
        "animal_images",
        "animals",
        "users",
    ):
        op.drop_table(table)
