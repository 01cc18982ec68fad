"""Create record tables

Revision ID: 001
Revises: None
Create Date: 2026-10-17 00:00:00.000000+00:00

Creates one table per record kind. Identities are 24-char hex strings
assigned by the application; expert image names are globally unique.
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _record_columns() -> list[sa.Column]:
    return [
        sa.Column("id", sa.String(24), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "ra_dashboard_images",
        *_record_columns(),
        sa.Column("expert_id", sa.Text(), nullable=False),
        sa.Column("imageurl", sa.Text(), nullable=False),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_ra_dashboard_images"),
    )
    op.create_index(
        "ix_ra_dashboard_images_expert_id", "ra_dashboard_images", ["expert_id"]
    )

    op.create_table(
        "expert_images",
        *_record_columns(),
        sa.Column("expert_id", sa.Text(), nullable=False),
        sa.Column("image_name", sa.Text(), nullable=False),
        sa.Column("web_image_url", sa.Text(), nullable=False),
        sa.Column("mobile_image_url", sa.Text(), nullable=False),
        sa.Column("property", sa.String(20), nullable=False),
        sa.Column("subheading", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.PrimaryKeyConstraint("id", name="pk_expert_images"),
        sa.UniqueConstraint("image_name", name="uq_expert_images_image_name"),
    )
    op.create_index("ix_expert_images_expert_id", "expert_images", ["expert_id"])

    op.create_table(
        "admin_posters",
        *_record_columns(),
        sa.Column("image1url", sa.Text(), nullable=False),
        sa.Column("image2url", sa.Text(), nullable=False),
        sa.Column("type", sa.Integer(), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_admin_posters"),
    )

    op.create_table(
        "banners",
        *_record_columns(),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("imageurl", sa.Text(), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_banners"),
    )

    op.create_table(
        "feedback",
        *_record_columns(),
        sa.Column("star", sa.Integer(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("user_id", sa.Text(), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("mobile_number", sa.String(10), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_feedback"),
    )
    op.create_index("ix_feedback_user_id", "feedback", ["user_id"])

    op.create_table(
        "message_templates",
        *_record_columns(),
        sa.Column("raid", sa.Text(), nullable=True),
        sa.Column("templatename", sa.Text(), nullable=True),
        sa.Column("headingcontent", sa.Text(), nullable=True),
        sa.Column("footercontent", sa.Text(), nullable=True),
        sa.Column("type", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_message_templates"),
    )
    op.create_index("ix_message_templates_raid", "message_templates", ["raid"])


def downgrade() -> None:
    op.drop_table("message_templates")
    op.drop_table("feedback")
    op.drop_table("banners")
    op.drop_table("admin_posters")
    op.drop_table("expert_images")
    op.drop_table("ra_dashboard_images")
