"""Create DevEvents and DevEventSpeakers

Revision ID: 0001_create_dev_events
Revises:
Create Date: 2024-01-01

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "0001_create_dev_events"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "DevEvents",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("is_deleted", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "DevEventSpeakers",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("dev_event_id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("talk_title", sa.Text(), nullable=False),
        sa.Column("talk_description", sa.Text(), nullable=False),
        sa.Column("linked_in_profile", sa.Text(), nullable=False),
        sa.ForeignKeyConstraint(["dev_event_id"], ["DevEvents.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_DevEventSpeakers_dev_event_id",
        "DevEventSpeakers",
        ["dev_event_id"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index("ix_DevEventSpeakers_dev_event_id", table_name="DevEventSpeakers")
    op.drop_table("DevEventSpeakers")
    op.drop_table("DevEvents")
