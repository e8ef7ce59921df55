"""create voicecommand table

Revision ID: 4f2a9c1d7e60
Revises:
Create Date: 2026-10-18 09:12:44.318027

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "4f2a9c1d7e60"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "voicecommand",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("command_name", sa.String(), nullable=False),
        sa.Column("has_parameter", sa.Boolean(), nullable=False),
        sa.Column("parameter_name", sa.String(), nullable=True),
        sa.Column("workflow_id", sa.String(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_voicecommand")),
    )
    op.create_index(op.f("ix_voicecommand_user_id"), "voicecommand", ["user_id"], unique=False)
    op.create_index(op.f("ix_voicecommand_workflow_id"), "voicecommand", ["workflow_id"], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f("ix_voicecommand_workflow_id"), table_name="voicecommand")
    op.drop_index(op.f("ix_voicecommand_user_id"), table_name="voicecommand")
    op.drop_table("voicecommand")
