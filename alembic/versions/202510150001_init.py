"""init messages table"""
from alembic import op
import sqlalchemy as sa

# Revision identifiers
revision = "202510150001"
down_revision = None
branch_labels = None
depends_on = None

def upgrade() -> None:
    op.create_table(
        "messages",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("sender_id", sa.Integer, nullable=False),
        sa.Column("recipient_id", sa.Integer, nullable=False),
        sa.Column("subject", sa.Text, nullable=False),
        sa.Column("body", sa.Text, nullable=False),
        sa.Column("sent_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("deleted_by_sender", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("deleted_by_recipient", sa.Boolean(), nullable=False, server_default=sa.text("false")),
    )

    op.create_index("ix_messages_sent_folder", "messages", ["sender_id", "deleted_by_sender", "sent_at"])
    op.create_index("ix_messages_received_folder", "messages", ["recipient_id", "deleted_by_recipient", "sent_at"])

def downgrade() -> None:
    op.drop_index("ix_messages_received_folder", table_name="messages")
    op.drop_index("ix_messages_sent_folder", table_name="messages")
    op.drop_table("messages")
