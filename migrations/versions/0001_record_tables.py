"""Create the ODFI, RDFI, ledger and EIP record tables.

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""

import sqlalchemy as sa
from alembic import op

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None

SIDES = ("ODFI", "RDFI")


def upgrade() -> None:
    op.create_table(
        "odfi_entries",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("trace_number", sa.String(32), nullable=False),
        sa.Column("company_name", sa.String(255), nullable=False),
        sa.Column("sec_code", sa.String(3), nullable=False),
        sa.Column("amount_cents", sa.BigInteger(), nullable=False),
        sa.Column(
            "status",
            sa.Enum("PENDING", "SENT", "CANCELLED",
                    name="odfi_status_enum", create_constraint=True),
            nullable=False,
        ),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_odfi_entries_trace_number", "odfi_entries", ["trace_number"])
    op.create_index("ix_odfi_entries_status", "odfi_entries", ["status"])

    op.create_table(
        "rdfi_entries",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("trace_number", sa.String(32), nullable=False),
        sa.Column("receiver_name", sa.String(255), nullable=False),
        sa.Column("amount_cents", sa.BigInteger(), nullable=False),
        sa.Column(
            "status",
            sa.Enum("RECEIVED", "POSTED", "RETURNED",
                    name="rdfi_status_enum", create_constraint=True),
            nullable=False,
        ),
        sa.Column("return_reason", sa.String(255), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_rdfi_entries_trace_number", "rdfi_entries", ["trace_number"])
    op.create_index("ix_rdfi_entries_status", "rdfi_entries", ["status"])

    op.create_table(
        "ledger_entries",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("ach_side", sa.Enum(*SIDES, name="ach_side_enum"), nullable=False),
        sa.Column("trace_number", sa.String(32), nullable=False),
        sa.Column("amount_cents", sa.BigInteger(), nullable=False),
        sa.Column(
            "direction",
            sa.Enum("DEBIT", "CREDIT", name="direction_enum"),
            nullable=False,
        ),
        sa.Column("description", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_ledger_entries_ach_side", "ledger_entries", ["ach_side"])
    op.create_index("ix_ledger_entries_trace_number", "ledger_entries", ["trace_number"])
    op.create_index("ix_ledger_entries_direction", "ledger_entries", ["direction"])

    op.create_table(
        "eip_cases",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("side", sa.Enum(*SIDES, name="case_side_enum"), nullable=False),
        sa.Column("trace_number", sa.String(32), nullable=False),
        sa.Column(
            "status",
            sa.Enum("OPEN", "IN_PROGRESS", "RESOLVED",
                    name="case_status_enum", create_constraint=True),
            nullable=False,
        ),
        sa.Column(
            "type",
            sa.Enum("RETURN_REVIEW", "NOC_REVIEW", "CUSTOMER_DISPUTE",
                    name="case_type_enum", create_constraint=True),
            nullable=False,
        ),
        sa.Column("notes", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_eip_cases_side", "eip_cases", ["side"])
    op.create_index("ix_eip_cases_status", "eip_cases", ["status"])
    op.create_index("ix_eip_cases_trace_number", "eip_cases", ["trace_number"])
    op.create_index("ix_eip_cases_type", "eip_cases", ["type"])


def downgrade() -> None:
    op.drop_table("eip_cases")
    op.drop_table("ledger_entries")
    op.drop_table("rdfi_entries")
    op.drop_table("odfi_entries")
