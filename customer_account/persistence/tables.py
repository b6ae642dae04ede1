"""SQLAlchemy table definitions.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import Column, Index, MetaData, Table, Text, UniqueConstraint
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# CODE VERIFIERS TABLE (pending authorizations, single use)
# ============================================================================
code_verifiers_table = Table(
    "code_verifiers",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("state", Text, nullable=False),
    Column("verifier", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("state", name="uq_code_verifiers_state"),
)

# ============================================================================
# CUSTOMER ACCESS TOKENS TABLE
# ============================================================================
customer_access_tokens_table = Table(
    "customer_access_tokens",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("shop", Text, nullable=False),
    Column("access_token", Text, nullable=False),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_customer_access_tokens_shop", customer_access_tokens_table.c.shop)
