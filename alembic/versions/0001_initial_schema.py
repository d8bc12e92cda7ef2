"""initial schema

Revision ID: 0001
Revises:
Create Date: 2026-10-17

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def _audit_columns():
    return [
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
        sa.Column("deleted_at", sa.DateTime(), nullable=True),
    ]


def _audit_indexes(table: str):
    op.create_index(f"ix_{table}_id", table, ["id"])
    op.create_index(f"ix_{table}_deleted_at", table, ["deleted_at"])


def upgrade() -> None:
    op.create_table(
        "categories",
        *_audit_columns(),
        sa.Column("name", sa.String(255), nullable=False),
    )
    _audit_indexes("categories")

    op.create_table(
        "products",
        *_audit_columns(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("category_id", sa.Integer(), sa.ForeignKey("categories.id"), nullable=False),
    )
    _audit_indexes("products")
    op.create_index("ix_products_category_id", "products", ["category_id"])

    op.create_table(
        "carts",
        *_audit_columns(),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("cart_value", sa.Numeric(10, 2), nullable=False),
    )
    _audit_indexes("carts")
    op.create_index("ix_carts_user_id", "carts", ["user_id"])

    op.create_table(
        "payments",
        *_audit_columns(),
        sa.Column("customer_name", sa.String(255), nullable=False),
        sa.Column("customer_email", sa.String(255), nullable=False),
        sa.Column("total", sa.Numeric(12, 2), nullable=False),
    )
    _audit_indexes("payments")

    op.create_table(
        "payment_items",
        *_audit_columns(),
        sa.Column("payment_id", sa.Integer(), sa.ForeignKey("payments.id"), nullable=False),
        sa.Column("product_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("qty", sa.Integer(), nullable=False),
    )
    _audit_indexes("payment_items")
    op.create_index("ix_payment_items_payment_id", "payment_items", ["payment_id"])


def downgrade() -> None:
    op.drop_table("payment_items")
    op.drop_table("payments")
    op.drop_table("carts")
    op.drop_table("products")
    op.drop_table("categories")
