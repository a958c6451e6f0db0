"""initial schema: cars, comments, bookings, regions, incomes

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-19 09:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "0001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "cars",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("brand", sa.String(100), nullable=False),
        sa.Column("category", sa.String(20), nullable=False),
        sa.Column("pricePerDay", sa.Numeric(12, 2), nullable=False),
        sa.Column("imageUrl", sa.String(500), nullable=True),
        sa.Column("gallery", sa.JSON(), nullable=False),
        sa.Column("gearBox", sa.String(50), nullable=False),
        sa.Column("fuel", sa.String(50), nullable=False),
        sa.Column("doors", sa.Integer(), nullable=False),
        sa.Column("seats", sa.Integer(), nullable=False),
        sa.Column("airConditioner", sa.Boolean(), nullable=False),
        sa.Column("distance", sa.Integer(), nullable=False),
        sa.Column("equipment", sa.JSON(), nullable=False),
        sa.Column("available", sa.Boolean(), nullable=False),
        sa.Column("createdAt", sa.TIMESTAMP(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_cars_id", "cars", ["id"])
    op.create_index("ix_cars_category", "cars", ["category"])

    op.create_table(
        "comments",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("carId", sa.Integer(), sa.ForeignKey("cars.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("createdAt", sa.TIMESTAMP(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_comments_id", "comments", ["id"])
    op.create_index("ix_comments_carId", "comments", ["carId"])

    op.create_table(
        "bookings",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("carType", sa.Integer(), sa.ForeignKey("cars.id", ondelete="SET NULL"), nullable=True),
        sa.Column("carName", sa.String(200), nullable=False),
        sa.Column("placeOfRental", sa.String(255), nullable=False),
        sa.Column("placeOfReturn", sa.String(255), nullable=False),
        sa.Column("rentalDate", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("returnDate", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("phoneNumber", sa.String(30), nullable=False),
        sa.Column("createdAt", sa.TIMESTAMP(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_bookings_id", "bookings", ["id"])
    op.create_index("ix_bookings_carType", "bookings", ["carType"])

    op.create_table(
        "regions",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False, unique=True),
    )
    op.create_index("ix_regions_id", "regions", ["id"])

    op.create_table(
        "incomes",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("month", sa.Integer(), nullable=False),
        sa.Column("day", sa.Integer(), nullable=False),
        sa.Column("totalIncome", sa.Numeric(14, 2), nullable=False),
        sa.Column("createdAt", sa.TIMESTAMP(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint("year", "month", "day", name="uq_income_date"),
        sa.CheckConstraint("month BETWEEN 1 AND 12", name="ck_income_month"),
        sa.CheckConstraint("day BETWEEN 1 AND 31", name="ck_income_day"),
    )
    op.create_index("ix_incomes_id", "incomes", ["id"])
    op.create_index("ix_incomes_year", "incomes", ["year"])


def downgrade() -> None:
    op.drop_table("incomes")
    op.drop_table("regions")
    op.drop_table("bookings")
    op.drop_table("comments")
    op.drop_table("cars")
