"""Create campus data tables

Revision ID: 001
Revises: None
Create Date: 2024-01-15 00:00:00.000000+00:00

What:  Creates the users table and one table per campus resource.
How:   Surrogate keys are BIGINT identity columns; dining commons and
       organizations use their client-chosen codes as primary keys.

Rollback: downgrade() drops every table (destructive, all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _surrogate_id() -> sa.Column:
    return sa.Column("id", sa.BigInteger(), sa.Identity(), primary_key=True, nullable=False)


def upgrade() -> None:
    op.create_table(
        "users",
        _surrogate_id(),
        sa.Column("email", sa.String(255), nullable=False, comment="Lookup key from the identity provider"),
        sa.Column("google_sub", sa.String(255), nullable=True),
        sa.Column("picture_url", sa.String(2048), nullable=True),
        sa.Column("full_name", sa.String(255), nullable=True),
        sa.Column("given_name", sa.String(255), nullable=True),
        sa.Column("family_name", sa.String(255), nullable=True),
        sa.Column("email_verified", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("locale", sa.String(32), nullable=True),
        sa.Column("hosted_domain", sa.String(255), nullable=True),
        sa.Column("admin", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )

    op.create_table(
        "ucsbdates",
        _surrogate_id(),
        sa.Column("quarter_yyyyq", sa.String(5), nullable=False, comment="Quarter code YYYYQ, e.g. 20221"),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column(
            "local_date_time",
            sa.DateTime(timezone=False),
            nullable=False,
            comment="Date and time of the event (campus local time)",
        ),
    )
    op.create_index("idx_ucsbdates_quarter_yyyyq", "ucsbdates", ["quarter_yyyyq"])

    op.create_table(
        "ucsbdiningcommons",
        sa.Column("code", sa.String(64), primary_key=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("has_sack_meal", sa.Boolean(), nullable=False),
        sa.Column("has_take_out_meal", sa.Boolean(), nullable=False),
        sa.Column("has_dining_cam", sa.Boolean(), nullable=False),
        sa.Column("latitude", sa.Float(), nullable=False),
        sa.Column("longitude", sa.Float(), nullable=False),
    )

    op.create_table(
        "ucsbdiningcommonsmenu",
        _surrogate_id(),
        sa.Column("dining_commons_code", sa.String(64), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("station", sa.String(255), nullable=False),
    )

    op.create_table(
        "menuitemreviews",
        _surrogate_id(),
        sa.Column("item_id", sa.BigInteger(), nullable=False),
        sa.Column("reviewer_email", sa.String(255), nullable=False),
        sa.Column("stars", sa.Integer(), nullable=False),
        sa.Column("date_reviewed", sa.DateTime(timezone=False), nullable=False),
        sa.Column("comments", sa.Text(), nullable=False),
    )

    op.create_table(
        "recommendationrequests",
        _surrogate_id(),
        sa.Column("requester_email", sa.String(255), nullable=False),
        sa.Column("professor_email", sa.String(255), nullable=False),
        sa.Column("explanation", sa.Text(), nullable=False),
        sa.Column("date_requested", sa.DateTime(timezone=False), nullable=False),
        sa.Column("date_needed", sa.DateTime(timezone=False), nullable=False),
        sa.Column("done", sa.Boolean(), nullable=False, server_default=sa.false()),
    )

    op.create_table(
        "ucsborganizations",
        sa.Column("org_code", sa.String(64), primary_key=True, nullable=False),
        sa.Column("org_translation_short", sa.String(255), nullable=False),
        sa.Column("org_translation", sa.String(255), nullable=False),
        sa.Column("inactive", sa.Boolean(), nullable=False, server_default=sa.false()),
    )

    op.create_table(
        "helprequests",
        _surrogate_id(),
        sa.Column("requester_email", sa.String(255), nullable=False),
        sa.Column("team_id", sa.String(64), nullable=False),
        sa.Column("table_or_breakout_room", sa.String(64), nullable=False),
        sa.Column("request_time", sa.DateTime(timezone=False), nullable=False),
        sa.Column("explanation", sa.Text(), nullable=False),
        sa.Column("solved", sa.Boolean(), nullable=False, server_default=sa.false()),
    )

    op.create_table(
        "articles",
        _surrogate_id(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("url", sa.String(2048), nullable=False),
        sa.Column("explanation", sa.Text(), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("date_added", sa.DateTime(timezone=False), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("articles")
    op.drop_table("helprequests")
    op.drop_table("ucsborganizations")
    op.drop_table("recommendationrequests")
    op.drop_table("menuitemreviews")
    op.drop_table("ucsbdiningcommonsmenu")
    op.drop_table("ucsbdiningcommons")
    op.drop_index("idx_ucsbdates_quarter_yyyyq", table_name="ucsbdates")
    op.drop_table("ucsbdates")
    op.drop_table("users")
