"""initial_schema

Revision ID: 3f2a9c1d7e45
Revises:
Create Date: 2026-10-18 09:12:41.318204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '3f2a9c1d7e45'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def audit_columns():
    """id plus the audit / soft delete columns every entity table carries"""
    return [
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('action_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('action_by', sa.String(length=100), nullable=True),
        sa.Column('action', sa.String(length=20), nullable=True),
        sa.Column('is_deleted', sa.Boolean(), nullable=True),
    ]


def upgrade() -> None:
    """Upgrade schema."""

    # ========== Lookups ==========
    op.create_table('commands',
        *audit_columns(),
        sa.Column('name', sa.String(length=150), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_table('bases',
        *audit_columns(),
        sa.Column('name', sa.String(length=150), nullable=True),
        sa.Column('cmd_id', sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_bases_cmd_id'), 'bases', ['cmd_id'], unique=False)
    op.create_table('classes',
        *audit_columns(),
        sa.Column('name', sa.String(length=150), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_table('roles',
        *audit_columns(),
        sa.Column('name', sa.String(length=100), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_table('units',
        *audit_columns(),
        sa.Column('name', sa.String(length=150), nullable=True),
        sa.Column('base_id', sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_units_base_id'), 'units', ['base_id'], unique=False)
    op.create_table('natures',
        *audit_columns(),
        sa.Column('name', sa.String(length=150), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('status', sa.SmallInteger(), nullable=True),
        sa.Column('rental_val', sa.Numeric(precision=18, scale=2), nullable=True),
        sa.Column('annual_rent', sa.Numeric(precision=18, scale=2), nullable=True),
        sa.Column('govt_share', sa.SmallInteger(), nullable=True),
        sa.Column('paf_share', sa.SmallInteger(), nullable=True),
        sa.Column('prop_number', sa.String(length=50), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )

    # ========== Users ==========
    op.create_table('users',
        *audit_columns(),
        sa.Column('username', sa.String(length=100), nullable=False),
        sa.Column('pak_no', sa.String(length=50), nullable=True),
        sa.Column('name', sa.String(length=150), nullable=True),
        sa.Column('password', sa.LargeBinary(), nullable=True),
        sa.Column('password_salt', sa.LargeBinary(), nullable=True),
        sa.Column('password_iterations', sa.Integer(), nullable=True),
        sa.Column('password_attempts', sa.Integer(), nullable=False),
        sa.Column('refresh_token', sa.String(length=128), nullable=True),
        sa.Column('refresh_token_expires_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('rank', sa.String(length=50), nullable=True),
        sa.Column('category', sa.String(length=50), nullable=True),
        sa.Column('unit_id', sa.Integer(), nullable=True),
        sa.Column('base_id', sa.Integer(), nullable=True),
        sa.Column('cmd_id', sa.Integer(), nullable=True),
        sa.Column('status', sa.SmallInteger(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_users_username'), 'users', ['username'], unique=True)
    op.create_index(op.f('ix_users_refresh_token'), 'users', ['refresh_token'], unique=False)

    # ========== Properties ==========
    op.create_table('rental_properties',
        *audit_columns(),
        sa.Column('cmd_id', sa.Integer(), nullable=False),
        sa.Column('base_id', sa.Integer(), nullable=False),
        sa.Column('class_id', sa.Integer(), nullable=False),
        sa.Column('p_id', sa.String(length=100), nullable=True),
        sa.Column('uom', sa.String(length=50), nullable=True),
        sa.Column('area', sa.Numeric(precision=18, scale=2), nullable=True),
        sa.Column('location', sa.String(length=255), nullable=True),
        sa.Column('remarks', sa.Text(), nullable=True),
        sa.Column('status', sa.Boolean(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_rental_properties_cmd_id', 'rental_properties', ['cmd_id'], unique=False)
    op.create_index('ix_rental_properties_base_id', 'rental_properties', ['base_id'], unique=False)
    op.create_index('ix_rental_properties_class_id', 'rental_properties', ['class_id'], unique=False)

    op.create_table('property_groups',
        *audit_columns(),
        sa.Column('cmd_id', sa.Integer(), nullable=False),
        sa.Column('base_id', sa.Integer(), nullable=False),
        sa.Column('class_id', sa.Integer(), nullable=False),
        sa.Column('g_id', sa.String(length=100), nullable=True),
        sa.Column('uom', sa.String(length=50), nullable=True),
        sa.Column('area', sa.Numeric(precision=18, scale=2), nullable=True),
        sa.Column('location', sa.String(length=255), nullable=True),
        sa.Column('remarks', sa.Text(), nullable=True),
        sa.Column('status', sa.Boolean(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_property_groups_cmd_id', 'property_groups', ['cmd_id'], unique=False)
    op.create_index('ix_property_groups_base_id', 'property_groups', ['base_id'], unique=False)
    op.create_index('ix_property_groups_class_id', 'property_groups', ['class_id'], unique=False)

    op.create_table('property_group_linkings',
        *audit_columns(),
        sa.Column('grp_id', sa.Integer(), nullable=False),
        sa.Column('prop_id', sa.Integer(), nullable=False),
        sa.Column('area', sa.Numeric(precision=18, scale=2), nullable=True),
        sa.Column('status', sa.Boolean(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_property_group_linkings_grp_id', 'property_group_linkings', ['grp_id'], unique=False)

    op.create_table('revenue_rates',
        *audit_columns(),
        sa.Column('property_id', sa.Integer(), nullable=False),
        sa.Column('applicable_date', sa.DateTime(), nullable=True),
        sa.Column('rate', sa.Numeric(precision=18, scale=2), nullable=True),
        sa.Column('attachments', sa.Text(), nullable=True),
        sa.Column('status', sa.Boolean(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_revenue_rates_property_id'), 'revenue_rates', ['property_id'], unique=False)

    # ========== Contracts and tenants ==========
    op.create_table('contracts',
        *audit_columns(),
        sa.Column('contract_no', sa.String(length=100), nullable=False),
        sa.Column('cmd_id', sa.Integer(), nullable=False),
        sa.Column('base_id', sa.Integer(), nullable=False),
        sa.Column('class_id', sa.Integer(), nullable=False),
        sa.Column('grp_id', sa.Integer(), nullable=False),
        sa.Column('tenant_no', sa.String(length=100), nullable=False),
        sa.Column('business_name', sa.String(length=255), nullable=False),
        sa.Column('nature_of_business', sa.String(length=255), nullable=False),
        sa.Column('contract_start_date', sa.DateTime(), nullable=True),
        sa.Column('contract_end_date', sa.DateTime(), nullable=True),
        sa.Column('commercial_operation_date', sa.DateTime(), nullable=True),
        sa.Column('initial_rent_pm', sa.Numeric(precision=18, scale=2), nullable=False),
        sa.Column('initial_rent_pa', sa.Numeric(precision=18, scale=2), nullable=False),
        sa.Column('payment_term_months', sa.Integer(), nullable=False),
        sa.Column('increase_rate_percent', sa.Numeric(precision=9, scale=2), nullable=True),
        sa.Column('increase_interval_months', sa.Integer(), nullable=True),
        sa.Column('sd_rate_months', sa.Integer(), nullable=True),
        sa.Column('security_deposit_amount', sa.Numeric(precision=18, scale=2), nullable=True),
        sa.Column('rental_value', sa.Numeric(precision=18, scale=2), nullable=True),
        sa.Column('govt_share_condition', sa.String(length=255), nullable=False),
        sa.Column('paf_share', sa.Numeric(precision=9, scale=2), nullable=True),
        sa.Column('status', sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table('tenants',
        *audit_columns(),
        sa.Column('tenant_no', sa.String(length=100), nullable=False),
        sa.Column('owner_name', sa.String(length=255), nullable=False),
        sa.Column('prefix', sa.String(length=20), nullable=True),
        sa.Column('business_name', sa.String(length=255), nullable=True),
        sa.Column('address', sa.Text(), nullable=True),
        sa.Column('province', sa.String(length=100), nullable=True),
        sa.Column('city', sa.String(length=100), nullable=True),
        sa.Column('telephone_no', sa.String(length=50), nullable=True),
        sa.Column('cell_no', sa.String(length=50), nullable=True),
        sa.Column('ntn_no', sa.String(length=50), nullable=True),
        sa.Column('gst_no', sa.String(length=50), nullable=True),
        sa.Column('status', sa.Boolean(), nullable=False),
        sa.Column('remarks', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_tenants_tenant_no'), 'tenants', ['tenant_no'], unique=False)

    # ========== Files and notes ==========
    op.create_table('file_uploads',
        *audit_columns(),
        sa.Column('form_id', sa.Integer(), nullable=False),
        sa.Column('uploaded_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('path', sa.String(length=500), nullable=True),
        sa.Column('form_name', sa.String(length=150), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_file_uploads_form', 'file_uploads', ['form_id', 'form_name'], unique=False)

    op.create_table('user_notes',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.String(length=100), nullable=True),
        sa.Column('content', sa.Text(), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_user_notes_user_id'), 'user_notes', ['user_id'], unique=False)
    op.create_index(op.f('ix_user_notes_updated_at'), 'user_notes', ['updated_at'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('user_notes')
    op.drop_table('file_uploads')
    op.drop_table('tenants')
    op.drop_table('contracts')
    op.drop_table('revenue_rates')
    op.drop_table('property_group_linkings')
    op.drop_table('property_groups')
    op.drop_table('rental_properties')
    op.drop_table('users')
    op.drop_table('natures')
    op.drop_table('units')
    op.drop_table('roles')
    op.drop_table('classes')
    op.drop_table('bases')
    op.drop_table('commands')
