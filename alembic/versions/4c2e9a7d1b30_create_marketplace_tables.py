"""create marketplace tables

Revision ID: 4c2e9a7d1b30
Revises:
Create Date: 2026-01-08 10:12:44.512301

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
import sqlmodel

# revision identifiers, used by Alembic.
revision: str = '4c2e9a7d1b30'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

user_role = sa.Enum('COMPANY', 'CONSULTANT', 'ADMIN', name='userrole')
inquiry_mode = sa.Enum('REMOTE', 'HYBRID', 'ONSITE', name='inquirymode')
inquiry_status = sa.Enum('SENT', 'ACCEPTED', 'DECLINED', 'CLOSED', name='inquirystatus')


def upgrade() -> None:
    op.create_table('auth_identities',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('email', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('hashed_password', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_auth_identities_email'), 'auth_identities', ['email'], unique=True)
    op.create_index(op.f('ix_auth_identities_id'), 'auth_identities', ['id'], unique=False)

    op.create_table('users',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('role', user_role, nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('email', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('password_hash', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)
    op.create_index(op.f('ix_users_id'), 'users', ['id'], unique=False)
    op.create_index(op.f('ix_users_name'), 'users', ['name'], unique=False)
    op.create_index(op.f('ix_users_role'), 'users', ['role'], unique=False)

    op.create_table('consultant_profiles',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('headline', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('bio', sa.Text(), nullable=True),
        sa.Column('standards', sa.JSON(), nullable=False),
        sa.Column('industries', sa.JSON(), nullable=False),
        sa.Column('certifications', sa.JSON(), nullable=False),
        sa.Column('regions', sa.JSON(), nullable=False),
        sa.Column('languages', sa.JSON(), nullable=False),
        sa.Column('availability', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('verified', sa.Boolean(), nullable=False),
        sa.Column('profile_picture_url', sqlmodel.sql.sqltypes.AutoString(length=500), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_consultant_profiles_id'), 'consultant_profiles', ['id'], unique=False)
    op.create_index(op.f('ix_consultant_profiles_user_id'), 'consultant_profiles', ['user_id'], unique=True)
    op.create_index(op.f('ix_consultant_profiles_verified'), 'consultant_profiles', ['verified'], unique=False)

    op.create_table('inquiries',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('company_id', sa.Uuid(), nullable=False),
        sa.Column('consultant_id', sa.Uuid(), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('timing', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('mode', inquiry_mode, nullable=False),
        sa.Column('status', inquiry_status, nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['company_id'], ['users.id'], ),
        sa.ForeignKeyConstraint(['consultant_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_inquiries_id'), 'inquiries', ['id'], unique=False)
    op.create_index(op.f('ix_inquiries_company_id'), 'inquiries', ['company_id'], unique=False)
    op.create_index(op.f('ix_inquiries_consultant_id'), 'inquiries', ['consultant_id'], unique=False)
    op.create_index(op.f('ix_inquiries_status'), 'inquiries', ['status'], unique=False)
    op.create_index(op.f('ix_inquiries_created_at'), 'inquiries', ['created_at'], unique=False)


def downgrade() -> None:
    op.drop_table('inquiries')
    op.drop_table('consultant_profiles')
    op.drop_table('users')
    op.drop_table('auth_identities')

    bind = op.get_bind()
    inquiry_status.drop(bind, checkfirst=True)
    inquiry_mode.drop(bind, checkfirst=True)
    user_role.drop(bind, checkfirst=True)
