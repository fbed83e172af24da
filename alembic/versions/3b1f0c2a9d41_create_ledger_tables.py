"""create_ledger_tables

Revision ID: 3b1f0c2a9d41
Revises: 
Create Date: 2026-10-18 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '3b1f0c2a9d41'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

user_role_enum = sa.Enum('NONE', 'PATIENT', 'DOCTOR', 'ADMIN', name='userrole')
audit_action_enum = sa.Enum('CREATE', 'VIEW', 'GRANT_ACCESS', 'REVOKE_ACCESS', name='auditaction')

def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('address', sa.String(42), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('role', user_role_enum, nullable=False),
        sa.Column('is_registered', sa.Boolean(), nullable=False),
        sa.Column('registered_at', sa.Integer(), nullable=False),
    )
    op.create_index('ix_users_address', 'users', ['address'])

    op.create_table(
        'medical_records',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column('owner', sa.String(42), nullable=False),
        sa.Column('payload_reference', sa.String(), nullable=False),
        sa.Column('record_type', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('created_at', sa.Integer(), nullable=False),
    )
    op.create_index('ix_medical_records_owner', 'medical_records', ['owner'])

    op.create_table(
        'access_grants',
        sa.Column('patient', sa.String(42), primary_key=True),
        sa.Column('doctor', sa.String(42), primary_key=True),
        sa.Column('granted_at', sa.Integer(), nullable=False),
        sa.Column('expires_at', sa.Integer(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('purpose', sa.String(), nullable=False),
    )
    op.create_index('ix_access_grants_doctor', 'access_grants', ['doctor'])

    op.create_table(
        'audit_entries',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('actor', sa.String(42), nullable=False),
        sa.Column('record_id', sa.Integer(), nullable=False),
        sa.Column('timestamp', sa.Integer(), nullable=False),
        sa.Column('action', audit_action_enum, nullable=False),
    )
    op.create_index('ix_audit_entries_actor', 'audit_entries', ['actor'])

    op.create_table(
        'system_state',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('admin_address', sa.String(42), nullable=True),
        sa.Column('record_counter', sa.Integer(), nullable=False),
        sa.Column('emergency_mode', sa.Boolean(), nullable=False),
    )

def downgrade() -> None:
    op.drop_table('system_state')
    op.drop_index('ix_audit_entries_actor', table_name='audit_entries')
    op.drop_table('audit_entries')
    op.drop_index('ix_access_grants_doctor', table_name='access_grants')
    op.drop_table('access_grants')
    op.drop_index('ix_medical_records_owner', table_name='medical_records')
    op.drop_table('medical_records')
    op.drop_index('ix_users_address', table_name='users')
    op.drop_table('users')
    
    # Drop enum types (no-op on SQLite)
    audit_action_enum.drop(op.get_bind(), checkfirst=True)
    user_role_enum.drop(op.get_bind(), checkfirst=True)
