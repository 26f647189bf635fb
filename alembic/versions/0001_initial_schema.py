"""initial_schema

Creates accounts, job_applications and interview_rounds.

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_initial_schema'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the account, application and interview round tables."""
    op.create_table(
        'accounts',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('hashed_password', sa.String(), nullable=False),
        sa.Column('role', sa.Enum('USER', name='role'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_accounts_id', 'accounts', ['id'])
    op.create_index('ix_accounts_email', 'accounts', ['email'], unique=True)

    op.create_table(
        'job_applications',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('owner_id', sa.Integer(), nullable=False),
        sa.Column('company_name', sa.String(length=150), nullable=False),
        sa.Column('job_role', sa.String(length=150), nullable=False),
        sa.Column(
            'status',
            sa.Enum('APPLIED', 'INTERVIEWING', 'OFFERED', 'REJECTED', name='applicationstatus'),
            nullable=False
        ),
        sa.Column('applied_date', sa.Date(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['owner_id'], ['accounts.id'], ondelete='CASCADE'),
    )
    op.create_index('ix_job_applications_id', 'job_applications', ['id'])
    op.create_index('ix_job_applications_owner_id', 'job_applications', ['owner_id'])
    op.create_index('ix_job_applications_status', 'job_applications', ['status'])
    op.create_index('ix_job_applications_owner_applied', 'job_applications', ['owner_id', 'applied_date'])

    op.create_table(
        'interview_rounds',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('job_application_id', sa.Integer(), nullable=False),
        sa.Column(
            'round_type',
            sa.Enum('PHONE', 'HR', 'TECHNICAL', 'MANAGERIAL', 'ONSITE', name='roundtype'),
            nullable=False
        ),
        sa.Column('interview_date', sa.Date(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('result', sa.Enum('PENDING', 'PASSED', 'FAILED', name='interviewresult'), nullable=False),
        sa.ForeignKeyConstraint(['job_application_id'], ['job_applications.id'], ondelete='CASCADE'),
    )
    op.create_index('ix_interview_rounds_id', 'interview_rounds', ['id'])
    op.create_index('ix_interview_rounds_job_application_id', 'interview_rounds', ['job_application_id'])


def downgrade() -> None:
    """Drop all tables and enum types."""
    op.drop_table('interview_rounds')
    op.drop_table('job_applications')
    op.drop_table('accounts')

    bind = op.get_bind()
    for enum_name in ('interviewresult', 'roundtype', 'applicationstatus', 'role'):
        sa.Enum(name=enum_name).drop(bind, checkfirst=True)
