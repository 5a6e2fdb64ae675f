"""Create profile, photo and matching tables.

Revision ID: 20261019_create_matching_tables
Revises:
Create Date: 2026-10-19 09:12:05.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '20261019_create_matching_tables'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """Create all tables read or written by the matching service."""
    op.create_table(
        'users',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('email', sa.String(255), nullable=False, unique=True),
        sa.Column('role', sa.String(20), nullable=False),
        sa.Column('secret_key', sa.String(255), nullable=False),
        sa.Column('status', sa.String(20), nullable=False, server_default='Active'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False,
                  server_default=sa.func.now()),
    )

    op.create_table(
        'photos',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('publit_io_id', sa.String(100), nullable=False),
        sa.Column('album_id', sa.String(36), nullable=False),
        sa.Column('url_preview', sa.String(1000), nullable=True),
        sa.Column('url_thumbnail', sa.String(1000), nullable=True),
        sa.Column('description', sa.Text, nullable=True),
        sa.Column('is_deleted', sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column('is_default', sa.Boolean, nullable=False, server_default=sa.false()),
    )

    op.create_table(
        'developers',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(36), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('full_name', sa.String(255), nullable=False),
        sa.Column('birthday', sa.String(10), nullable=False),
        sa.Column('phone', sa.String(30), nullable=False),
        sa.Column('gender', sa.String(20), nullable=False),
        sa.Column('city', sa.String(255), nullable=False),
        sa.Column('photo_id', sa.String(36), nullable=False, server_default=''),
        sa.Column('facebook_url', sa.String(500), nullable=False, server_default=''),
        sa.Column('linkedin_url', sa.String(500), nullable=False, server_default=''),
        sa.Column('twitter_url', sa.String(500), nullable=False, server_default=''),
        sa.Column('description', sa.Text, nullable=False, server_default=''),
        sa.Column('skills', sa.JSON, nullable=False),
        sa.Column('status', sa.String(20), nullable=False, server_default='Active'),
        sa.Column('job_type', sa.String(255), nullable=False),
        sa.Column('year_experience', sa.Integer, nullable=False),
        sa.Column('expected_salary', sa.Integer, nullable=False),
        sa.Column('work_place', sa.String(255), nullable=False),
    )
    op.create_index('ix_developers_user_id', 'developers', ['user_id'], unique=True)
    op.create_index('ix_developers_job_type', 'developers', ['job_type'])

    op.create_table(
        'companies',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(36), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('phone', sa.String(30), nullable=False),
        sa.Column('city', sa.String(255), nullable=False),
        sa.Column('tax_code', sa.String(50), nullable=False),
        sa.Column('photo_id', sa.String(36), nullable=False, server_default=''),
        sa.Column('facebook_url', sa.String(500), nullable=False, server_default=''),
        sa.Column('linkedin_url', sa.String(500), nullable=False, server_default=''),
        sa.Column('twitter_url', sa.String(500), nullable=False, server_default=''),
        sa.Column('description', sa.Text, nullable=False, server_default=''),
        sa.Column('status', sa.String(20), nullable=False, server_default='Active'),
    )
    op.create_index('ix_companies_user_id', 'companies', ['user_id'], unique=True)

    op.create_table(
        'job_recruitments',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(36), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('work_place', sa.String(255), nullable=False),
        sa.Column('expired_date', sa.String(10), nullable=False),
        sa.Column('from_salary', sa.Integer, nullable=False),
        sa.Column('to_salary', sa.Integer, nullable=False),
        sa.Column('job_type', sa.String(255), nullable=False),
        sa.Column('skills', sa.JSON, nullable=False),
        sa.Column('year_experience', sa.Integer, nullable=False),
        sa.Column('description', sa.Text, nullable=False, server_default=''),
        sa.Column('created_date', sa.String(10), nullable=False),
        sa.Column('status', sa.String(20), nullable=False, server_default='Active'),
    )
    op.create_index('ix_job_recruitments_user_id', 'job_recruitments', ['user_id'])
    op.create_index('ix_job_recruitments_job_type', 'job_recruitments', ['job_type'])

    op.create_table(
        'matchings',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('company_user_id', sa.String(36), nullable=False),
        sa.Column('developer_user_id', sa.String(36), nullable=False),
        sa.Column('job_recruitment_id', sa.String(36), nullable=True),
        sa.Column('is_company_like', sa.Boolean, nullable=True),
        sa.Column('is_developer_like', sa.Boolean, nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False,
                  server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False,
                  server_default=sa.func.now()),
    )
    op.create_index('ix_matchings_company_user_id', 'matchings', ['company_user_id'])
    op.create_index('ix_matchings_developer_user_id', 'matchings', ['developer_user_id'])

    # One row per scope; the profile-level scope has a null job id
    op.create_index(
        'uq_matchings_profile_scope',
        'matchings',
        ['company_user_id', 'developer_user_id'],
        unique=True,
        postgresql_where=sa.text('job_recruitment_id IS NULL'),
    )
    op.create_index(
        'uq_matchings_job_scope',
        'matchings',
        ['company_user_id', 'developer_user_id', 'job_recruitment_id'],
        unique=True,
        postgresql_where=sa.text('job_recruitment_id IS NOT NULL'),
    )


def downgrade() -> None:
    """Drop all matching service tables."""
    op.drop_index('uq_matchings_job_scope', table_name='matchings')
    op.drop_index('uq_matchings_profile_scope', table_name='matchings')
    op.drop_table('matchings')
    op.drop_table('job_recruitments')
    op.drop_table('companies')
    op.drop_table('developers')
    op.drop_table('photos')
    op.drop_table('users')
