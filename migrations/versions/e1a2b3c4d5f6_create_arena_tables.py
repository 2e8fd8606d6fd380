"""create arena tables

Revision ID: e1a2b3c4d5f6
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = 'e1a2b3c4d5f6'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'tabs',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('name_cn', sa.String(length=120), nullable=False),
        sa.Column('name_en', sa.String(length=120), nullable=False),
        sa.Column('slug', sa.String(length=120), nullable=False),
        sa.Column('sort_order', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    with op.batch_alter_table('tabs', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_tabs_slug'), ['slug'], unique=True)

    op.create_table(
        'model_brands',
        sa.Column('key', sa.String(length=64), nullable=False),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('logo_filename', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('key')
    )

    op.create_table(
        'models_registry',
        sa.Column('key', sa.String(length=64), nullable=False),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('brand_key', sa.String(length=64), nullable=True),
        sa.Column('logo_filename', sa.String(length=255), nullable=False),
        sa.Column('color', sa.String(length=16), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['brand_key'], ['model_brands.key'], ),
        sa.PrimaryKeyConstraint('key')
    )
    with op.batch_alter_table('models_registry', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_models_registry_brand_key'), ['brand_key'], unique=False)

    op.create_table(
        'demos',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('tab_id', sa.String(length=64), nullable=False),
        sa.Column('model_key', sa.String(length=64), nullable=False),
        sa.Column('model_name', sa.String(length=120), nullable=False),
        sa.Column('file_key', sa.String(length=255), nullable=False),
        sa.Column('thumbnail_key', sa.String(length=255), nullable=True),
        sa.Column('demo_type', sa.String(length=16), nullable=False),
        sa.Column('comment', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['tab_id'], ['tabs.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    with op.batch_alter_table('demos', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_demos_tab_id'), ['tab_id'], unique=False)
        batch_op.create_index(batch_op.f('ix_demos_model_key'), ['model_key'], unique=False)

    op.create_table(
        'demo_likes',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('demo_id', sa.String(length=64), nullable=False),
        sa.Column('ip', sa.String(length=64), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['demo_id'], ['demos.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('demo_id', 'ip', name='uq_demo_likes_demo_ip')
    )
    with op.batch_alter_table('demo_likes', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_demo_likes_demo_id'), ['demo_id'], unique=False)
        batch_op.create_index(batch_op.f('ix_demo_likes_ip'), ['ip'], unique=False)

    op.create_table(
        'login_attempts',
        sa.Column('ip', sa.String(length=64), nullable=False),
        sa.Column('count', sa.Integer(), nullable=False),
        sa.Column('first_attempt', sa.DateTime(), nullable=False),
        sa.Column('last_attempt', sa.DateTime(), nullable=True),
        sa.Column('locked_until', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('ip')
    )

    op.create_table(
        'audit_logs',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('action', sa.String(length=80), nullable=False),
        sa.Column('entity', sa.String(length=80), nullable=True),
        sa.Column('entity_id', sa.String(length=80), nullable=True),
        sa.Column('ip', sa.String(length=64), nullable=True),
        sa.Column('user_agent', sa.String(length=255), nullable=True),
        sa.Column('metadata_json', sa.Text(), nullable=True),
        sa.Column('timestamp', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    with op.batch_alter_table('audit_logs', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_audit_logs_action'), ['action'], unique=False)
        batch_op.create_index(batch_op.f('ix_audit_logs_timestamp'), ['timestamp'], unique=False)


def downgrade():
    with op.batch_alter_table('audit_logs', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_audit_logs_timestamp'))
        batch_op.drop_index(batch_op.f('ix_audit_logs_action'))
    op.drop_table('audit_logs')
    op.drop_table('login_attempts')

    with op.batch_alter_table('demo_likes', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_demo_likes_ip'))
        batch_op.drop_index(batch_op.f('ix_demo_likes_demo_id'))
    op.drop_table('demo_likes')

    with op.batch_alter_table('demos', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_demos_model_key'))
        batch_op.drop_index(batch_op.f('ix_demos_tab_id'))
    op.drop_table('demos')

    with op.batch_alter_table('models_registry', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_models_registry_brand_key'))
    op.drop_table('models_registry')
    op.drop_table('model_brands')

    with op.batch_alter_table('tabs', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_tabs_slug'))
    op.drop_table('tabs')
