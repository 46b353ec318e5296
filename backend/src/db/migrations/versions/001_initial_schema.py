"""Initial notification schema

Revision ID: 001_initial_schema
Revises:
Create Date: 2026-10-19

Creates users, email_templates, notifications and notification_attachments:
- Unique email on users, unique name on email_templates
- notifications.user_id -> users.id (SET NULL)
- notifications.email_template_id -> email_templates.id (RESTRICT)
- notification_attachments.notification_id -> notifications.id (CASCADE)
- Status stored as a plain string (pending, sent, failed, delivered, archived)
"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '001_initial_schema'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """
    Create the four notification tables.

    Tables:
    - users: Notification recipients
    - email_templates: Reusable subject/body templates
    - notifications: Messages with status lifecycle
    - notification_attachments: File references owned by a notification
    """

    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('first_name', sa.String(length=255), nullable=False),
        sa.Column('last_name', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'email_templates',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('subject_template', sa.String(length=255), nullable=False),
        sa.Column('html_body_template', sa.Text(), nullable=False),
        sa.Column('plain_text_body_template', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_email_templates_name', 'email_templates', ['name'], unique=True)

    op.create_table(
        'notifications',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=True),
        sa.Column('recipient_email', sa.String(length=255), nullable=True),
        sa.Column('subject', sa.String(length=255), nullable=False),
        sa.Column('body', sa.Text(), nullable=False),
        sa.Column('status', sa.String(length=50), nullable=False, server_default='pending'),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('sent_at', sa.DateTime(), nullable=True),
        sa.Column('email_template_id', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='SET NULL'),
        sa.ForeignKeyConstraint(
            ['email_template_id'], ['email_templates.id'], ondelete='RESTRICT'
        ),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_notifications_user_id', 'notifications', ['user_id'])
    op.create_index('ix_notifications_status', 'notifications', ['status'])
    op.create_index(
        'ix_notifications_email_template_id', 'notifications', ['email_template_id']
    )

    op.create_table(
        'notification_attachments',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('notification_id', sa.Integer(), nullable=False),
        sa.Column('file_name', sa.String(length=255), nullable=False),
        sa.Column('mime_type', sa.String(length=100), nullable=False),
        sa.Column('file_path', sa.String(length=500), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(
            ['notification_id'], ['notifications.id'], ondelete='CASCADE'
        ),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        'ix_notification_attachments_notification_id',
        'notification_attachments',
        ['notification_id'],
    )


def downgrade() -> None:
    """Drop the notification tables in reverse dependency order."""
    op.drop_index(
        'ix_notification_attachments_notification_id',
        table_name='notification_attachments',
    )
    op.drop_table('notification_attachments')

    op.drop_index('ix_notifications_email_template_id', table_name='notifications')
    op.drop_index('ix_notifications_status', table_name='notifications')
    op.drop_index('ix_notifications_user_id', table_name='notifications')
    op.drop_table('notifications')

    op.drop_index('ix_email_templates_name', table_name='email_templates')
    op.drop_table('email_templates')

    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
