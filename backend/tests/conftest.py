"""
Pytest configuration and fixtures for backend tests.

Provides shared fixtures for:
- Test database sessions (in-memory SQLite, foreign keys on)
- Sample data factories for users, templates, notifications, attachments
- FastAPI test client bound to the test session
"""

import os
import pytest
from datetime import datetime
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Set test environment variables before importing app modules
os.environ['NOTIFY_DB_URL'] = 'sqlite:///:memory:'
os.environ['NOTIFY_ENV'] = 'test'

from backend.src.models import (  # noqa: E402
    Base,
    EmailTemplate,
    Notification,
    NotificationAttachment,
    NotificationStatus,
    User,
)


# ============================================================================
# Database Fixtures
# ============================================================================

@pytest.fixture(scope='function')
def test_db_engine():
    """Create an in-memory SQLite database engine for testing."""
    from sqlalchemy import event

    engine = create_engine(
        'sqlite:///:memory:',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )

    # Enable foreign key constraints for SQLite
    # This must be set for each connection
    def _fk_pragma_on_connect(dbapi_con, con_record):
        dbapi_con.execute('pragma foreign_keys=ON')

    event.listen(engine, 'connect', _fk_pragma_on_connect)

    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(scope='function')
def test_db_session(test_db_engine):
    """Create a test database session."""
    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=test_db_engine
    )
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


# ============================================================================
# Sample Data Factories
# ============================================================================

@pytest.fixture
def sample_user_data():
    """Factory for creating sample user request payloads."""
    def _create(
        email='john.doe@example.com',
        first_name='John',
        last_name='Doe',
    ):
        return {
            'email': email,
            'first_name': first_name,
            'last_name': last_name,
        }
    return _create


@pytest.fixture
def sample_user(test_db_session):
    """Factory for creating sample User models in the database."""
    counter = {'n': 0}

    def _create(email=None, first_name='John', last_name='Doe'):
        counter['n'] += 1
        user = User(
            email=email or f'user{counter["n"]}@example.com',
            first_name=first_name,
            last_name=last_name,
        )
        test_db_session.add(user)
        test_db_session.commit()
        test_db_session.refresh(user)
        return user
    return _create


@pytest.fixture
def sample_template_data():
    """Factory for creating sample email template request payloads."""
    def _create(
        name='welcome',
        subject_template='Welcome {first_name}!',
        html_body_template='<h1>Hello {first_name}</h1>',
        plain_text_body_template='Hello {first_name}',
    ):
        return {
            'name': name,
            'subject_template': subject_template,
            'html_body_template': html_body_template,
            'plain_text_body_template': plain_text_body_template,
        }
    return _create


@pytest.fixture
def sample_template(test_db_session, sample_template_data):
    """Factory for creating sample EmailTemplate models in the database."""
    counter = {'n': 0}

    def _create(name=None, **kwargs):
        counter['n'] += 1
        data = sample_template_data(name=name or f'template-{counter["n"]}', **kwargs)
        template = EmailTemplate(**data)
        test_db_session.add(template)
        test_db_session.commit()
        test_db_session.refresh(template)
        return template
    return _create


@pytest.fixture
def sample_notification(test_db_session):
    """Factory for creating sample Notification models in the database."""
    def _create(
        user=None,
        recipient_email='someone@example.com',
        subject='Welcome to Our Service',
        body='Thank you for joining our service!',
        status=NotificationStatus.PENDING,
        email_template=None,
        created_at=None,
        sent_at=None,
    ):
        notification = Notification(
            user=user,
            recipient_email=recipient_email,
            subject=subject,
            body=body,
            status=status,
            email_template=email_template,
            created_at=created_at or datetime.utcnow(),
            sent_at=sent_at,
        )
        test_db_session.add(notification)
        test_db_session.commit()
        test_db_session.refresh(notification)
        return notification
    return _create


@pytest.fixture
def sample_attachment(test_db_session):
    """Factory for creating sample NotificationAttachment models in the database."""
    def _create(
        notification,
        file_name='invoice.pdf',
        mime_type='application/pdf',
        file_path='/uploads/attachments/invoice_456.pdf',
    ):
        attachment = NotificationAttachment(
            notification_id=notification.id,
            file_name=file_name,
            mime_type=mime_type,
            file_path=file_path,
        )
        test_db_session.add(attachment)
        test_db_session.commit()
        test_db_session.refresh(attachment)
        return attachment
    return _create


# ============================================================================
# API Test Client
# ============================================================================

@pytest.fixture(scope='function')
def test_client(test_db_session):
    """Create a test client for FastAPI application."""
    from fastapi.testclient import TestClient
    from backend.src.main import app
    from backend.src.db.database import get_db

    def get_test_db():
        try:
            yield test_db_session
        finally:
            pass

    app.dependency_overrides[get_db] = get_test_db

    with TestClient(app) as client:
        yield client

    # Clear overrides
    app.dependency_overrides.clear()
