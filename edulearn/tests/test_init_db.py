from edulearn.core.security import verify_password
from edulearn.db.init_db import clear_content, create_superadmin, reset_admins
from edulearn.models import Admin, AdminRole, Content, ContentType, Subject, Topic, User


def test_create_superadmin_is_idempotent(db_session):
    admin = create_superadmin(db_session)
    assert admin.role == AdminRole.superadmin
    assert verify_password("admin123", admin.password_hash)

    assert create_superadmin(db_session) is None
    assert db_session.query(Admin).count() == 1


def test_create_superadmin_with_custom_credentials(db_session):
    admin = create_superadmin(db_session, email="root@example.com", username="root", password="s3cret!")
    assert admin.email == "root@example.com"
    assert verify_password("s3cret!", admin.password_hash)


def test_reset_admins(db_session):
    create_superadmin(db_session, email="old@example.com", username="old", password="oldpass")
    admin = reset_admins(db_session)

    assert db_session.query(Admin).count() == 1
    assert admin.email == "admin@edulearn.com"


def test_clear_content_keeps_admins(db_session, catalog_data, learner, superadmin):
    db_session.add(Content(topic_id=catalog_data["intro"].id, title="Hi", type=ContentType.text, content="x"))
    db_session.commit()

    counts = clear_content(db_session)

    assert counts == {"subjects": 3, "topics": 3, "contents": 1, "users": 1}
    assert db_session.query(Subject).count() == 0
    assert db_session.query(Topic).count() == 0
    assert db_session.query(User).count() == 0
    assert db_session.query(Admin).count() == 1
