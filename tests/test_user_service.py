import pytest
from sqlalchemy.exc import OperationalError

from health_care.exceptions import DuplicateRecordError
from health_care.models import Admin, User, UserRole
from health_care.schemas.user_schemas import CreateAdminPayload
from health_care.services.user_service import create_admin, get_password_hash, verify_password


def make_payload(email="a@x.com", name="A", password="Secret1", **admin_fields):
    return CreateAdminPayload(password=password, admin={"email": email, "name": name, **admin_fields})


def test_create_admin_persists_user_and_profile(db):
    user, admin = create_admin(db, make_payload(contactNumber="01711"), rounds=4)

    assert user.email == "a@x.com"
    assert user.role == UserRole.ADMIN
    assert admin.name == "A"
    assert admin.email == "a@x.com"
    assert admin.contact_number == "01711"
    assert admin.user_id == user.id
    assert user.admin is admin


def test_password_is_hashed_and_verifiable(db):
    user, _ = create_admin(db, make_payload(), rounds=4)

    assert user.hashed_password != "Secret1"
    assert user.hashed_password.startswith("$2b$04$")
    assert verify_password("Secret1", user.hashed_password)
    assert not verify_password("secret1", user.hashed_password)


def test_hash_is_salted():
    assert get_password_hash("Secret1", rounds=4) != get_password_hash("Secret1", rounds=4)


def test_default_cost_factor_is_ten():
    assert get_password_hash("Secret1").startswith("$2b$10$")


def test_duplicate_email_is_rejected(db):
    create_admin(db, make_payload(), rounds=4)

    with pytest.raises(DuplicateRecordError):
        create_admin(db, make_payload(name="Another A"), rounds=4)

    assert db.query(User).count() == 1
    assert db.query(Admin).count() == 1


def test_failed_profile_insert_leaves_no_user(db, add_admin):
    # An admin profile already claims the email, but no user has it yet
    add_admin(db, "Squatter", "other@x.com")
    db.query(Admin).filter(Admin.email == "other@x.com").update({"email": "dup@x.com"})
    db.commit()

    with pytest.raises(DuplicateRecordError):
        create_admin(db, make_payload(email="dup@x.com"), rounds=4)

    assert db.query(User).filter(User.email == "dup@x.com").count() == 0
    assert db.query(Admin).filter(Admin.email == "dup@x.com").count() == 1


def test_failed_user_insert_leaves_no_profile(db):
    db.add(User(email="taken@x.com", hashed_password="x", role=UserRole.PATIENT))
    db.commit()

    with pytest.raises(DuplicateRecordError):
        create_admin(db, make_payload(email="taken@x.com"), rounds=4)

    assert db.query(Admin).count() == 0
    assert db.query(User).count() == 1


def test_session_is_usable_after_a_rejected_insert(db):
    create_admin(db, make_payload(), rounds=4)
    with pytest.raises(DuplicateRecordError):
        create_admin(db, make_payload(), rounds=4)

    _, admin = create_admin(db, make_payload(email="b@x.com", name="B"), rounds=4)
    assert admin.id is not None


def test_database_failure_rolls_back_and_propagates(db, monkeypatch):
    def fail_commit():
        raise OperationalError("COMMIT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(db, "commit", fail_commit)
    with pytest.raises(OperationalError):
        create_admin(db, make_payload(), rounds=4)
    monkeypatch.undo()

    assert db.query(User).count() == 0
    assert db.query(Admin).count() == 0


def test_email_is_kept_verbatim(db):
    user, admin = create_admin(db, make_payload(email="Bob@EXAMPLE.COM"), rounds=4)
    assert user.email == "Bob@EXAMPLE.COM"
    assert admin.email == "Bob@EXAMPLE.COM"
