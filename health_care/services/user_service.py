import logging
from typing import Tuple
import bcrypt
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from health_care.exceptions import DuplicateRecordError
from health_care.models import Admin, User, UserRole
from health_care.schemas.user_schemas import CreateAdminPayload

logger = logging.getLogger(__name__)

def get_password_hash(password: str, rounds: int = 10) -> str:
    """Hashes a plaintext password with a freshly salted bcrypt hash."""
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=rounds)).decode("utf-8")

def verify_password(password: str, hashed_password: str) -> bool:
    return bcrypt.checkpw(password.encode(), hashed_password.encode())

def create_admin(db: Session, payload: CreateAdminPayload, rounds: int = 10) -> Tuple[User, Admin]:
    """
    Registers an admin: a User with the ADMIN role plus its Admin profile.

    Both rows are written in a single transaction. The profile references the
    new user by id, so the user is flushed first to obtain it.
    """
    hashed_password = get_password_hash(payload.password, rounds=rounds)
    admin_data = payload.admin.model_dump()

    user = User(email=admin_data["email"], hashed_password=hashed_password, role=UserRole.ADMIN)
    try:
        db.add(user)
        db.flush()
        admin = Admin(**admin_data, user_id=user.id)
        db.add(admin)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Admin registration for {admin_data['email']} violated a unique constraint: {e.orig}")
        raise DuplicateRecordError(
            f"A user or admin with email {admin_data['email']} already exists",
            message="Failed to create Admin",
        ) from e
    except SQLAlchemyError:
        db.rollback()
        raise

    db.refresh(user)
    db.refresh(admin)
    logger.info(f"Created admin {admin.id} for user {user.id} ({user.email}).")
    return user, admin
