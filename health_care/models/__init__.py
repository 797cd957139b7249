from health_care.models.users import User, UserRole, UserStatus
from health_care.models.admins import Admin

__all__ = ["User", "UserRole", "UserStatus", "Admin"]
