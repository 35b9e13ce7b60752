"""SQLAlchemy models for identity persistence."""

from idstore.infrastructure.persistence.sqlalchemy.models.role_model import RoleModel
from idstore.infrastructure.persistence.sqlalchemy.models.user_model import UserModel
from idstore.infrastructure.persistence.sqlalchemy.models.user_role_model import (
    UserRoleModel,
)

__all__ = [
    "RoleModel",
    "UserModel",
    "UserRoleModel",
]
