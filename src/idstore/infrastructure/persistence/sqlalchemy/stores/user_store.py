"""SQLAlchemy implementation of the user store capabilities."""

import logging

from sqlalchemy import ColumnElement, delete, func, select

from idstore.domain.user import IdentityUser, IdentityUserRole
from idstore.exceptions import InvalidOperationError
from idstore.infrastructure.persistence.sqlalchemy.models import (
    RoleModel,
    UserModel,
    UserRoleModel,
)
from idstore.infrastructure.persistence.sqlalchemy.stores._base import SQLAlchemyStore
from idstore.stores import (
    UserEmailStore,
    UserPasswordStore,
    UserRoleStore,
    UserSecurityStampStore,
    UserStore,
)
from idstore.stores._guards import require, require_text

logger = logging.getLogger(__name__)


class UserStoreSQLAlchemy(
    SQLAlchemyStore,
    UserStore,
    UserRoleStore,
    UserPasswordStore,
    UserSecurityStampStore,
    UserEmailStore,
):
    """
    SQLAlchemy implementation of all user store capabilities.

    Lookups return detached IdentityUser objects carrying the role
    associations stored at load time. The password, security stamp and
    email setters change only those objects; ``update`` writes them.
    """

    # -- Core CRUD -----------------------------------------------------------

    async def create(self, user: IdentityUser) -> None:
        require(user, "user")

        self.session.add(self._map_to_model(user))
        if user.roles:
            await self.session.flush()
            for user_role in user.roles:
                self.session.add(
                    UserRoleModel(user_id=user.id, role_id=user_role.role_id),
                )

        await self.session.flush()
        logger.info("Created user: %s (user_name: %s)", user.id, user.user_name)

    async def delete(self, user: IdentityUser) -> None:
        require(user, "user")

        model = await self._find_model_by_id(user.id)
        if model is None:
            logger.debug("User to delete does not exist: %s", user.id)
            return

        await self.session.execute(
            delete(UserRoleModel).where(UserRoleModel.user_id == model.id),
        )
        await self.session.delete(model)
        await self.session.flush()
        logger.info("Deleted user: %s", user.id)

    async def find_by_id(self, user_id: str) -> IdentityUser | None:
        require_text(user_id, "user_id")
        return await self._find_one(func.lower(UserModel.id) == user_id.lower())

    async def find_by_name(self, user_name: str) -> IdentityUser | None:
        require_text(user_name, "user_name")
        return await self._find_one(
            func.lower(UserModel.user_name) == user_name.lower(),
        )

    async def update(self, user: IdentityUser) -> None:
        require(user, "user")

        model = await self._find_model_by_id(user.id)
        if model is None:
            logger.warning("User to update does not exist: %s", user.id)
            return

        self._update_model(model, user)
        await self.session.flush()
        logger.debug("Updated user: %s", user.id)

    # -- Role membership -----------------------------------------------------

    async def add_to_role(self, user: IdentityUser, role_name: str) -> None:
        require(user, "user")
        require_text(role_name, "role_name")

        # Exact match; removal below ignores case.
        stmt = select(RoleModel).where(RoleModel.name == role_name)
        result = await self.session.execute(stmt)
        role = result.scalar_one_or_none()
        if role is None:
            msg = "role not found"
            raise InvalidOperationError(msg)

        self.session.add(UserRoleModel(user_id=user.id, role_id=role.id))
        await self.session.flush()
        user.roles.append(IdentityUserRole(user_id=user.id, role_id=role.id))
        logger.info("Added user %s to role %s", user.id, role.name)

    async def get_roles(self, user: IdentityUser) -> list[str]:
        require(user, "user")
        return await self._find_role_names(user.role_ids)

    async def is_in_role(self, user: IdentityUser, role_name: str) -> bool:
        require(user, "user")
        require_text(role_name, "role_name")

        role_names = await self._find_role_names(user.role_ids)
        return role_name in role_names

    async def remove_from_role(self, user: IdentityUser, role_name: str) -> None:
        require(user, "user")
        require_text(role_name, "role_name")

        stmt = select(RoleModel).where(
            func.lower(RoleModel.name) == role_name.lower(),
        )
        result = await self.session.execute(stmt)
        role = result.scalars().first()
        if role is None:
            logger.debug("Role to remove does not exist: %s", role_name)
            return

        # First association for the role, whichever user it belongs to.
        stmt = select(UserRoleModel).where(UserRoleModel.role_id == role.id).limit(1)
        result = await self.session.execute(stmt)
        association = result.scalars().first()
        if association is None:
            logger.debug("No members in role %s", role.name)
            return

        removed = IdentityUserRole(
            user_id=association.user_id,
            role_id=association.role_id,
        )
        await self.session.delete(association)
        await self.session.flush()

        user.roles = [user_role for user_role in user.roles if user_role != removed]
        logger.info("Removed user %s from role %s", removed.user_id, role.name)

    # -- Password hash -------------------------------------------------------

    async def get_password_hash(self, user: IdentityUser) -> str | None:
        require(user, "user")
        return user.password_hash

    async def has_password(self, user: IdentityUser) -> bool:
        require(user, "user")
        return bool(user.password_hash)

    async def set_password_hash(self, user: IdentityUser, password_hash: str) -> None:
        require(user, "user")
        require_text(password_hash, "password_hash")
        user.password_hash = password_hash

    # -- Security stamp ------------------------------------------------------

    async def get_security_stamp(self, user: IdentityUser) -> str | None:
        require(user, "user")
        return user.security_stamp

    async def set_security_stamp(self, user: IdentityUser, stamp: str) -> None:
        require(user, "user")
        require_text(stamp, "stamp")
        user.security_stamp = stamp

    # -- Email ---------------------------------------------------------------

    async def find_by_email(self, email: str) -> IdentityUser | None:
        require_text(email, "email")
        return await self._find_one(func.lower(UserModel.email) == email.lower())

    async def get_email(self, user: IdentityUser) -> str | None:
        require(user, "user")
        return user.email

    async def get_email_confirmed(self, user: IdentityUser) -> bool:
        require(user, "user")
        return user.email_confirmed

    async def set_email(self, user: IdentityUser, email: str) -> None:
        require(user, "user")
        require_text(email, "email")
        user.email = email

    async def set_email_confirmed(self, user: IdentityUser, confirmed: bool) -> None:
        require(user, "user")
        user.email_confirmed = confirmed

    # -- Helpers -------------------------------------------------------------

    async def _find_one(self, condition: ColumnElement[bool]) -> IdentityUser | None:
        stmt = select(UserModel).where(condition)
        result = await self.session.execute(stmt)
        model = result.scalars().first()

        if model is None:
            return None

        return await self._load_domain(model)

    async def _find_model_by_id(self, user_id: str) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def _find_role_names(self, role_ids: list[str]) -> list[str]:
        if not role_ids:
            return []

        stmt = (
            select(RoleModel.name)
            .where(RoleModel.id.in_(role_ids))
            .order_by(RoleModel.name)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def _load_domain(self, model: UserModel) -> IdentityUser:
        stmt = select(UserRoleModel).where(UserRoleModel.user_id == model.id)
        result = await self.session.execute(stmt)
        roles = [
            IdentityUserRole(user_id=row.user_id, role_id=row.role_id)
            for row in result.scalars().all()
        ]

        return IdentityUser.reconstitute(
            id=model.id,
            user_name=model.user_name,
            password_hash=model.password_hash,
            security_stamp=model.security_stamp,
            email=model.email,
            email_confirmed=model.email_confirmed,
            access_failed_count=model.access_failed_count,
            roles=roles,
        )

    def _map_to_model(self, user: IdentityUser) -> UserModel:
        return UserModel(
            id=user.id,
            user_name=user.user_name,
            password_hash=user.password_hash,
            security_stamp=user.security_stamp,
            email=user.email,
            email_confirmed=user.email_confirmed,
            access_failed_count=user.access_failed_count,
        )

    def _update_model(self, model: UserModel, user: IdentityUser) -> None:
        model.user_name = user.user_name
        model.password_hash = user.password_hash
        model.security_stamp = user.security_stamp
        model.email = user.email
        model.email_confirmed = user.email_confirmed
        model.access_failed_count = user.access_failed_count
