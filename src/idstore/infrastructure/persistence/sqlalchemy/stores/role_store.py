"""SQLAlchemy implementation of RoleStore."""

import logging

from sqlalchemy import delete, func, select

from idstore.domain.role import IdentityRole
from idstore.infrastructure.persistence.sqlalchemy.models import (
    RoleModel,
    UserRoleModel,
)
from idstore.infrastructure.persistence.sqlalchemy.stores._base import SQLAlchemyStore
from idstore.stores import RoleStore
from idstore.stores._guards import require, require_text

logger = logging.getLogger(__name__)


class RoleStoreSQLAlchemy(SQLAlchemyStore, RoleStore):
    """SQLAlchemy implementation of the RoleStore interface."""

    async def create(self, role: IdentityRole) -> None:
        require(role, "role")

        self.session.add(self._map_to_model(role))
        await self.session.flush()
        logger.info("Created role: %s (name: %s)", role.id, role.name)

    async def delete(self, role: IdentityRole) -> None:
        require(role, "role")

        model = await self._find_model_by_id(role.id)
        if model is None:
            logger.debug("Role to delete does not exist: %s", role.id)
            return

        await self.session.execute(
            delete(UserRoleModel).where(UserRoleModel.role_id == model.id),
        )
        await self.session.delete(model)
        await self.session.flush()
        logger.info("Deleted role: %s", role.id)

    async def find_by_id(self, role_id: str) -> IdentityRole | None:
        require_text(role_id, "role_id")

        stmt = select(RoleModel).where(func.lower(RoleModel.id) == role_id.lower())
        result = await self.session.execute(stmt)
        model = result.scalars().first()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_name(self, role_name: str) -> IdentityRole | None:
        require_text(role_name, "role_name")

        stmt = select(RoleModel).where(
            func.lower(RoleModel.name) == role_name.lower(),
        )
        result = await self.session.execute(stmt)
        model = result.scalars().first()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def update(self, role: IdentityRole) -> None:
        require(role, "role")

        model = await self._find_model_by_id(role.id)
        if model is None:
            logger.warning("Role to update does not exist: %s", role.id)
            return

        model.name = role.name
        await self.session.flush()
        logger.debug("Updated role: %s", role.id)

    async def _find_model_by_id(self, role_id: str) -> RoleModel | None:
        stmt = select(RoleModel).where(RoleModel.id == role_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: RoleModel) -> IdentityRole:
        return IdentityRole.reconstitute(id=model.id, name=model.name)

    def _map_to_model(self, role: IdentityRole) -> RoleModel:
        return RoleModel(id=role.id, name=role.name)
