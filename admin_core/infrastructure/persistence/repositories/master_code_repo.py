"""Master code repository: groups and subcodes. Reads return DTOs; ORM stays here."""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from admin_core.application.dtos.master_code import GroupResult, SubcodeResult
from admin_core.infrastructure.persistence.models.master_code import (
    MasterCodeGroup,
    MasterCodeSubcode,
)
from admin_core.infrastructure.persistence.repositories.base import BaseRepository
from admin_core.schemas.master_code import GroupUpsert, SubcodeUpsert


def _group_to_result(g: MasterCodeGroup) -> GroupResult:
    """Map ORM MasterCodeGroup to GroupResult."""
    return GroupResult(
        id=g.id,
        group_code=g.group_code,
        name=g.name,
        description=g.description,
        display_order=g.display_order,
        is_active=g.is_active,
        is_system=g.is_system,
    )


def _subcode_to_result(s: MasterCodeSubcode) -> SubcodeResult:
    """Map ORM MasterCodeSubcode to SubcodeResult."""
    return SubcodeResult(
        id=s.id,
        group_code=s.group_code,
        subcode=s.subcode,
        name=s.name,
        description=s.description,
        remark=s.remark,
        value1=s.value1,
        value2=s.value2,
        value3=s.value3,
        display_order=s.display_order,
        is_active=s.is_active,
        is_system=s.is_system,
    )


class MasterCodeRepository(BaseRepository[MasterCodeGroup]):
    """Groups and their subcodes. Subcode rows are managed through the group repo."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, MasterCodeGroup)

    async def _get_group_entity(self, group_code: str) -> MasterCodeGroup | None:
        return await self.get_one_by(group_code=group_code)

    async def _get_subcode_entity(
        self, group_code: str, subcode: str
    ) -> MasterCodeSubcode | None:
        result = await self.db.execute(
            select(MasterCodeSubcode).where(
                MasterCodeSubcode.group_code == group_code,
                MasterCodeSubcode.subcode == subcode,
            )
        )
        return result.scalar_one_or_none()

    async def get_group(self, group_code: str) -> GroupResult | None:
        row = await self._get_group_entity(group_code)
        return _group_to_result(row) if row else None

    async def list_groups(self, *, include_inactive: bool = False) -> list[GroupResult]:
        q = select(MasterCodeGroup)
        if not include_inactive:
            q = q.where(MasterCodeGroup.is_active.is_(True))
        q = q.order_by(MasterCodeGroup.display_order, MasterCodeGroup.group_code)
        result = await self.db.execute(q)
        return [_group_to_result(g) for g in result.scalars().all()]

    async def list_group_codes(self) -> list[str]:
        result = await self.db.execute(select(MasterCodeGroup.group_code))
        return list(result.scalars().all())

    async def upsert_group(self, data: GroupUpsert) -> GroupResult:
        """Create the group or update name/description/order/flags in place."""
        row = await self._get_group_entity(data.group_code)
        if row is None:
            row = MasterCodeGroup(
                group_code=data.group_code,
                name=data.name,
                description=data.description,
                display_order=data.display_order,
                is_active=data.is_active,
                is_system=data.is_system,
            )
            return _group_to_result(await self.create(row))
        row.name = data.name
        row.description = data.description
        row.display_order = data.display_order
        row.is_active = data.is_active
        row.is_system = data.is_system
        return _group_to_result(await self.update(row))

    async def rename_group(self, old_code: str, new_code: str) -> GroupResult | None:
        """Change group_code. The FK's ON UPDATE RESTRICT refuses it if subcodes exist."""
        row = await self._get_group_entity(old_code)
        if row is None:
            return None
        row.group_code = new_code
        return _group_to_result(await self.update(row))

    async def count_subcodes(self, group_code: str) -> int:
        result = await self.db.execute(
            select(func.count())
            .select_from(MasterCodeSubcode)
            .where(MasterCodeSubcode.group_code == group_code)
        )
        return int(result.scalar_one())

    async def list_subcodes(
        self, group_code: str, *, include_inactive: bool = False
    ) -> list[SubcodeResult]:
        q = select(MasterCodeSubcode).where(MasterCodeSubcode.group_code == group_code)
        if not include_inactive:
            q = q.where(MasterCodeSubcode.is_active.is_(True))
        q = q.order_by(MasterCodeSubcode.display_order, MasterCodeSubcode.subcode)
        result = await self.db.execute(q)
        return [_subcode_to_result(s) for s in result.scalars().all()]

    async def get_subcode(self, group_code: str, subcode: str) -> SubcodeResult | None:
        row = await self._get_subcode_entity(group_code, subcode)
        return _subcode_to_result(row) if row else None

    async def upsert_subcode(self, data: SubcodeUpsert) -> SubcodeResult:
        """Create the subcode or update it in place. Caller checks the group exists."""
        row = await self._get_subcode_entity(data.group_code, data.subcode)
        fields = data.model_dump(exclude={"group_code", "subcode"})
        if row is None:
            row = MasterCodeSubcode(
                group_code=data.group_code, subcode=data.subcode, **fields
            )
            self.db.add(row)
        else:
            for name, value in fields.items():
                setattr(row, name, value)
        await self.db.flush()
        await self.db.refresh(row)
        return _subcode_to_result(row)

    async def set_subcode_active(
        self, group_code: str, subcode: str, is_active: bool
    ) -> SubcodeResult | None:
        row = await self._get_subcode_entity(group_code, subcode)
        if row is None:
            return None
        row.is_active = is_active
        await self.db.flush()
        await self.db.refresh(row)
        return _subcode_to_result(row)

    async def is_active_value(self, group_code: str, value: str) -> bool:
        """True iff an active subcode of an active group has this value."""
        result = await self.db.execute(
            select(MasterCodeSubcode.id)
            .join(
                MasterCodeGroup,
                MasterCodeGroup.group_code == MasterCodeSubcode.group_code,
            )
            .where(
                MasterCodeSubcode.group_code == group_code,
                MasterCodeSubcode.subcode == value,
                MasterCodeSubcode.is_active.is_(True),
                MasterCodeGroup.is_active.is_(True),
            )
            .limit(1)
        )
        return result.scalar_one_or_none() is not None
