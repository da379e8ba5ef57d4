"""Inventory-count sources.

Handlers depend on the :class:`CountSource` protocol.  The database source
reads persisted schedules; the synthetic source derives placeholder schedules
from item rows (see :mod:`inventario_api.services.synthetic`) for deployments
whose count tables are not populated yet.
"""

from datetime import UTC, datetime
from typing import Protocol

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from inventario_api.database import Database
from inventario_api.models import CountDetail, CountSchedule, CountStatus, Item
from inventario_api.schemas import ProgramacionConteoOut
from inventario_api.services.dto import count_schedule_to_dto
from inventario_api.services.synthetic import synthesize_count
from inventario_api.utils.cache import GenerationCache
from inventario_api.utils.pagination import PageRequest, paginate


class CountSource(Protocol):
    async def fetch_page(
        self, status: CountStatus | None, page: PageRequest
    ) -> tuple[list[ProgramacionConteoOut], int]: ...


class DatabaseCountSource:
    """Read count schedules and their details from the database."""

    def __init__(self, database: Database) -> None:
        self._database = database

    async def fetch_page(
        self, status: CountStatus | None, page: PageRequest
    ) -> tuple[list[ProgramacionConteoOut], int]:
        query = (
            select(CountSchedule)
            .options(
                selectinload(CountSchedule.details).selectinload(CountDetail.item).options(
                    selectinload(Item.brand),
                    selectinload(Item.department),
                    selectinload(Item.subcategory),
                ),
                selectinload(CountSchedule.details).selectinload(CountDetail.location),
            )
            .order_by(CountSchedule.scheduled_date.desc(), CountSchedule.id.desc())
        )
        if status is not None:
            query = query.where(CountSchedule.status == status)

        rows, total = await paginate(self._database, query, page)
        return [count_schedule_to_dto(row) for row in rows], total


class SyntheticCountSource:
    """Serve placeholder schedules generated from the first *max_items* items.

    The generated set lives in *cache* and is rebuilt wholesale once stale.
    Status filtering and pagination run in memory over the full set, in
    generation order.
    """

    def __init__(
        self,
        database: Database,
        cache: GenerationCache[list[ProgramacionConteoOut]],
        *,
        max_items: int = 100,
    ) -> None:
        self._database = database
        self.cache = cache
        self._max_items = max_items

    async def _generate(self) -> list[ProgramacionConteoOut]:
        async with self._database.session() as session:
            result = await session.execute(
                select(Item)
                .options(
                    selectinload(Item.brand),
                    selectinload(Item.department),
                    selectinload(Item.subcategory),
                )
                .order_by(Item.id.asc())
                .limit(self._max_items)
            )
            items = list(result.scalars().all())
        now = datetime.now(UTC)
        return [synthesize_count(item, index, now) for index, item in enumerate(items)]

    async def all_schedules(self) -> list[ProgramacionConteoOut]:
        entry = await self.cache.get_or_create(self._generate)
        return entry.value

    async def fetch_page(
        self, status: CountStatus | None, page: PageRequest
    ) -> tuple[list[ProgramacionConteoOut], int]:
        schedules = await self.all_schedules()
        if status is not None:
            schedules = [s for s in schedules if s.estado == status]
        return schedules[page.skip : page.skip + page.limit], len(schedules)
