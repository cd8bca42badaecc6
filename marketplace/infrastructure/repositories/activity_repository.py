"""
Activity repository backed by the activities collection.
Append-only: entries are recorded and read, never changed.
"""

from typing import List, Optional

from marketplace.domain.models.activity import Activity, ActivityType
from marketplace.domain.models.base import utc_now
from marketplace.domain.repositories.activity_repository import ActivityRepositoryInterface
from marketplace.infrastructure.db.facade import DocumentFacade, ACTIVITIES
from marketplace.infrastructure.mappers.activity_mapper import ActivityMapper
from marketplace.infrastructure.repositories.base import DocumentRepository


class ActivityRepository(DocumentRepository[Activity], ActivityRepositoryInterface):
    """Document implementation of the activity log."""

    collection = ACTIVITIES
    entity_name = "Activity"

    def __init__(self, facade: DocumentFacade):
        super().__init__(facade, ActivityMapper())

    async def record(
        self,
        user_id: str,
        action: ActivityType | str,
        description: Optional[str] = None
    ) -> Activity:
        tag = action.value if isinstance(action, ActivityType) else action
        return await self.add(Activity(
            user_id=user_id,
            action=tag,
            description=description,
            timestamp=utc_now()
        ))

    async def recent(self, limit: int = 10) -> List[Activity]:
        documents = await self.facade.get_recent_activities(limit)
        return [self.mapper.to_entity(document) for document in documents]
