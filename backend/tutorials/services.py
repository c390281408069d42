"""Business logic used by HTTP controllers.

`TutorialService` coordinates the repository and owns the not-found
rule. It is thin: controllers translate its exceptions into HTTP
responses.
"""

import logging
from typing import List, Optional
from sqlmodel import Session
from . import models, repositories
from .schemas import TutorialCreate, TutorialUpdate

logger = logging.getLogger("tutorials.api")


class TutorialNotFound(LookupError):
    """Raised when no tutorial exists for the requested id."""
    def __init__(self, tutorial_id: int):
        super().__init__(f"Tutorial not found with id={tutorial_id}")
        self.tutorial_id = tutorial_id


class TutorialService:
    """Create, read, update and delete tutorials."""
    def __init__(self, session: Session):
        self.session = session
        self.repo = repositories.TutorialRepository(session)

    def list(self, title: Optional[str] = None) -> List[models.Tutorial]:
        return self.repo.list(title)

    def list_published(self) -> List[models.Tutorial]:
        return self.repo.list_published()

    def get(self, tutorial_id: int) -> models.Tutorial:
        """Return the tutorial or raise `TutorialNotFound`."""
        tutorial = self.repo.get(tutorial_id)
        if tutorial is None:
            raise TutorialNotFound(tutorial_id)
        return tutorial

    def create(self, payload: TutorialCreate) -> models.Tutorial:
        """Persist a new tutorial; the id is always assigned by the store."""
        tutorial = models.Tutorial(
            title=payload.title,
            description=payload.description,
            published=payload.published,
        )
        tutorial = self.repo.create(tutorial)
        logger.info("tutorial created id=%s", tutorial.id)
        return tutorial

    def update(self, tutorial_id: int, payload: TutorialUpdate) -> models.Tutorial:
        """Apply only the fields present in `payload`.

        Omitted fields keep their stored values, so `{"published": true}`
        flips the flag without touching title or description.
        """
        tutorial = self.get(tutorial_id)
        changes = payload.model_dump(exclude_unset=True)
        tutorial = self.repo.update(tutorial, changes)
        logger.info("tutorial updated id=%s fields=%s", tutorial_id, sorted(changes))
        return tutorial

    def delete(self, tutorial_id: int) -> None:
        tutorial = self.get(tutorial_id)
        self.repo.delete(tutorial)
        logger.info("tutorial deleted id=%s", tutorial_id)

    def delete_all(self) -> int:
        count = self.repo.delete_all()
        logger.info("all tutorials deleted count=%s", count)
        return count
