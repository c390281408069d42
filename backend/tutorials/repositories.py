"""Repository encapsulating database operations on tutorials.

The repository returns SQLModel objects and performs commits/refreshes
where appropriate. Each method issues a single statement.
"""

from typing import Any, Dict, List, Optional
from sqlalchemy import delete
from sqlmodel import Session, select
from . import models


class TutorialRepository:
    """CRUD operations for `Tutorial` objects."""
    def __init__(self, session: Session):
        self.session = session

    def create(self, tutorial: models.Tutorial) -> models.Tutorial:
        """Persist a new tutorial and return it with its assigned id."""
        self.session.add(tutorial)
        self.session.commit()
        self.session.refresh(tutorial)
        return tutorial

    def get(self, tutorial_id: int) -> Optional[models.Tutorial]:
        """Get a `Tutorial` by primary key or `None` if not found."""
        return self.session.get(models.Tutorial, tutorial_id)

    def list(self, title: Optional[str] = None) -> List[models.Tutorial]:
        """Return all tutorials, or those whose title contains `title`.

        Matching is a SQL LIKE on `%title%` with wildcards in `title`
        escaped, so case sensitivity follows the database collation.
        """
        stmt = select(models.Tutorial)
        if title:
            stmt = stmt.where(models.Tutorial.title.contains(title, autoescape=True))
        return self.session.exec(stmt.order_by(models.Tutorial.id)).all()

    def list_published(self) -> List[models.Tutorial]:
        """Return tutorials with `published` set."""
        stmt = select(models.Tutorial).where(models.Tutorial.published == True).order_by(models.Tutorial.id)  # noqa: E712
        return self.session.exec(stmt).all()

    def update(self, tutorial: models.Tutorial, changes: Dict[str, Any]) -> models.Tutorial:
        """Apply `changes` to a managed tutorial and persist them."""
        for field, value in changes.items():
            setattr(tutorial, field, value)
        self.session.add(tutorial)
        self.session.commit()
        self.session.refresh(tutorial)
        return tutorial

    def delete(self, tutorial: models.Tutorial) -> None:
        self.session.delete(tutorial)
        self.session.commit()

    def delete_all(self) -> int:
        """Delete every tutorial and return the number of rows removed."""
        result = self.session.connection().execute(delete(models.Tutorial))
        self.session.commit()
        return result.rowcount
