"""Repository classes encapsulating database operations.

`CrudRepository` holds the generic contract shared by every record kind
(find all, find by id, save, delete by id, count, exists); the concrete
repositories only bind it to a table. Repositories return SQLModel
objects and commit after every write, so each call is its own
transaction.
"""

from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy import func
from sqlmodel import Session, SQLModel, select

from . import models

ModelT = TypeVar("ModelT", bound=SQLModel)


class CrudRepository(Generic[ModelT]):
    """Generic persistence operations for one table keyed by `id_field`."""
    model: Type[ModelT]
    id_field: str

    def __init__(self, session: Session):
        self.session = session

    def find_all(self) -> List[ModelT]:
        """Return every stored record; an empty table yields an empty list."""
        return list(self.session.exec(select(self.model)).all())

    def find_by_id(self, record_id: int) -> Optional[ModelT]:
        """Return the record with `record_id` or `None` if it is absent."""
        return self.session.get(self.model, record_id)

    def save(self, record: ModelT) -> ModelT:
        """Insert or replace `record` and return the managed instance.

        A record without an identifier is inserted and receives a fresh
        one. A record carrying an identifier replaces the stored row with
        that identifier, or is inserted under it when no such row exists.
        """
        if getattr(record, self.id_field) is None:
            self.session.add(record)
        else:
            record = self.session.merge(record)
        self._commit()
        self.session.refresh(record)
        return record

    def delete_by_id(self, record_id: int) -> None:
        """Delete the record with `record_id`; missing ids are ignored."""
        record = self.find_by_id(record_id)
        if record is None:
            return
        self.session.delete(record)
        self._commit()

    def delete_all(self) -> None:
        """Delete every record of this kind."""
        for record in self.find_all():
            self.session.delete(record)
        self._commit()

    def _commit(self) -> None:
        # a failed flush leaves the session unusable until it is rolled back
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

    def count(self) -> int:
        """Return the number of stored records."""
        return self.session.exec(select(func.count()).select_from(self.model)).one()

    def exists_by_id(self, record_id: int) -> bool:
        return self.find_by_id(record_id) is not None


class FoyerRepository(CrudRepository[models.Foyer]):
    """CRUD operations for `Foyer` objects."""
    model = models.Foyer
    id_field = "id_foyer"


class UniversiteRepository(CrudRepository[models.Universite]):
    """CRUD operations for `Universite` objects.

    Callers link a foyer through `foyer_id`; the referenced `Foyer` row
    must already exist.
    """
    model = models.Universite
    id_field = "id_universite"


class EtudiantRepository(CrudRepository[models.Etudiant]):
    """CRUD operations for `Etudiant` objects."""
    model = models.Etudiant
    id_field = "id_etudiant"
