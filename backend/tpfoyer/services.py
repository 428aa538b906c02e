"""Business logic services used by HTTP controllers.

Services are intentionally thin: each one wraps the repository it is
constructed with and passes calls straight through. The one rule they
add is that looking up a single record never returns `None`: a missing
id raises `EntityNotFoundError`.
"""

import logging
from typing import Generic, List

from . import models
from .repositories import CrudRepository, ModelT

logger = logging.getLogger("tpfoyer.services")


class EntityNotFoundError(LookupError):
    """Raised when a record requested by id does not exist."""

    def __init__(self, entity: str, record_id):
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} not found: {record_id}")


class CrudService(Generic[ModelT]):
    """Retrieve/add/modify/remove operations over one repository."""
    entity_name = "record"

    def __init__(self, repository: CrudRepository[ModelT]):
        self.repository = repository

    def retrieve_all(self) -> List[ModelT]:
        return self.repository.find_all()

    def retrieve(self, record_id: int) -> ModelT:
        """Return the record with `record_id`.

        Raises `EntityNotFoundError` when the repository has no match.
        """
        record = self.repository.find_by_id(record_id)
        if record is None:
            logger.warning("%s %s not found", self.entity_name, record_id)
            raise EntityNotFoundError(self.entity_name, record_id)
        return record

    def add(self, record: ModelT) -> ModelT:
        """Persist a new record. Leave the identifier unset to get a fresh one."""
        saved = self.repository.save(record)
        logger.info("%s added: %s", self.entity_name, saved)
        return saved

    def modify(self, record: ModelT) -> ModelT:
        """Replace the stored record carrying the same identifier.

        No existence check is made: an unknown identifier is inserted.
        """
        saved = self.repository.save(record)
        logger.info("%s modified: %s", self.entity_name, saved)
        return saved

    def remove(self, record_id: int) -> None:
        self.repository.delete_by_id(record_id)
        logger.info("%s removed: %s", self.entity_name, record_id)


class FoyerService(CrudService[models.Foyer]):
    entity_name = "Foyer"


class UniversiteService(CrudService[models.Universite]):
    """Universities and their optional foyer.

    The foyer is referenced through `Universite.foyer_id` only; adding or
    modifying a university never saves the foyer itself. Retrieval loads
    the linked foyer's current state.
    """
    entity_name = "Universite"

    def add(self, record: models.Universite) -> models.Universite:
        return super().add(self._by_reference(record))

    def modify(self, record: models.Universite) -> models.Universite:
        return super().modify(self._by_reference(record))

    @staticmethod
    def _by_reference(record: models.Universite) -> models.Universite:
        """Copy `record` keeping only the embedded foyer's id.

        An embedded foyer decides the link (no id means no link); without
        one, `foyer_id` is used as given.
        """
        foyer_id = record.foyer_id
        if "foyer" in record.__dict__:
            foyer = record.__dict__["foyer"]
            foyer_id = foyer.id_foyer if foyer is not None else None
        return models.Universite(
            id_universite=record.id_universite,
            nom_universite=record.nom_universite,
            adresse=record.adresse,
            foyer_id=foyer_id,
        )


class EtudiantService(CrudService[models.Etudiant]):
    entity_name = "Etudiant"
