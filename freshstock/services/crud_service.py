"""
CRUD Service
Shared create / read / update / delete flow for entity services.

Handles:
- Uniqueness pre-checks before insert and before key-changing updates
- Partial updates merged from Present fields onto a freshly loaded snapshot
- Refining a repository's ForeignKeyMissing into the entity's referent error
"""

from dataclasses import asdict, replace
from typing import Dict, List, Optional, Tuple, Type

from freshstock.domain.optional import merge_present
from freshstock.errors import AlreadyExists, ForeignKeyMissing
from freshstock.utils.logger import get_logger

logger = get_logger("freshstock.services")


class CrudService:
    """
    Base service over one repository.

    Subclasses configure:
        entity_name: Used in log lines
        unique_field: Snapshot field guarded by a pre-check, or None
        already_exists_message: Template formatted with the snapshot's fields;
            repositories raise the same message when the constraint fires
        referent_errors: Referencing field -> (error class, message) used to
            refine a ForeignKeyMissing the repository attributed to that field
    """

    entity_name = "entity"
    unique_field: Optional[str] = None
    already_exists_message = "already exists"
    referent_errors: Dict[str, Tuple[Type[ForeignKeyMissing], str]] = {}

    def __init__(self, repository):
        self.repository = repository

    def get_all(self) -> List:
        return self.repository.get_all()

    def get(self, entity_id):
        return self.repository.get(entity_id)

    def create(self, snapshot):
        """
        Create an entity.

        Args:
            snapshot: New entity with id None

        Returns:
            The snapshot carrying the assigned id

        Raises:
            AlreadyExists: If the unique key is taken (pre-check or constraint)
            ForeignKeyMissing: If a referenced row does not exist
        """
        self._ensure_unique(snapshot)
        try:
            new_id = self.repository.save(snapshot)
        except ForeignKeyMissing as error:
            refined = self._refine(error)
            if refined is error:
                raise
            raise refined from error
        logger.info(f"Created {self.entity_name} {new_id}")
        return replace(snapshot, id=new_id)

    def update(self, entity_id, patch):
        """
        Apply a partial update.

        Args:
            entity_id: Id of the entity to update
            patch: Patch command; only Present fields are applied

        Returns:
            The merged snapshot as stored
        """
        current = self.repository.get(entity_id)
        updated = merge_present(current, patch)
        if updated == current:
            return current
        if self.unique_field and getattr(updated, self.unique_field) != getattr(current, self.unique_field):
            self._ensure_unique(updated)
        try:
            self.repository.update(updated)
        except ForeignKeyMissing as error:
            refined = self._refine(error)
            if refined is error:
                raise
            raise refined from error
        logger.info(f"Updated {self.entity_name} {entity_id}")
        return updated

    def delete(self, entity_id) -> None:
        self.repository.delete(entity_id)
        logger.info(f"Deleted {self.entity_name} {entity_id}")

    def _ensure_unique(self, snapshot) -> None:
        if self.unique_field is None:
            return
        if self.repository.exists(getattr(snapshot, self.unique_field)):
            raise AlreadyExists(self.already_exists_message.format(**asdict(snapshot)))

    def _refine(self, error: ForeignKeyMissing) -> ForeignKeyMissing:
        refinement = self.referent_errors.get(error.field)
        if refinement is None:
            return error
        error_class, message = refinement
        return error_class(message, field=error.field)
