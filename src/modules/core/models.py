"""Soft-delete infrastructure shared by catalog models.

Provides:
- ``SoftDeleteState``: the two domain states of a soft-deletable row.
- ``SoftDeleteQuerySet`` / ``SoftDeleteManager``: ``.alive()`` / ``.dead()``.
- ``SoftDeleteModel``: abstract model carrying the nullable ``deleted`` flag.

Design decisions:
- The column is a tri-state boolean (0/1/NULL).  NULL and 0 both mean
  "not deleted"; the ``state`` property collapses the three values into two.
- ``objects`` manager returns ALL records (unfiltered).  Use ``.alive()``
  explicitly to exclude soft-deleted rows.
- Flag changes are issued as single ``UPDATE`` statements so the affected
  row count can tell "not found" apart from "changed".
"""

from __future__ import annotations

from django.db import models
from django.db.models import Q

# Predicate matching rows that are not soft-deleted
ALIVE = Q(deleted=False) | Q(deleted__isnull=True)


class SoftDeleteState(models.TextChoices):
    ACTIVE = "active", "Active"
    DELETED = "deleted", "Deleted"


# ---------------------------------------------------------------------------
# Soft Delete infrastructure
# ---------------------------------------------------------------------------


class SoftDeleteQuerySet(models.QuerySet):
    """QuerySet with soft-delete helpers."""

    def alive(self) -> SoftDeleteQuerySet:
        """Return only non-deleted records (flag 0 or NULL)."""
        return self.filter(ALIVE)

    def dead(self) -> SoftDeleteQuerySet:
        """Return only soft-deleted records."""
        return self.filter(deleted=True)

    def soft_delete(self) -> int:
        """Set the flag on every matched row, deleted or not.

        Returns the number of matched rows.
        """
        return self.update(deleted=True)

    def restore(self) -> int:
        """Clear the flag on matched rows whose flag is not already 0.

        Rows already at 0 are left out of the ``UPDATE`` so they never count
        as affected; NULL rows are normalised to 0 and do count.
        """
        return self.exclude(deleted=False).update(deleted=False)


class SoftDeleteManager(models.Manager):
    """Manager that exposes ``.alive()`` / ``.dead()`` on the queryset."""

    def get_queryset(self) -> SoftDeleteQuerySet:
        return SoftDeleteQuerySet(self.model, using=self._db)

    def alive(self) -> SoftDeleteQuerySet:
        return self.get_queryset().alive()

    def dead(self) -> SoftDeleteQuerySet:
        return self.get_queryset().dead()


class SoftDeleteModel(models.Model):
    """Abstract model with soft-delete via a nullable ``deleted`` flag.

    - ``objects`` is **unfiltered** (returns all rows).
    - Use ``Model.objects.alive()`` to exclude soft-deleted rows.
    """

    deleted = models.BooleanField(null=True, default=False)

    objects = SoftDeleteManager()

    class Meta:
        abstract = True

    @property
    def state(self) -> SoftDeleteState:
        """Domain view of the flag: NULL and 0 are both ``ACTIVE``."""
        return SoftDeleteState.DELETED if self.deleted else SoftDeleteState.ACTIVE

    @property
    def is_deleted(self) -> bool:
        return self.state == SoftDeleteState.DELETED
