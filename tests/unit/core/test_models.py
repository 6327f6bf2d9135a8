"""Unit tests for the soft-delete flag infrastructure.

Exercised through ``Product``, the concrete ``SoftDeleteModel`` in use.
"""

from __future__ import annotations

import pytest

from modules.core.models import SoftDeleteManager, SoftDeleteQuerySet, SoftDeleteState
from modules.products.models import Product

pytestmark = pytest.mark.unit


def _make(name: str, deleted) -> Product:
    return Product.objects.create(name=name, deleted=deleted)


class TestManager:
    def test_objects_is_soft_delete_manager(self):
        assert isinstance(Product.objects, SoftDeleteManager)
        assert isinstance(Product.objects.all(), SoftDeleteQuerySet)

    def test_objects_is_unfiltered(self):
        _make("a", False)
        _make("b", None)
        _make("c", True)
        assert Product.objects.count() == 3


class TestAliveAndDead:
    def test_alive_includes_zero_and_null(self):
        a = _make("a", False)
        b = _make("b", None)
        _make("c", True)
        assert set(Product.objects.alive().values_list("id", flat=True)) == {a.id, b.id}

    def test_dead_only_flagged(self):
        _make("a", False)
        _make("b", None)
        c = _make("c", True)
        assert list(Product.objects.dead().values_list("id", flat=True)) == [c.id]


class TestSoftDeleteUpdate:
    def test_soft_delete_counts_already_deleted_rows(self):
        p = _make("a", True)
        assert Product.objects.filter(pk=p.id).soft_delete() == 1

    def test_soft_delete_flags_row(self):
        p = _make("a", None)
        Product.objects.filter(pk=p.id).soft_delete()
        p.refresh_from_db()
        assert p.deleted is True


class TestRestoreUpdate:
    def test_restore_deleted_row(self):
        p = _make("a", True)
        assert Product.objects.filter(pk=p.id).restore() == 1
        p.refresh_from_db()
        assert p.deleted is False

    def test_restore_null_row_normalises(self):
        p = _make("a", None)
        assert Product.objects.filter(pk=p.id).restore() == 1
        p.refresh_from_db()
        assert p.deleted is False

    def test_restore_active_row_affects_nothing(self):
        p = _make("a", False)
        assert Product.objects.filter(pk=p.id).restore() == 0


class TestState:
    @pytest.mark.parametrize(
        ("flag", "expected"),
        [
            (False, SoftDeleteState.ACTIVE),
            (None, SoftDeleteState.ACTIVE),
            (True, SoftDeleteState.DELETED),
        ],
    )
    def test_tri_state_collapses_to_two(self, flag, expected):
        product = Product(name="x", deleted=flag)
        assert product.state == expected
        assert product.is_deleted is (expected == SoftDeleteState.DELETED)
