"""Unit of measure management service."""

from typing import Optional
from uuid import UUID

from django.db import transaction, IntegrityError
from django.db.models import QuerySet

from apps.catalog.models import Unit

from .category_management import clean_name
from .exceptions import (
    UnitNotFoundError,
    DuplicateUnitError,
    UnitInUseError,
)


def get_units() -> QuerySet:
    return Unit.objects.order_by('name')


def get_unit_by_id(*, unit_id: UUID) -> Unit:
    try:
        return Unit.objects.get(id=unit_id)
    except Unit.DoesNotExist:
        raise UnitNotFoundError(f"Unit with ID {unit_id} not found")


@transaction.atomic
def create_unit(*, name: str) -> Unit:
    name = clean_name(name)
    try:
        with transaction.atomic():
            return Unit.objects.create(name=name)
    except IntegrityError:
        raise DuplicateUnitError(f"Unit '{name}' already exists")


@transaction.atomic
def update_unit(*, unit_id: UUID, name: Optional[str] = None) -> Unit:
    try:
        unit = Unit.objects.select_for_update().get(id=unit_id)
    except Unit.DoesNotExist:
        raise UnitNotFoundError(f"Unit with ID {unit_id} not found")

    if name is not None:
        unit.name = clean_name(name)
        try:
            with transaction.atomic():
                unit.save(update_fields=['name'])
        except IntegrityError:
            raise DuplicateUnitError(f"Unit '{unit.name}' already exists")

    return unit


@transaction.atomic
def delete_unit(*, unit_id: UUID) -> None:
    """
    Delete an unused unit.

    Raises:
        UnitNotFoundError: If unit doesn't exist
        UnitInUseError: If any item still uses it
    """
    try:
        unit = Unit.objects.select_for_update().get(id=unit_id)
    except Unit.DoesNotExist:
        raise UnitNotFoundError(f"Unit with ID {unit_id} not found")

    in_use = unit.items.count()
    if in_use:
        raise UnitInUseError(f"Unit '{unit.name}' is used by {in_use} item(s)")

    unit.delete()
