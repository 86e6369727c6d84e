from typing import TypeVar

from django.db.models import Model

M = TypeVar("M", bound=Model)


def refresh(obj: M) -> M:
    return obj.__class__.objects.get(id=obj.id)
