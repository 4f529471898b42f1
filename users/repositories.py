import logging

from django.core.exceptions import ValidationError
from django.http import Http404

logger = logging.getLogger(__name__)


class RecordNotFound(Http404):
    """Record is missing or belongs to another owner. The two cases are never told apart."""


class OwnerScopedRepository:
    """
    Data access for one model restricted to a single owner.

    Subclasses set `model` and may override `list_queryset()` to add joins and ordering.
    Every query starts from `model.objects.filter(user_id=owner_id)`.
    """
    model = None

    def __init__(self, owner_id):
        if owner_id is None:
            raise ValueError("Owner id is required for a scoped repository.")
        self.owner_id = owner_id

    @classmethod
    def for_context(cls, ctx):
        return cls(ctx.owner_id)

    def scoped(self):
        return self.model.objects.filter(user_id=self.owner_id)

    def list_queryset(self):
        return self.scoped()

    def list(self):
        return self.list_queryset()

    def count(self):
        return self.scoped().count()

    def get(self, pk):
        return self._get_from(self.list_queryset(), pk)

    def _get_from(self, queryset, pk):
        try:
            return queryset.get(pk=pk)
        except (self.model.DoesNotExist, ValueError, TypeError):
            raise RecordNotFound(f"{self.model._meta.verbose_name} #{pk} not found")

    def delete(self, obj):
        self._check_owner(obj)
        pk = obj.pk
        obj.delete()
        logger.info(f"[DELETE] {self.model.__name__} #{pk} removed by owner {self.owner_id}")

    def _check_owner(self, obj):
        if obj.user_id != self.owner_id:
            raise RecordNotFound(f"{self.model._meta.verbose_name} #{obj.pk} not found")

    def _check_reference(self, related, field):
        """Referenced template data (ingredient, recipe) must belong to the same owner."""
        if related is None or related.user_id != self.owner_id:
            logger.warning(
                f"[SCOPE] Owner {self.owner_id} referenced foreign {field} "
                f"#{getattr(related, 'pk', None)}"
            )
            raise ValidationError({field: "Select one of your own records."})

    def _assign_owner(self, obj):
        if obj.user_id is None:
            obj.user_id = self.owner_id
        else:
            self._check_owner(obj)
