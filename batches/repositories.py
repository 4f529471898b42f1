import logging

from django.db.models import Prefetch

from recipes.models import RecipeIngredient
from users.repositories import OwnerScopedRepository

from .models import Batch

logger = logging.getLogger(__name__)


class BatchRepository(OwnerScopedRepository):
    """
    Owner-scoped batch log. Exposes create and delete only; there is no update.
    Listing joins the recipe so a page of batches is one query.
    """
    model = Batch

    def list_queryset(self):
        return self.scoped().select_related('recipe').order_by('-made_on', '-created_at', '-pk')

    def recent(self, limit=5):
        return self.list_queryset()[:limit]

    def get_with_recipe_lines(self, pk):
        """Batch plus the recipe's ingredient lines as they are now (not snapshotted)."""
        lines = RecipeIngredient.objects.select_related('ingredient').order_by('id')
        queryset = self.list_queryset().prefetch_related(
            Prefetch('recipe__recipe_ingredients', queryset=lines)
        )
        return self._get_from(queryset, pk)

    def create(self, batch):
        if batch.pk is not None:
            raise ValueError("create() only accepts new batches.")
        self._assign_owner(batch)
        self._check_reference(batch.recipe if batch.recipe_id else None, 'recipe')
        batch.save()
        logger.info(
            f"[BATCH] Owner {self.owner_id} logged {batch.recipe.title} made on {batch.made_on} (#{batch.pk})"
        )
        return batch
