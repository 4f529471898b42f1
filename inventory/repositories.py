import logging

from users.repositories import OwnerScopedRepository

from .models import InventoryItem

logger = logging.getLogger(__name__)


class InventoryItemRepository(OwnerScopedRepository):
    """Owner-scoped inventory. One joined query resolves items with their ingredients."""
    model = InventoryItem

    def list_queryset(self):
        return self.scoped().select_related('ingredient').order_by('-purchase_date', '-created_at', '-pk')

    def for_ingredient(self, ingredient):
        return self.list_queryset().filter(ingredient=ingredient)

    def save(self, item):
        creating = item.pk is None
        self._assign_owner(item)
        self._check_reference(item.ingredient if item.ingredient_id else None, 'ingredient')
        item.save()
        if creating:
            logger.info(
                f"[INVENTORY] Owner {self.owner_id} added {item.ingredient.name} "
                f"purchased {item.purchase_date} (#{item.pk})"
            )
        return item
