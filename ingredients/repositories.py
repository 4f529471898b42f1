from users.repositories import OwnerScopedRepository

from .models import Ingredient


class IngredientRepository(OwnerScopedRepository):
    model = Ingredient

    def list_queryset(self):
        return self.scoped().order_by('name')

    def save(self, ingredient):
        self._assign_owner(ingredient)
        ingredient.save()
        return ingredient
