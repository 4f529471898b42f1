from django.db import transaction
from django.db.models import Prefetch

from users.repositories import OwnerScopedRepository

from .models import Recipe, RecipeIngredient


class RecipeRepository(OwnerScopedRepository):
    model = Recipe

    def list_queryset(self):
        return self.scoped().order_by('-created_at', '-pk')

    def recent(self, limit=5):
        return self.list_queryset()[:limit]

    def get_with_lines(self, pk):
        """Recipe plus its ingredient lines, resolved in one extra query."""
        lines = RecipeIngredient.objects.select_related('ingredient').order_by('id')
        queryset = self.list_queryset().prefetch_related(Prefetch("recipe_ingredients", queryset=lines))
        return self._get_from(queryset, pk)

    def save(self, recipe, lines=None):
        """Save the recipe and, if given, its ingredient lines formset in one transaction."""
        self._assign_owner(recipe)
        if lines is not None:
            for form in lines.forms:
                ingredient = form.cleaned_data.get("ingredient") if form.has_changed() else None
                if ingredient is not None and not form.cleaned_data.get("DELETE"):
                    self._check_reference(ingredient, "ingredient")
        with transaction.atomic():
            recipe.save()
            if lines is not None:
                lines.instance = recipe
                lines.save()
        return recipe
