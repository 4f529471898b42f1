from batches.repositories import BatchRepository
from ingredients.repositories import IngredientRepository
from inventory.repositories import InventoryItemRepository
from recipes.repositories import RecipeRepository

RECENT_LIMIT = 5


def build_summary(ctx, limit=RECENT_LIMIT):
    """
    Read-only snapshot of the owner's workshop.
    Counts are always scoped to ctx.owner_id; nothing here writes.
    """
    recipes = RecipeRepository.for_context(ctx)
    batches = BatchRepository.for_context(ctx)

    stats = {
        "ingredients": IngredientRepository.for_context(ctx).count(),
        "recipes": recipes.count(),
        "inventory": InventoryItemRepository.for_context(ctx).count(),
        "batches": batches.count(),
    }
    return {
        "stats": stats,
        "recent_recipes": list(recipes.recent(limit)),
        "recent_batches": list(batches.recent(limit)),
    }
