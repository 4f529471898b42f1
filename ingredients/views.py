import logging

from django.contrib import messages
from django.db.models import RestrictedError
from django.shortcuts import render, redirect

from inventory.repositories import InventoryItemRepository
from users.decorators import owner_required
from .forms import IngredientForm
from .repositories import IngredientRepository

logger = logging.getLogger(__name__)


# 🧂 Ingredient List + Create
@owner_required(fallback="ingredients:list")
def ingredient_list(request, ctx):
    if request.method == "POST":
        return _save_ingredient(request, ctx, IngredientForm(request.POST), "Ingredient added.")
    ingredients = IngredientRepository.for_context(ctx).list()
    return render(request, "ingredients/ingredient_list.html", {"ingredients": ingredients})


@owner_required(fallback="ingredients:list")
def ingredient_new(request, ctx):
    return render(request, "ingredients/ingredient_form.html", {"form": IngredientForm()})


@owner_required(fallback="ingredients:list")
def ingredient_detail(request, ctx, pk):
    ingredient = IngredientRepository.for_context(ctx).get(pk)
    inventory_items = InventoryItemRepository.for_context(ctx).for_ingredient(ingredient)
    return render(request, "ingredients/ingredient_detail.html", {
        "ingredient": ingredient,
        "inventory_items": inventory_items,
    })


# ✏️ Ingredient Edit
@owner_required(fallback="ingredients:list")
def ingredient_edit(request, ctx, pk):
    ingredient = IngredientRepository.for_context(ctx).get(pk)
    form = IngredientForm(request.POST or None, instance=ingredient)
    if request.method == "POST":
        return _save_ingredient(request, ctx, form, "Ingredient updated.")
    return render(request, "ingredients/ingredient_form.html", {"form": form, "ingredient": ingredient})


# 🗑️ Ingredient Delete
@owner_required(fallback="ingredients:list")
def ingredient_delete(request, ctx, pk):
    repo = IngredientRepository.for_context(ctx)
    ingredient = repo.get(pk)
    if request.method == "POST":
        try:
            repo.delete(ingredient)
        except RestrictedError:
            logger.warning(f"[DELETE] Ingredient #{ingredient.pk} still referenced, delete refused")
            messages.error(request, f"{ingredient.name} is still used by inventory items or recipes.")
            return redirect("ingredients:detail", pk=ingredient.pk)
        messages.success(request, "Ingredient deleted.")
        return redirect("ingredients:list")
    return render(request, "confirm_delete.html", {
        "object": ingredient,
        "cancel_url": ingredient.get_absolute_url(),
    })


def _save_ingredient(request, ctx, form, message):
    if form.is_valid():
        ingredient = IngredientRepository.for_context(ctx).save(form.save(commit=False))
        messages.success(request, message)
        return redirect("ingredients:detail", pk=ingredient.pk)
    return render(request, "ingredients/ingredient_form.html", {"form": form, "ingredient": form.instance})
