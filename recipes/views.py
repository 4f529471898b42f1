import logging

from django.contrib import messages
from django.core.exceptions import ValidationError
from django.db.models import RestrictedError
from django.shortcuts import render, redirect

from users.decorators import owner_required
from .forms import RecipeForm, recipe_lines_formset
from .repositories import RecipeRepository

logger = logging.getLogger(__name__)


# 📖 Recipe List + Create
@owner_required(fallback="recipes:list")
def recipe_list(request, ctx):
    if request.method == "POST":
        form = RecipeForm(request.POST)
        lines = recipe_lines_formset(ctx, request.POST)
        return _save_recipe(request, ctx, form, lines, "Recipe created.")
    recipes = RecipeRepository.for_context(ctx).list()
    return render(request, "recipes/recipe_list.html", {"recipes": recipes})


@owner_required(fallback="recipes:list")
def recipe_new(request, ctx):
    return render(request, "recipes/recipe_form.html", {
        "form": RecipeForm(),
        "lines": recipe_lines_formset(ctx),
    })


@owner_required(fallback="recipes:list")
def recipe_detail(request, ctx, pk):
    recipe = RecipeRepository.for_context(ctx).get_with_lines(pk)
    batches = recipe.batches.order_by("-made_on", "-created_at")
    return render(request, "recipes/recipe_detail.html", {"recipe": recipe, "batches": batches})


# ✏️ Recipe Edit
@owner_required(fallback="recipes:list")
def recipe_edit(request, ctx, pk):
    recipe = RecipeRepository.for_context(ctx).get(pk)
    if request.method == "POST":
        form = RecipeForm(request.POST, instance=recipe)
        lines = recipe_lines_formset(ctx, request.POST, instance=recipe)
        return _save_recipe(request, ctx, form, lines, "Recipe updated.")
    return render(request, "recipes/recipe_form.html", {
        "form": RecipeForm(instance=recipe),
        "lines": recipe_lines_formset(ctx, instance=recipe),
        "recipe": recipe,
    })


# 🗑️ Recipe Delete
@owner_required(fallback="recipes:list")
def recipe_delete(request, ctx, pk):
    repo = RecipeRepository.for_context(ctx)
    recipe = repo.get(pk)
    if request.method == "POST":
        try:
            repo.delete(recipe)
        except RestrictedError:
            logger.warning(f"[DELETE] Recipe #{recipe.pk} still has batches, delete refused")
            messages.error(request, f"{recipe.title} has logged batches. Delete those first.")
            return redirect("recipes:detail", pk=recipe.pk)
        messages.success(request, "Recipe deleted.")
        return redirect("recipes:list")
    return render(request, "confirm_delete.html", {
        "object": recipe,
        "cancel_url": recipe.get_absolute_url(),
    })


def _save_recipe(request, ctx, form, lines, message):
    if form.is_valid() and lines.is_valid():
        try:
            recipe = RecipeRepository.for_context(ctx).save(form.save(commit=False), lines)
        except ValidationError as e:
            form.add_error(None, e.messages)
        else:
            messages.success(request, message)
            return redirect("recipes:detail", pk=recipe.pk)
    return render(request, "recipes/recipe_form.html", {
        "form": form,
        "lines": lines,
        "recipe": form.instance,
    })
