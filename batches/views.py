from django.contrib import messages
from django.core.exceptions import ValidationError
from django.shortcuts import render, redirect
from django.utils import timezone

from recipes.repositories import RecipeRepository
from users.decorators import owner_required
from .forms import BatchForm
from .repositories import BatchRepository


# 🏭 Batch List + Create
@owner_required(fallback="batches:list")
def batch_list(request, ctx):
    if request.method == "POST":
        return _create_batch(request, ctx)
    batches = BatchRepository.for_context(ctx).list()
    return render(request, "batches/batch_list.html", {"batches": batches})


@owner_required(fallback="batches:list")
def batch_new(request, ctx):
    """Log-a-batch form. `?recipe=<id>` pre-selects the recipe coming from its page."""
    initial = {"made_on": timezone.localdate()}
    recipe_id = request.GET.get("recipe")
    if recipe_id:
        initial["recipe"] = RecipeRepository.for_context(ctx).get(recipe_id)
    form = BatchForm(initial=initial, owner_id=ctx.owner_id)
    return render(request, "batches/batch_form.html", {"form": form})


@owner_required(fallback="batches:list")
def batch_detail(request, ctx, pk):
    batch = BatchRepository.for_context(ctx).get_with_recipe_lines(pk)
    return render(request, "batches/batch_detail.html", {
        "batch": batch,
        "lines": batch.recipe.recipe_ingredients.all(),
    })


# 🗑️ Batch Delete
@owner_required(fallback="batches:list")
def batch_delete(request, ctx, pk):
    repo = BatchRepository.for_context(ctx)
    batch = repo.get(pk)
    if request.method == "POST":
        repo.delete(batch)
        messages.success(request, "Batch deleted.")
        return redirect("batches:list")
    return render(request, "confirm_delete.html", {
        "object": batch,
        "cancel_url": batch.get_absolute_url(),
    })


def _create_batch(request, ctx):
    form = BatchForm(request.POST, owner_id=ctx.owner_id)
    if form.is_valid():
        try:
            batch = BatchRepository.for_context(ctx).create(form.save(commit=False))
        except ValidationError as e:
            form.add_error(None, e.messages)
        else:
            messages.success(request, f"Batch of {batch.recipe.title} logged.")
            return redirect("batches:detail", pk=batch.pk)
    return render(request, "batches/batch_form.html", {"form": form})
