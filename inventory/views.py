from django.contrib import messages
from django.core.exceptions import ValidationError
from django.shortcuts import render, redirect

from users.decorators import owner_required
from .forms import InventoryItemForm
from .repositories import InventoryItemRepository


# 📦 Inventory List + Create
@owner_required(fallback="inventory:list")
def inventory_list(request, ctx):
    if request.method == "POST":
        form = InventoryItemForm(request.POST, request.FILES, owner_id=ctx.owner_id)
        return _save_item(request, ctx, form, "Inventory item added.")
    items = InventoryItemRepository.for_context(ctx).list()
    return render(request, "inventory/inventory_list.html", {"items": items})


@owner_required(fallback="inventory:list")
def inventory_new(request, ctx):
    initial = {}
    if request.GET.get("ingredient"):
        initial["ingredient"] = request.GET["ingredient"]
    form = InventoryItemForm(initial=initial, owner_id=ctx.owner_id)
    return render(request, "inventory/inventory_form.html", {"form": form})


@owner_required(fallback="inventory:list")
def inventory_detail(request, ctx, pk):
    item = InventoryItemRepository.for_context(ctx).get(pk)
    return render(request, "inventory/inventory_detail.html", {"item": item})


# ✏️ Inventory Edit
@owner_required(fallback="inventory:list")
def inventory_edit(request, ctx, pk):
    item = InventoryItemRepository.for_context(ctx).get(pk)
    if request.method == "POST":
        form = InventoryItemForm(request.POST, request.FILES, instance=item, owner_id=ctx.owner_id)
        return _save_item(request, ctx, form, "Inventory item updated.")
    form = InventoryItemForm(instance=item, owner_id=ctx.owner_id)
    return render(request, "inventory/inventory_form.html", {"form": form, "item": item})


# 🗑️ Inventory Delete
@owner_required(fallback="inventory:list")
def inventory_delete(request, ctx, pk):
    repo = InventoryItemRepository.for_context(ctx)
    item = repo.get(pk)
    if request.method == "POST":
        repo.delete(item)
        messages.success(request, "Inventory item deleted.")
        return redirect("inventory:list")
    return render(request, "confirm_delete.html", {
        "object": item,
        "cancel_url": item.get_absolute_url(),
    })


def _save_item(request, ctx, form, message):
    if form.is_valid():
        try:
            item = InventoryItemRepository.for_context(ctx).save(form.save(commit=False))
        except ValidationError as e:
            form.add_error(None, e.messages)
        else:
            messages.success(request, message)
            return redirect("inventory:detail", pk=item.pk)
    return render(request, "inventory/inventory_form.html", {"form": form, "item": form.instance})
