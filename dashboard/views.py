from django.shortcuts import render

from users.decorators import owner_required
from .services import build_summary


# --- WORKSHOP DASHBOARD ---
@owner_required(fallback="dashboard:home")
def dashboard_view(request, ctx):
    """Counts plus the latest recipes and batches for the current user."""
    context = build_summary(ctx)
    return render(request, "dashboard/dashboard.html", context)
