from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.shortcuts import redirect
from functools import wraps

from .context import OwnerContext
from .repositories import RecordNotFound


def owner_required(fallback):
    """
    Allow only authenticated users and pass their OwnerContext to the view as `ctx`.
    A RecordNotFound raised inside the view sends the user back to `fallback` (a url name).
    """
    def decorator(view_func):
        @wraps(view_func)
        @login_required
        def _wrapped_view(request, *args, **kwargs):
            ctx = OwnerContext.from_request(request)
            try:
                return view_func(request, ctx, *args, **kwargs)
            except RecordNotFound:
                messages.error(request, "That record could not be found.")
                return redirect(fallback)
        return _wrapped_view
    return decorator
