import logging

from django.contrib.auth import login, logout
from django.contrib.auth.decorators import login_required
from django.contrib.auth.views import LoginView
from django.shortcuts import render, redirect

from .forms import SignUpForm

logger = logging.getLogger(__name__)


def signup(request):
    if request.user.is_authenticated:
        return redirect('dashboard:home')
    form = SignUpForm(request.POST or None)
    if request.method == "POST" and form.is_valid():
        user = form.save()
        login(request, user, backend='django.contrib.auth.backends.ModelBackend')
        logger.info(f"[SIGNUP] New account #{user.pk} ({user.email})")
        return redirect('dashboard:home')
    return render(request, 'users/signup.html', {'form': form})


@login_required
def user_logout(request):
    logout(request)
    return redirect('login')


class CustomLoginView(LoginView):
    template_name = "users/login.html"
    redirect_authenticated_user = True
