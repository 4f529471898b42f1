from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as DefaultUserAdmin
from .forms import SignUpForm
from .models import User


@admin.register(User)
class CustomUserAdmin(DefaultUserAdmin):
    list_display = ('email', 'username', 'is_staff', 'is_superuser', 'date_joined')
    list_filter = ('is_staff', 'is_superuser', 'is_active')
    search_fields = ('email', 'username')
    ordering = ('email',)
    add_form = SignUpForm

    fieldsets = (
        (None, {'fields': ('email', 'username', 'password')}),
        ('Permissions', {'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions')}),
    )
    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('email', 'username', 'password1', 'password2'),
        }),
    )
