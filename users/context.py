from dataclasses import dataclass

from django.contrib.auth.base_user import AbstractBaseUser


@dataclass(frozen=True)
class OwnerContext:
    """
    Per-request view of who is acting.
    Built once by `owner_required` and handed to the view as `ctx`;
    repositories take `ctx.owner_id` instead of reading request.user themselves.
    """
    user: AbstractBaseUser

    @property
    def owner_id(self):
        return self.user.pk

    @classmethod
    def from_request(cls, request):
        return cls(user=request.user)
