import logging

logger = logging.getLogger(__name__)


class RequestLogMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        response = self.get_response(request)

        user = getattr(request, "user", None)
        if user is not None and user.is_authenticated:
            if not request.path.startswith("/admin") and not request.path.startswith("/static"):
                logger.info(
                    f"[REQUEST] {request.method} {request.path} -> {response.status_code} "
                    f"user={user.pk} ip={self.get_client_ip(request)}"
                )
        return response

    def get_client_ip(self, request):
        x_forwarded_for = request.META.get("HTTP_X_FORWARDED_FOR")
        if x_forwarded_for:
            return x_forwarded_for.split(",")[0]
        return request.META.get("REMOTE_ADDR")
