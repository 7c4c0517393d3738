"""Implicit values used when metadata or configuration leaves them unset."""

from dactyl_oas.metadata.base import HttpMethod

OAS_VERSION = "3.0.0"
APP_VERSION = "1.0.0"
DEFAULT_TITLE = f"OpenAPI Spec {OAS_VERSION} compliant documentation"
DEFAULT_DESCRIPTION = "Autogenerated OAS documentation by Dactyl"


def resolve_response_code(request_method: HttpMethod | str, explicit: int | None = None) -> int:
    """Return the documented success status for a route.

    An explicit code always wins. Otherwise POST routes answer 201 and
    everything else, including methods outside ``HttpMethod``, 200.
    """
    if explicit is not None:
        return explicit
    method = request_method.value if isinstance(request_method, HttpMethod) else str(request_method)
    return 201 if method.upper() == HttpMethod.POST.value else 200
