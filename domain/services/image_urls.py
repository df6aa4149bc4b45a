"""Turn stored image references into URLs a browser can load."""

from domain.value_objects.image_category import GLOBAL_PLACEHOLDER_IMAGE

_HOSTED_PREFIXES = ("/Images/", "/uploads/")


def resolve_image_url(ref: str | None, base_url: str) -> str:
    """Resolve a stored image reference for display.

    Absolute URLs (cloud hosted images) are returned unchanged. Paths served
    by the catalog host are prefixed with its base URL. Missing references
    fall back to the global placeholder.
    """
    path = ref or GLOBAL_PLACEHOLDER_IMAGE
    if path.startswith(("http://", "https://")):
        return path
    if path.startswith(_HOSTED_PREFIXES):
        return f"{base_url.rstrip('/')}{path}"
    return path
