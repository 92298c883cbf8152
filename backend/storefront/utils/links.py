from typing import Optional

ABSOLUTE_PREFIXES = ("http://", "https://", "//")


def resolve_link(base_url: str, path: Optional[str]) -> Optional[str]:
    """
    Absolutize a root-relative (or bare) path against `base_url`.

    Absolute and protocol-relative URLs are returned unchanged.
    """
    if not path:
        return None

    if path.lower().startswith(ABSOLUTE_PREFIXES):
        return path

    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"
