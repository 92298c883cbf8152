from .list_sections import list_sections, get_section
from .create_section import create_section
from .patch_section import patch_section
from .delete_section import delete_section

__all__ = [
    "list_sections",
    "get_section",
    "create_section",
    "patch_section",
    "delete_section",
]
