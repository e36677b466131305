"""Registry API."""

from web.api.registry.views import (
    cancel_edit,
    delete_member,
    edit_member,
    export_members,
    get_photo,
    import_members,
    list_members,
    reset_form,
    submit_member,
    upload_photo,
)

__all__ = [
    "list_members",
    "submit_member",
    "edit_member",
    "delete_member",
    "reset_form",
    "cancel_edit",
    "upload_photo",
    "get_photo",
    "export_members",
    "import_members",
]
