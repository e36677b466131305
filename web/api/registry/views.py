"""Registry API views - thin layer over the registry service."""

from app.container import container
from app.models.registry.labels import EDIT_TARGET_GONE
from app.services.registry import FormState, MemberNotFoundError, empty_message, table_title, validate
from app.services.registry.store import parse_snapshot
from web.api.errors import NotFoundError, ValidationError, validate_member_id

from .schemas import DeleteResponse, MemberDetail, MemberRowItem, MembersResponse, SubmitResponse


def list_members() -> MembersResponse:
    """Get the members table."""
    rows = container.registry.rows()
    total = len(rows)

    return MembersResponse(
        items=[MemberRowItem(**row.to_dict()) for row in rows],
        total=total,
        title=table_title(total),
        empty_message=empty_message(total),
    )


def submit_member(state: FormState, values: dict) -> SubmitResponse:
    """Submit the form: add a member, or save the one being edited."""
    try:
        result = container.registry.submit(state, values)
    except MemberNotFoundError:
        return SubmitResponse(saved=False, message=EDIT_TARGET_GONE)

    return SubmitResponse(**result.to_dict())


def edit_member(state: FormState, member_id: str) -> MemberDetail:
    """Load a member into the form for editing."""
    validate_member_id(member_id)
    try:
        member = container.registry.select_for_edit(state, member_id)
    except MemberNotFoundError as exc:
        raise NotFoundError(exc.message) from exc

    return MemberDetail(**member.model_dump())


def delete_member(state: FormState, member_id: str) -> DeleteResponse:
    """Delete a member by id."""
    validate_member_id(member_id)
    was_editing = state.edit_target == member_id
    try:
        container.registry.delete(state, member_id)
    except MemberNotFoundError as exc:
        raise NotFoundError(exc.message) from exc

    return DeleteResponse(removed_id=member_id, total=container.registry.count(), edit_cancelled=was_editing)


def reset_form(state: FormState) -> None:
    container.registry.reset_form(state)


def cancel_edit(state: FormState) -> None:
    container.registry.cancel_edit(state)


def upload_photo(state: FormState, content: bytes, mime: str | None = None) -> str:
    """Store an uploaded photo and bind it to the form."""
    return container.registry.attach_photo(state, content, mime)


def get_photo(digest: str) -> bytes | None:
    found = container.registry.photo(digest)
    return found[0] if found else None


def export_members() -> list[dict]:
    """Current collection in snapshot form."""
    return [m.to_snapshot() for m in container.store.members]


def import_members(records: list) -> int:
    """Replace the whole collection. All records must validate or nothing is written."""
    if not isinstance(records, list):
        raise ValidationError("Import must be a JSON array of members")

    errors = {}
    for i, record in enumerate(records):
        if not isinstance(record, dict):
            errors[str(i)] = "not an object"
            continue
        result = validate(record)
        if not result.valid:
            errors[str(i)] = "; ".join(f"{k}: {v}" for k, v in result.field_errors.items())

    first_seen: dict[str, int] = {}
    for i, record in enumerate(records):
        if not isinstance(record, dict) or not record.get("id"):
            continue
        member_id = str(record["id"])
        if member_id in first_seen:
            errors.setdefault(str(i), f"id: repeats record #{first_seen[member_id]}")
        else:
            first_seen[member_id] = i

    if errors:
        raise ValidationError(f"{len(errors)} invalid record(s)", field_errors=errors)

    members = parse_snapshot(records)
    container.store.replace_all(members)
    return len(members)
