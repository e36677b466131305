"""Registry service - form submit, edit selection and deletion over an explicit form state."""

from loguru import logger

from app.models.registry import Member, MemberRow, SubmitResult, new_member_id
from app.repositories.registry.photo import PhotoRepository
from app.services.registry.errors import MemberNotFoundError
from app.services.registry.form import FormState, validate
from app.services.registry.store import MemberStore
from app.services.registry.view import build_rows


class RegistryService:
    """Registry business logic.

    The collection lives in the shared store; everything per-session
    (field values, errors, edit target) lives in the ``FormState`` passed
    to each call.
    """

    def __init__(self, store: MemberStore, photos: PhotoRepository):
        self._store = store
        self._photos = photos

    @property
    def store(self) -> MemberStore:
        return self._store

    def submit(self, state: FormState, values: dict | None = None) -> SubmitResult:
        """Validate and save the form.

        Appends a new member, or replaces the edit target when one is set.
        Invalid input leaves the collection untouched and keeps the values.
        """
        if values:
            state.update(values)

        result = validate(state.values)
        if not result.valid:
            state.errors = result.field_errors
            logger.debug("Submit rejected: {}", sorted(result.field_errors))
            return SubmitResult(saved=False, field_errors=result.field_errors)

        target = state.edit_target
        member = Member.model_validate({**state.values, "id": target or new_member_id()})

        if target is not None:
            try:
                index = self._store.replace(target, member)
            except MemberNotFoundError:
                # removed since it was selected; the edit cannot be applied
                state.clear_edit()
                logger.warning("Edit target {} no longer exists, edit aborted", target)
                raise
            state.clear_edit()
            updated = True
        else:
            index = self._store.append(member)
            updated = False

        state.reset()
        return SubmitResult(saved=True, updated=updated, member_id=member.id, index=index)

    def select_for_edit(self, state: FormState, member_id: str) -> Member:
        """Prefill the form from a stored member and make it the edit target."""
        member = self._store.get(member_id)
        if state.editing and state.edit_target != member_id:
            logger.debug("Switching edit target {} -> {}", state.edit_target, member_id)
        state.prefill(member)
        return member

    def delete(self, state: FormState, member_id: str) -> Member:
        removed = self._store.remove(member_id)
        if state.edit_target == member_id:
            self.cancel_edit(state)
            logger.info("Deleted member was being edited, edit cancelled")
        return removed

    def reset_form(self, state: FormState) -> None:
        state.reset()

    def cancel_edit(self, state: FormState) -> None:
        state.clear_edit()
        state.reset()

    def attach_photo(self, state: FormState, content: bytes, mime: str | None = None) -> str:
        """Store uploaded photo bytes and bind their digest to the form."""
        digest = self._photos.save(content, mime)
        state.values["photo"] = digest
        return digest

    def photo(self, digest: str) -> tuple[bytes, str | None] | None:
        return self._photos.get(digest)

    def rows(self) -> list[MemberRow]:
        return build_rows(self._store.members)

    def count(self) -> int:
        return len(self._store)
