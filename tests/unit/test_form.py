"""Tests for form state."""

from app.models.registry import Member
from app.services.registry import FormState, empty_values


class TestFormState:
    def test_starts_empty(self):
        state = FormState()
        assert state.values == empty_values()
        assert not state.editing

    def test_update_ignores_unknown_fields(self):
        state = FormState()
        state.update({"prefix": "นาย", "id": "x", "bogus": 1})
        assert state.values["prefix"] == "นาย"
        assert "id" not in state.values
        assert "bogus" not in state.values

    def test_prefill_copies_every_field(self):
        m = Member(
            prefix="นาง",
            first_name="สมศรี",
            last_name="มีสุข",
            ministry="รัฐมนตรีว่าการ",
            department="กระทรวงการคลัง",
            history="ประวัติ",
            works="ผลงาน",
            party="พรรค B",
            photo="ab" * 32,
        )
        state = FormState()
        state.prefill(m)
        assert state.edit_target == m.id
        assert state.values == {
            "prefix": "นาง",
            "first_name": "สมศรี",
            "last_name": "มีสุข",
            "ministry": "รัฐมนตรีว่าการ",
            "department": "กระทรวงการคลัง",
            "history": "ประวัติ",
            "works": "ผลงาน",
            "party": "พรรค B",
            "photo": "ab" * 32,
        }

    def test_reset_keeps_edit_target(self):
        m = Member(prefix="นาย", first_name="ก", last_name="ข")
        state = FormState()
        state.prefill(m)
        state.errors = {"prefix": "x"}
        state.reset()
        assert state.values == empty_values()
        assert state.errors == {}
        assert state.edit_target == m.id

    def test_version_bumps(self):
        state = FormState()
        state.reset()
        state.prefill(Member(prefix="นาย", first_name="ก", last_name="ข"))
        assert state.version == 2
