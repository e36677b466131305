"""Tests for the registry service - submit, edit and delete flows."""

import json
from concurrent.futures import ThreadPoolExecutor

import pytest

from app.services.registry import FormState, MemberNotFoundError, MemberStore, RegistryService, empty_values

SOMCHAI = {"prefix": "นาย", "first_name": "สมชาย", "last_name": "ใจดี"}


class TestSubmit:
    def test_add_member(self, service, state):
        result = service.submit(state, SOMCHAI)
        assert result.saved and not result.updated
        assert result.index == 0

        [row] = service.rows()
        assert row.full_name == "นาย สมชาย ใจดี"
        assert row.ministry == row.department == row.party == ""
        assert state.values == empty_values()

    def test_invalid_does_not_mutate(self, service, state):
        result = service.submit(state, {"prefix": "", "first_name": "", "last_name": ""})
        assert not result.saved
        assert service.count() == 0
        assert len(result.field_errors) == 3
        assert state.errors == result.field_errors

    @pytest.mark.parametrize("missing", ["prefix", "first_name", "last_name"])
    def test_each_required_field(self, service, state, missing):
        result = service.submit(state, {**SOMCHAI, missing: ""})
        assert not result.saved
        assert list(result.field_errors) == [missing]
        assert service.count() == 0

    def test_invalid_keeps_values(self, service, state):
        service.submit(state, {**SOMCHAI, "last_name": "", "party": "พรรค A"})
        assert state.values["first_name"] == "สมชาย"
        assert state.values["party"] == "พรรค A"

    def test_valid_submit_clears_errors(self, service, state):
        service.submit(state, {})
        service.submit(state, SOMCHAI)
        assert state.errors == {}
        assert service.count() == 1

    def test_required_fields_saved_stripped(self, service, state, kv):
        service.submit(state, {**SOMCHAI, "prefix": " นาย ", "party": " พรรค A "})
        saved = json.loads(kv.get_raw("members"))[0]
        assert saved["prefix"] == "นาย"
        assert saved["party"] == " พรรค A "


class TestEdit:
    def test_edit_row_changes_party(self, service, state):
        service.submit(state, {**SOMCHAI, "ministry": "รัฐมนตรี", "history": "ประวัติ"})
        row = service.rows()[0]

        service.select_for_edit(state, row.id)
        assert state.editing
        assert state.values["first_name"] == "สมชาย"

        result = service.submit(state, {**state.values, "party": "พรรค A"})
        assert result.updated
        assert service.count() == 1
        assert not state.editing

        member = service.store.at(0)
        assert member.id == row.id
        assert member.party == "พรรค A"
        assert member.ministry == "รัฐมนตรี"
        assert member.history == "ประวัติ"
        assert member.full_name == "นาย สมชาย ใจดี"

    def test_last_selected_wins(self, service, state):
        service.submit(state, SOMCHAI)
        service.submit(state, {**SOMCHAI, "first_name": "สมหญิง"})
        first, second = service.rows()

        service.select_for_edit(state, first.id)
        service.select_for_edit(state, second.id)
        service.submit(state, {"party": "พรรค B"})

        assert service.store.at(0).party == ""
        assert service.store.at(1).party == "พรรค B"

    def test_reset_during_edit_keeps_target(self, service, state):
        service.submit(state, SOMCHAI)
        row = service.rows()[0]
        service.select_for_edit(state, row.id)
        service.reset_form(state)

        assert state.edit_target == row.id
        # blank form cannot overwrite the record
        assert not service.submit(state).saved
        assert service.store.at(0).first_name == "สมชาย"

    def test_cancel_edit(self, service, state):
        service.submit(state, SOMCHAI)
        service.select_for_edit(state, service.rows()[0].id)
        service.cancel_edit(state)
        assert not state.editing
        assert state.values == empty_values()

        service.submit(state, SOMCHAI)
        assert service.count() == 2

    def test_unknown_member(self, service, state):
        with pytest.raises(MemberNotFoundError):
            service.select_for_edit(state, "missing")

    def test_target_removed_elsewhere(self, service, state, store):
        service.submit(state, SOMCHAI)
        row = service.rows()[0]
        service.select_for_edit(state, row.id)
        store.remove(row.id)

        with pytest.raises(MemberNotFoundError):
            service.submit(state)
        assert not state.editing
        assert service.count() == 0


class TestDelete:
    def test_delete_first_of_two(self, service, state):
        service.submit(state, SOMCHAI)
        service.submit(state, {**SOMCHAI, "first_name": "สมหญิง"})
        first, second = service.rows()

        service.delete(state, first.id)
        [row] = service.rows()
        assert row.id == second.id
        assert row.index == 0

    def test_delete_edit_target_cancels_edit(self, service, state):
        service.submit(state, SOMCHAI)
        row = service.rows()[0]
        service.select_for_edit(state, row.id)
        service.delete(state, row.id)
        assert not state.editing
        assert state.values == empty_values()

    def test_delete_other_keeps_edit(self, service, state):
        service.submit(state, SOMCHAI)
        service.submit(state, {**SOMCHAI, "first_name": "สมหญิง"})
        first, second = service.rows()
        service.select_for_edit(state, second.id)
        service.delete(state, first.id)

        assert state.edit_target == second.id
        service.submit(state, {"party": "พรรค C"})
        assert service.store.get(second.id).party == "พรรค C"


class TestPhoto:
    def test_attach_photo(self, service, state):
        digest = service.attach_photo(state, b"\x89PNG fake", "image/png")
        service.submit(state, SOMCHAI)
        assert service.store.at(0).photo == digest
        assert service.photo(digest) == (b"\x89PNG fake", "image/png")


class TestRepeatedRecords:
    def test_edit_second_of_identical_pair(self, kv, photos):
        record = {"id": "dup", "prefix": "นาย", "firstName": "สมชาย", "lastName": "ใจดี"}
        kv.set("members", [record, record])
        store = MemberStore(kv)
        store.load()
        service = RegistryService(store=store, photos=photos)
        state = FormState()

        second = service.rows()[1]
        service.select_for_edit(state, second.id)
        service.submit(state, {"party": "พรรค A"})

        assert [m.party for m in store.members] == ["", "พรรค A"]


class TestConcurrentSessions:
    def test_parallel_submits_all_stored(self, service, kv):
        def session(n: int) -> int:
            state = FormState()
            saved = 0
            for i in range(30):
                saved += service.submit(state, {**SOMCHAI, "party": f"{n}-{i}"}).saved
            return saved

        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(session, range(4)))

        assert results == [30, 30, 30, 30]
        assert service.count() == 120
        snapshot = json.loads(kv.get_raw("members"))
        assert len(snapshot) == 120
        assert len({r["id"] for r in snapshot}) == 120
