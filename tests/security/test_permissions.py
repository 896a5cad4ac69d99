# tests/security/test_permissions.py
import pytest

from ecole_maritime.security.permissions import (
    allowed_ui_components,
    can,
    can_access_ui_component,
    can_access_ui_components,
    fold_role_permissions,
    fold_ui_permissions,
)

MATRIX = {
    "coordinateur": {"formation": ["edit", "view"], "agent": ["view"]},
    "administrateur": {"user": ["create", "list", "set-role"]},
    "vide": {},
}

UI = {
    "coordinateur": {"agent_export_excel": True, "agent_print": False, "session_calendar_view": True},
}


class TestCan:
    @pytest.mark.parametrize(
        "role, resource, action, expected",
        [
            ("coordinateur", "formation", "edit", True),
            ("coordinateur", "formation", "view", True),
            ("coordinateur", "formation", "delete", False),
            ("coordinateur", "cours", "view", False),
            ("administrateur", "user", "set-role", True),
            ("inconnu", "formation", "view", False),
            ("vide", "formation", "view", False),
            (None, "formation", "view", False),
            ("", "formation", "view", False),
        ],
    )
    def test_matrix_lookup(self, role, resource, action, expected):
        assert can(role, resource, action, MATRIX) is expected

    def test_missing_matrix_denies(self):
        assert can("coordinateur", "formation", "view", None) is False

    def test_empty_action_list_denies(self):
        assert can("r", "x", "view", {"r": {"x": []}}) is False


class TestFold:
    def test_last_row_wins(self):
        rows = [
            ("coordinateur", "agent", ["view"]),
            ("coordinateur", "agent", ["edit", "view"]),
            ("agent", "agent", None),
        ]

        matrix = fold_role_permissions(rows)

        assert matrix == {"coordinateur": {"agent": ["edit", "view"]}, "agent": {"agent": []}}

    def test_ui_rows_are_coerced_to_bool(self):
        matrix = fold_ui_permissions([("direction", "agent_print", 1), ("direction", "agent_print", 0)])

        assert matrix == {"direction": {"agent_print": False}}


class TestUIComponents:
    def test_only_explicit_true_grants(self):
        assert can_access_ui_component("coordinateur", "agent_export_excel", UI) is True
        assert can_access_ui_component("coordinateur", "agent_print", UI) is False
        assert can_access_ui_component("coordinateur", "agent_import_data", UI) is False
        assert can_access_ui_component(None, "agent_export_excel", UI) is False
        assert can_access_ui_component("coordinateur", "agent_export_excel", None) is False

    def test_batch_lookup(self):
        out = can_access_ui_components("coordinateur", ["agent_export_excel", "agent_print"], UI)

        assert out == {"agent_export_excel": True, "agent_print": False}

    def test_allowed_components_sorted(self):
        assert allowed_ui_components("coordinateur", UI) == ["agent_export_excel", "session_calendar_view"]
        assert allowed_ui_components("direction", UI) == []
