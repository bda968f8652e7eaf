"""
Generation State Tests
"""

import pytest


class TestGenerationStateDefaults:
    """Default values and reset"""

    def test_documented_defaults(self):
        from core.generation_state import GenerationState

        state = GenerationState()
        assert state.config.version_number == "1.0"
        assert state.config.supports_multiple_modes is False
        assert state.config.is_closing is False
        assert state.options.hex_color == "#3B82F6"
        assert state.options.neutral == "#6B7280"
        assert state.options.success == "#10B981"
        assert state.options.error == "#EF4444"
        assert state.options.appearance == "both"
        assert state.options.include_primitives is True
        assert state.options.export_demo is False
        assert state.options.export_documentation is False
        assert state.options.font_family == "none"
        assert state.errors == []
        assert state.warnings == []

    def test_reset_restores_defaults(self):
        """reset() drops updates, handles and diagnostics."""
        from core.generation_state import GenerationState, NamespaceKind

        state = GenerationState()
        state.update_options(hex_color="#FF5733", appearance="dark")
        state.update_config(version_number="2.3", is_closing=True)
        state.set_namespace_handle(NamespaceKind.PRIMITIVE, object())
        state.add_error("boom")
        state.add_warning("careful")

        state.reset()

        assert state.options.hex_color == "#3B82F6"
        assert state.options.appearance == "both"
        assert state.config.version_number == "1.0"
        assert state.is_closing is False
        assert state.get_namespace_handle(NamespaceKind.PRIMITIVE) is None
        assert not state.has_errors()
        assert not state.has_warnings()


class TestGenerationStateUpdates:
    """Shallow merge updates"""

    def test_update_options_keeps_unspecified_fields(self):
        from core.generation_state import GenerationState

        state = GenerationState()
        state.update_options(hex_color="#FF5733")

        assert state.options.hex_color == "#FF5733"
        assert state.options.neutral == "#6B7280"
        assert state.options.appearance == "both"

    def test_update_accepts_mapping(self):
        from core.generation_state import GenerationState

        state = GenerationState()
        state.update_config({"version_number": "3.1", "supports_multiple_modes": True})

        assert state.config.version_number == "3.1"
        assert state.config.supports_multiple_modes is True

    def test_unknown_fields_are_ignored(self):
        """Unknown keys are logged and skipped, never raised."""
        from core.generation_state import GenerationState

        state = GenerationState()
        state.update_options(not_a_field=1, hex_color="#000000")

        assert state.options.hex_color == "#000000"
        assert not hasattr(state.options, "not_a_field")

    def test_returned_options_are_copies(self):
        """Mutating a returned record does not affect the live state."""
        from core.generation_state import GenerationState

        state = GenerationState()
        options = state.options
        options.hex_color = "#123456"

        assert state.options.hex_color == "#3B82F6"


class TestSnapshots:
    """Snapshot isolation"""

    def test_snapshot_is_isolated_from_later_changes(self):
        """Diagnostics added after a snapshot are not visible in it."""
        from core.generation_state import GenerationState

        state = GenerationState()
        state.add_error("first")
        snapshot = state.get_snapshot()

        state.add_error("second")

        assert state.error_count() == 2
        assert snapshot.error_count == 1
        assert snapshot.runtime.errors == ["first"]

    def test_mutating_snapshot_leaves_state_untouched(self):
        from core.generation_state import GenerationState

        state = GenerationState()
        snapshot = state.get_snapshot()
        snapshot.options.hex_color = "#000000"
        snapshot.runtime.errors.append("injected")

        assert state.options.hex_color == "#3B82F6"
        assert state.errors == []


class TestDiagnostics:
    """Errors, warnings and the diagnostic sink"""

    def test_add_and_clear(self):
        from core.generation_state import GenerationState

        state = GenerationState()
        state.add_error("e1")
        state.add_warning("w1")
        state.add_warning("w2")

        assert state.has_errors() and state.has_warnings()
        assert state.error_count() == 1
        assert state.warning_count() == 2

        state.clear_warnings()
        assert state.warning_count() == 0
        assert state.error_count() == 1

        state.clear_all()
        assert not state.has_errors()

    def test_errors_preserve_order(self):
        from core.generation_state import GenerationState

        state = GenerationState()
        for message in ("a", "b", "c"):
            state.add_error(message)

        assert state.errors == ["a", "b", "c"]

    def test_sink_receives_level_and_message(self):
        from core.generation_state import GenerationState

        received = []
        state = GenerationState(sink=lambda level, message: received.append((level, message)))
        state.add_error("bad")
        state.add_warning("meh")

        assert received == [("error", "bad"), ("warning", "meh")]

    def test_failing_sink_does_not_raise(self):
        """A broken sink is logged; the diagnostic is still recorded."""
        from core.generation_state import GenerationState

        def broken(level, message):
            raise RuntimeError("sink down")

        state = GenerationState(sink=broken)
        state.add_error("still recorded")

        assert state.errors == ["still recorded"]


class TestNamespaceHandles:
    """Namespace handle storage"""

    def test_set_and_replace_handle(self):
        from core.generation_state import GenerationState, NamespaceKind

        state = GenerationState()
        first, second = object(), object()
        state.set_namespace_handle(NamespaceKind.SPACING, first)
        state.set_namespace_handle(NamespaceKind.SPACING, second)

        assert state.get_namespace_handle(NamespaceKind.SPACING) is second
        assert state.get_namespace_handle(NamespaceKind.FONT) is None

    def test_handle_by_value(self):
        """Kinds may be given by their string value."""
        from core.generation_state import GenerationState, NamespaceKind

        state = GenerationState()
        handle = object()
        state.set_namespace_handle("semantic", handle)

        assert state.get_namespace_handle(NamespaceKind.SEMANTIC) is handle
        assert state.get_namespace_handle("unknown") is None

    def test_snapshot_shares_handles(self):
        """A snapshot refers to the live namespace, not a detached copy."""
        from core.generation_state import GenerationState, NamespaceKind
        from models.variable import VariableCollection

        state = GenerationState()
        handle = VariableCollection(name="SCS Primitive 1.0")
        state.set_namespace_handle(NamespaceKind.PRIMITIVE, handle)

        snapshot = state.get_snapshot()
        snapshot.runtime.collections[NamespaceKind.SPACING] = object()

        assert snapshot.runtime.collections[NamespaceKind.PRIMITIVE] is handle
        assert state.get_namespace_handle(NamespaceKind.SPACING) is None


class TestValidation:
    """validate() reports every violated rule"""

    def test_defaults_are_valid(self):
        from core.generation_state import GenerationState

        result = GenerationState().validate()
        assert result.is_valid
        assert result.errors == []

    def test_all_violations_reported(self):
        from core.generation_state import GenerationState

        state = GenerationState()
        state.update_config(version_number="")
        state.update_options(hex_color="", appearance="sepia")

        result = state.validate()

        assert not result.is_valid
        assert result.errors == [
            "Version number is required",
            "Hex color is required",
            "Appearance mode must be one of: light, dark, both",
        ]

    @pytest.mark.parametrize("appearance", ["light", "dark", "both"])
    def test_each_appearance_is_valid(self, appearance):
        from core.generation_state import GenerationState

        state = GenerationState()
        state.update_options(appearance=appearance)

        assert state.validate().is_valid


class TestSnapshotBeforeClear:
    """A snapshot keeps its counts after clear_all()"""

    def test_counts_survive_clear_all(self):
        from core.generation_state import GenerationState

        state = GenerationState()
        state.add_error("e1")
        state.add_error("e2")
        state.add_warning("w1")
        snapshot = state.get_snapshot()

        assert state.error_count() == 2
        assert state.warning_count() == 1

        state.clear_all()

        assert state.error_count() == 0
        assert state.warning_count() == 0
        assert snapshot.error_count == 2
        assert snapshot.warning_count == 1
