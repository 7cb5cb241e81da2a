"""Tests for admission plugin defaults and merging."""

import pytest

from src.controlplane.admission import default_admission_plugins, merge_admission_plugins
from src.controlplane.models import AdmissionPlugin


def _names(plugins: list[AdmissionPlugin]) -> list[str]:
    return [p.name for p in plugins]


class TestMergeAdmissionPlugins:
    """Tests for merging user plugins into the defaults."""

    def test_override_replaces_in_place_and_unknown_is_appended(self) -> None:
        """[A, B, C] + [B', D] should give [A, B', C, D]."""
        defaults = [AdmissionPlugin(name="A"), AdmissionPlugin(name="B"), AdmissionPlugin(name="C")]
        b_prime = AdmissionPlugin(name="B", config={"key": "value"})
        d = AdmissionPlugin(name="D")

        merged = merge_admission_plugins(defaults, [b_prime, d])

        assert _names(merged) == ["A", "B", "C", "D"]
        assert merged[1] is b_prime
        assert merged[3] is d

    def test_inputs_are_not_modified(self) -> None:
        defaults = [AdmissionPlugin(name="A"), AdmissionPlugin(name="B")]
        overrides = [AdmissionPlugin(name="B", config={"x": 1})]

        merge_admission_plugins(defaults, overrides)

        assert defaults[1].config is None
        assert len(defaults) == 2
        assert len(overrides) == 1

    def test_merge_is_deterministic(self) -> None:
        defaults = [AdmissionPlugin(name="A"), AdmissionPlugin(name="B")]
        overrides = [AdmissionPlugin(name="B", config={"x": 1}), AdmissionPlugin(name="Z")]

        first = merge_admission_plugins(defaults, overrides)
        second = merge_admission_plugins(defaults, overrides)

        assert first == second

    def test_merging_defaults_with_themselves_returns_them(self) -> None:
        defaults = default_admission_plugins("1.12.0")

        assert merge_admission_plugins(defaults, defaults) == defaults

    def test_empty_overrides_returns_defaults(self) -> None:
        defaults = [AdmissionPlugin(name="A")]

        merged = merge_admission_plugins(defaults, [])

        assert merged == defaults
        assert merged is not defaults

    def test_empty_defaults_appends_all_overrides(self) -> None:
        overrides = [AdmissionPlugin(name="X"), AdmissionPlugin(name="Y")]

        assert _names(merge_admission_plugins([], overrides)) == ["X", "Y"]

    def test_duplicate_default_names_only_first_is_replaced(self) -> None:
        defaults = [AdmissionPlugin(name="A"), AdmissionPlugin(name="A")]
        override = AdmissionPlugin(name="A", config={"v": 2})

        merged = merge_admission_plugins(defaults, [override])

        assert merged[0] is override
        assert merged[1].config is None

    def test_duplicate_unmatched_overrides_are_all_appended(self) -> None:
        """Appended overrides are not merge targets for later overrides."""
        overrides = [AdmissionPlugin(name="D", config=1), AdmissionPlugin(name="D", config=2)]

        merged = merge_admission_plugins([AdmissionPlugin(name="A")], overrides)

        assert _names(merged) == ["A", "D", "D"]


class TestDefaultAdmissionPlugins:
    """Tests for the per-version default plugin table."""

    @pytest.mark.parametrize("version", ["1.10.0", "1.11.5", "1.12.1"])
    def test_initializers_enabled_before_1_13(self, version: str) -> None:
        assert "Initializers" in _names(default_admission_plugins(version))

    def test_initializers_dropped_in_1_13(self) -> None:
        names = _names(default_admission_plugins("1.13.0"))

        assert "Initializers" not in names
        assert names[0] == "Priority"
        assert names[-1] == "ValidatingAdmissionWebhook"

    def test_versions_outside_table_are_clamped(self) -> None:
        assert default_admission_plugins("1.9.3") == default_admission_plugins("1.10.0")
        assert default_admission_plugins("1.20.0") == default_admission_plugins("1.13.0")

    def test_returns_fresh_list(self) -> None:
        first = default_admission_plugins("1.12.0")
        first.append(AdmissionPlugin(name="Extra"))

        assert "Extra" not in _names(default_admission_plugins("1.12.0"))

    def test_invalid_version_raises(self) -> None:
        with pytest.raises(ValueError):
            default_admission_plugins("latest")
