"""Tests for the Setting descriptor and SettingsBase."""

import pytest

from model.setting import Setting, SettingsBase


class Sample(SettingsBase):
    flag = Setting(bool, True)
    level = Setting(int, 5, minimum=1, maximum=10)
    numbers = Setting(list, default_factory=lambda: [1, 2])
    changes = Setting(list, default_factory=list)
    watched = Setting(int, 0, on_change=lambda obj, value: obj.changes.append(value))


class Derived(Sample):
    extra = Setting(str, "x")


class TestSettingDescriptor:
    """Test Setting access on classes and instances."""

    def test_class_access_returns_descriptor(self):
        """Accessing on the class gives the metadata."""
        assert isinstance(Sample.level, Setting)
        assert Sample.level.default == 5
        assert Sample.level.name == "level"

    def test_instance_access_returns_default(self):
        """Unset values read as the default."""
        assert Sample().level == 5
        assert Sample().flag is True

    def test_kwargs_set_values(self):
        """Constructor keyword arguments assign settings."""
        sample = Sample(level=7, flag=False)
        assert sample.level == 7
        assert sample.flag is False

    def test_unknown_kwargs_ignored(self):
        """Keyword arguments that are not settings are ignored."""
        sample = Sample(unknown=1)
        assert not hasattr(sample, "unknown")

    def test_below_minimum_raises(self):
        """Values below the minimum are rejected."""
        with pytest.raises(ValueError, match="below minimum"):
            Sample().level = 0

    def test_above_maximum_raises(self):
        """Values above the maximum are rejected."""
        with pytest.raises(ValueError, match="above maximum"):
            Sample().level = 11

    def test_default_factory_not_shared(self):
        """Each instance gets its own mutable default."""
        first, second = Sample(), Sample()
        first.numbers.append(3)
        assert second.numbers == [1, 2]

    def test_default_property_is_fresh(self):
        """Class-level default returns a new list each time."""
        assert Sample.numbers.default is not Sample.numbers.default

    def test_on_change_called_after_assignment(self):
        """on_change receives the object and the new value."""
        sample = Sample()
        sample.watched = 3
        sample.watched = 4
        assert sample.changes == [3, 4]


class TestSettingsBase:
    """Test the settings registry and reset."""

    def test_get_settings_in_declaration_order(self):
        """Registry lists settings in declaration order."""
        assert list(Sample.get_settings()) == ["flag", "level", "numbers", "changes", "watched"]

    def test_subclass_registry_is_separate(self):
        """A subclass inherits settings without adding to its parent."""
        assert "extra" in Derived.get_settings()
        assert "flag" in Derived.get_settings()
        assert "extra" not in Sample.get_settings()

    def test_reset_all(self):
        """reset_settings() without names resets everything."""
        sample = Sample(level=9, flag=False)
        sample.reset_settings()
        assert sample.level == 5
        assert sample.flag is True

    def test_reset_named_only(self):
        """reset_settings() with names leaves other settings alone."""
        sample = Sample(level=9, flag=False)
        sample.reset_settings(["level"])
        assert sample.level == 5
        assert sample.flag is False

    def test_repr_lists_values(self):
        assert "level=5" in repr(Sample())
