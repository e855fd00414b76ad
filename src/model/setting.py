"""Setting descriptor for the backing models.

Backing models (board view options, engine profiles, SGF settings, ...) are
small mutable records. Each attribute is declared with a ``Setting``
descriptor so that the declaration carries its own metadata:

    class TouchModel(SettingsBase):
        maximum_zoom_scale = Setting(float, 3.0, minimum=1.0, maximum=3.0)

    touch = TouchModel()
    touch.maximum_zoom_scale = 2.0           # Set value
    print(touch.maximum_zoom_scale)          # Get value: 2.0

    # Metadata lives on the class
    field = TouchModel.maximum_zoom_scale
    print(field.default)                     # 3.0

Preference fields use the class-level metadata to find the value they reset
to (see ``model.preference.bound``).
"""

from __future__ import annotations

from typing import Any, Callable


class Setting:
    """Descriptor that holds one setting value plus its metadata.

    When accessed on the class, returns the Setting itself (with metadata).
    When accessed on an instance, returns the actual value.
    """

    def __init__(
        self,
        type_: type,
        default: Any = None,
        *,
        default_factory: Callable[[], Any] | None = None,
        minimum: float | None = None,
        maximum: float | None = None,
        on_change: Callable[[Any, Any], None] | None = None,
    ):
        """Create a Setting descriptor.

        Args:
            type_: The Python type of this setting (bool, int, float, an Enum, ...)
            default: Default value (use default_factory for mutable defaults)
            default_factory: Factory for mutable defaults such as lists
            minimum: Lowest accepted value for numeric settings
            maximum: Highest accepted value for numeric settings
            on_change: Called as on_change(obj, value) after every assignment
        """
        self.type_ = type_
        self._default = default
        self.default_factory = default_factory
        self.minimum = minimum
        self.maximum = maximum
        self.on_change = on_change
        self.name: str | None = None

    @property
    def default(self) -> Any:
        """A fresh default value."""
        if self.default_factory:
            return self.default_factory()
        return self._default

    def __set_name__(self, owner: type, name: str) -> None:
        """Register the setting with its owner class."""
        self.name = name
        # Subclasses get their own registry so siblings don't share entries
        if "_settings" not in owner.__dict__:
            owner._settings = dict(getattr(owner, "_settings", {}))
        owner._settings[name] = self

    def __get__(self, obj: Any, owner: type | None = None) -> Any:
        if obj is None:
            return self
        if self.name not in obj.__dict__:
            if self.default_factory:
                obj.__dict__[self.name] = self.default_factory()
            else:
                return self._default
        return obj.__dict__[self.name]

    def __set__(self, obj: Any, value: Any) -> None:
        self.check(value)
        obj.__dict__[self.name] = value
        if self.on_change:
            self.on_change(obj, value)

    def check(self, value: Any) -> None:
        """Raise ValueError if a numeric value lies outside [minimum, maximum]."""
        if self.minimum is not None and value < self.minimum:
            raise ValueError(f"{self.name}: {value} is below minimum {self.minimum}")
        if self.maximum is not None and value > self.maximum:
            raise ValueError(f"{self.name}: {value} is above maximum {self.maximum}")


class SettingsBase:
    """Base class for Setting-based backing models."""

    _settings: dict[str, Setting]

    def __init__(self, **kwargs: Any) -> None:
        """Initialize the model with optional setting values."""
        settings = self.get_settings()
        for name, value in kwargs.items():
            if name in settings:
                setattr(self, name, value)

    @classmethod
    def get_settings(cls) -> dict[str, Setting]:
        """Get all Setting descriptors for this class."""
        return getattr(cls, "_settings", {})

    def reset_settings(self, names: list[str] | tuple[str, ...] | None = None) -> None:
        """Assign defaults to the named settings (all settings when None)."""
        settings = self.get_settings()
        for name in names if names is not None else settings:
            setattr(self, name, settings[name].default)

    def __repr__(self) -> str:
        values = ", ".join(f"{name}={getattr(self, name)!r}" for name in self.get_settings())
        return f"{type(self).__name__}({values})"
