"""Generic validated record.

Subclasses declare an ``id`` (an ``IdentifierField``) and their mutable
``RecordField`` attributes in order. Construction validates the id first and
then every field in declaration order; assigning to a field re-runs its rules
and leaves the previous value in place when they fail.
"""

from typing import Any, ClassVar

from roster.domain.clock import SYSTEM_CLOCK, Clock
from roster.domain.errors import ValidationError
from roster.domain.rules import Rule, identifier

ID_MAX_LENGTH = 10


class RecordField:
    """Data descriptor that checks its rules before every store."""

    def __init__(self, label: str, *rules: Rule) -> None:
        self.label = label
        self.rules = rules
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        try:
            return instance.__dict__[self.name]
        except KeyError:
            raise AttributeError(self.name) from None

    def __set__(self, instance: "Record", value: Any) -> None:
        self.validate(value, instance.clock)
        instance.__dict__[self.name] = value

    def validate(self, value: Any, clock: Clock) -> None:
        for rule in self.rules:
            message = rule(self.label, value, clock)
            if message is not None:
                raise ValidationError(self.name, message)


class IdentifierField(RecordField):
    """Record id: validated once at construction, never reassigned."""

    def __init__(self, label: str, limit: int = ID_MAX_LENGTH) -> None:
        super().__init__(label, *identifier(limit))

    def __set__(self, instance: "Record", value: Any) -> None:
        if self.name in instance.__dict__:
            raise AttributeError(f"{self.label} cannot be changed")
        super().__set__(instance, value)


class Record:
    """Base for records with one immutable id and ordered, rule-checked fields.

    Positional and keyword arguments map onto ``id`` followed by the declared
    fields. ``clock`` is the time source for rules such as ``not_in_past``.
    """

    label: ClassVar[str] = "Record"
    id = IdentifierField("Record ID")
    field_names: ClassVar[tuple[str, ...]] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        names: list[str] = []
        for klass in reversed(cls.__mro__):
            for name, attr in vars(klass).items():
                if (
                    isinstance(attr, RecordField)
                    and not isinstance(attr, IdentifierField)
                    and name not in names
                ):
                    names.append(name)
        cls.field_names = tuple(names)

    def __init__(self, *args: Any, clock: Clock | None = None, **kwargs: Any) -> None:
        self.clock = clock or SYSTEM_CLOCK
        values = self._bind(args, kwargs)
        self.id = values["id"]
        for name in self.field_names:
            setattr(self, name, values[name])

    @classmethod
    def _bind(cls, args: tuple[Any, ...], kwargs: dict[str, Any]) -> dict[str, Any]:
        names = ("id", *cls.field_names)
        if len(args) > len(names):
            raise TypeError(
                f"{cls.__name__}() takes {len(names)} arguments but {len(args)} were given"
            )
        values = dict(zip(names, args))
        for name, value in kwargs.items():
            if name not in names:
                raise TypeError(f"{cls.__name__}() got an unexpected argument '{name}'")
            if name in values:
                raise TypeError(f"{cls.__name__}() got multiple values for '{name}'")
            values[name] = value
        missing = [name for name in names if name not in values]
        if missing:
            raise TypeError(f"{cls.__name__}() missing arguments: {', '.join(missing)}")
        return values

    def set(self, name: str, value: Any) -> None:
        """Assign one mutable field by name."""
        if name not in self.field_names:
            raise ValidationError(name, f"{self.label} has no updatable field '{name}'")
        setattr(self, name, value)

    def as_dict(self) -> dict[str, Any]:
        return {"id": self.id, **{name: getattr(self, name) for name in self.field_names}}

    def __repr__(self) -> str:
        fields = ", ".join(f"{key}={value!r}" for key, value in self.as_dict().items())
        return f"{type(self).__name__}({fields})"
