from __future__ import annotations

import dataclasses
import typing
import weakref
from dataclasses import dataclass
from typing import Any, Callable, List, Tuple

from envconf.errors import NilReferenceError, NotAPointerError, NotAStructError

Setter = Callable[[Any, str], None]

# entries go away with their record type
_DESCRIPTORS: weakref.WeakKeyDictionary[type, Tuple[FieldDescriptor, ...]] = weakref.WeakKeyDictionary()


@dataclass(frozen=True)
class FieldDescriptor:
    name: str
    field_type: Any
    settable: bool
    setter: Setter

    @property
    def is_text(self) -> bool:
        return self.field_type is str or self.field_type == "str"


def validate_record(record: Any) -> None:
    """Reject anything that cannot be populated in place."""
    if record is None:
        raise NilReferenceError("config record was None")
    if isinstance(record, type):
        raise NotAPointerError(
            f"config record must be an instance, got the class {record.__name__}"
        )
    if not dataclasses.is_dataclass(record):
        raise NotAStructError(
            f"config can only be mapped to a dataclass instance, got {type(record).__name__}"
        )


def _make_setter(name: str) -> Setter:
    def _set(record: Any, value: str) -> None:
        setattr(record, name, value)

    return _set


def _resolve_hints(record_type: type) -> dict:
    try:
        return typing.get_type_hints(record_type)
    except (NameError, TypeError):
        # unresolvable forward refs; fall back to the raw annotations below
        return {}


def describe_record(record_type: type) -> Tuple[FieldDescriptor, ...]:
    """Field-descriptor table for a dataclass type, in declaration order."""
    if not dataclasses.is_dataclass(record_type):
        raise NotAStructError(f"{record_type!r} is not a dataclass")
    cached = _DESCRIPTORS.get(record_type)
    if cached is not None:
        return cached
    hints = _resolve_hints(record_type)
    frozen = record_type.__dataclass_params__.frozen
    descriptors = tuple(
        FieldDescriptor(
            name=f.name,
            field_type=hints.get(f.name, f.type),
            settable=not frozen,
            setter=_make_setter(f.name),
        )
        for f in dataclasses.fields(record_type)
    )
    _DESCRIPTORS[record_type] = descriptors
    return descriptors


def field_names(record: Any) -> List[str]:
    validate_record(record)
    return [descriptor.name for descriptor in describe_record(type(record))]
