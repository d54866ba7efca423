from __future__ import annotations

from typing import Optional


class EnvConfError(Exception):
    """Base class for every failure raised while loading a config record."""


class WorkingDirectoryError(EnvConfError, OSError):
    pass


class FileOpenError(EnvConfError, OSError):
    pass


class ScanError(EnvConfError, OSError):
    pass


class NilReferenceError(EnvConfError, ValueError):
    pass


class NotAPointerError(EnvConfError, TypeError):
    pass


class NotAStructError(EnvConfError, TypeError):
    pass


class UnsupportedFieldTypeError(EnvConfError, TypeError):
    def __init__(self, field_name: str, field_type: Optional[object] = None) -> None:
        super().__init__(f"unsupported field type for field {field_name}")
        self.field_name = field_name
        self.field_type = field_type


class FieldNotSettableError(EnvConfError, AttributeError):
    def __init__(self, field_name: str) -> None:
        super().__init__(f"cannot set field {field_name}")
        self.field_name = field_name
