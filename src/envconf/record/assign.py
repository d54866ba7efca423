from __future__ import annotations

from typing import Any, Mapping

from envconf.errors import FieldNotSettableError, UnsupportedFieldTypeError
from envconf.record.fields import describe_record, validate_record
from envconf.utils.logger import get_logger

logger = get_logger(__name__)


def assign_fields(record: Any, values: Mapping[str, str]) -> None:
    """Copy matching values onto the record's ``str`` fields, in declaration order.

    Fields without a value are left untouched. The first unsettable or
    non-``str`` field that has a value aborts the call; fields assigned before
    it keep their new values.
    """
    validate_record(record)
    assigned = 0
    for descriptor in describe_record(type(record)):
        if descriptor.name not in values:
            continue
        if not descriptor.settable:
            raise FieldNotSettableError(descriptor.name)
        if not descriptor.is_text:
            raise UnsupportedFieldTypeError(descriptor.name, descriptor.field_type)
        descriptor.setter(record, values[descriptor.name])
        assigned += 1
        logger.debug("config_field_assigned", field=descriptor.name)
    logger.debug("config_fields_assigned", record=type(record).__name__, assigned=assigned)
