from __future__ import annotations

from dataclasses import dataclass

import pytest

from envconf.errors import FieldNotSettableError, NilReferenceError, UnsupportedFieldTypeError
from envconf.record.assign import assign_fields


@dataclass
class MixedConfig:
    FIRST: str = ""
    N: int = 0
    LAST: str = ""


@dataclass(frozen=True)
class FrozenConfig:
    HOST: str = "default"


def test_assigns_matching_string_fields():
    config = MixedConfig()
    assign_fields(config, {"FIRST": "a", "LAST": "z", "UNUSED": "x"})
    assert config == MixedConfig(FIRST="a", N=0, LAST="z")


def test_missing_values_leave_defaults():
    config = MixedConfig(FIRST="keep")
    assign_fields(config, {})
    assert config.FIRST == "keep"


def test_values_are_assigned_verbatim():
    config = MixedConfig()
    assign_fields(config, {"FIRST": "  spaced \"quoted\" "})
    assert config.FIRST == "  spaced \"quoted\" "


def test_non_string_field_aborts_without_rollback():
    config = MixedConfig()
    with pytest.raises(UnsupportedFieldTypeError) as info:
        assign_fields(config, {"FIRST": "a", "N": "5", "LAST": "z"})
    assert info.value.field_name == "N"
    assert info.value.field_type is int
    assert "N" in str(info.value)
    assert config.FIRST == "a"
    assert config.N == 0
    assert config.LAST == ""


def test_non_string_field_without_value_is_fine():
    config = MixedConfig()
    assign_fields(config, {"LAST": "z"})
    assert config.LAST == "z"


def test_frozen_record_is_not_settable():
    config = FrozenConfig()
    with pytest.raises(FieldNotSettableError) as info:
        assign_fields(config, {"HOST": "x"})
    assert info.value.field_name == "HOST"
    assert config.HOST == "default"


def test_none_record():
    with pytest.raises(NilReferenceError):
        assign_fields(None, {"HOST": "x"})
