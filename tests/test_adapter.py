"""Tests for the MaskedField two-way adapter."""

import pytest

from inputmask.core.exceptions import ValidationError
from inputmask.engine.mask_engine import MaskEngine
from inputmask.service.adapter import MaskedField


@pytest.fixture
def field():
    return MaskedField(MaskEngine("NNN-LLLL"))


def test_write_updates_display_and_emits_raw(field):
    emitted = []
    field.register_on_change(emitted.append)

    raw = field.write("12a3BcDe")

    assert field.displayed == "123-BcDe"
    assert raw == "12a3BcD"
    assert emitted == ["12a3BcD"]


def test_raw_value_comes_from_typed_text(field):
    # Unmasking reads what was typed, not the reformatted display value
    raw = field.write("(12) 34-abcd")
    assert field.displayed == "123-abcd"
    assert raw == "1234abc"


def test_write_without_callbacks(field):
    assert field.write("123") == "123"
    field.blur()


def test_read_formats_model_value(field):
    assert field.read("123abcd") == "123-abcd"
    assert field.displayed == "123-abcd"


def test_read_ignores_none(field):
    field.read("12")
    assert field.read(None) == "12"
    assert field.displayed == "12"


def test_write_rejects_non_string(field):
    with pytest.raises(ValidationError):
        field.write(None)


def test_blur_notifies_touched(field):
    touched = []
    field.register_on_touched(lambda: touched.append(True))

    field.blur()

    assert touched == [True]


def test_set_template_changes_engine(field):
    field.set_template("NN/NN")
    assert field.engine.raw_capacity == 4
    assert field.write("1231") == "1231"
    assert field.displayed == "12/31"
