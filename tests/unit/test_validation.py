import pytest

from judging.errors import ValidationError
from judging.utils.validation import check_range, clean_text, require_text, with_default


def test_clean_text_trims_and_blanks_to_none():
    assert clean_text("  Ann Lee  ") == "Ann Lee"
    assert clean_text("   ") is None
    assert clean_text("") is None
    assert clean_text(None) is None


def test_require_text_returns_trimmed_values():
    name, email = require_text("Name and email are required", " Ann ", "ann@x.com ")
    assert (name, email) == ("Ann", "ann@x.com")


@pytest.mark.parametrize("values", [(None, "a@x.com"), ("Ann", "  "), ("", "")])
def test_require_text_rejects_missing_member(values):
    with pytest.raises(ValidationError) as exc:
        require_text("Name and email are required", *values)
    assert exc.value.msg == "Name and email are required"
    assert exc.value.status_code == 400


def test_with_default_only_replaces_none():
    assert with_default(None, 50) == 50
    assert with_default(10, 50) == 10
    assert with_default(0, 50) == 0


@pytest.mark.parametrize("value", [1, 50, 100])
def test_check_range_accepts_half_open_interval(value):
    assert check_range(value, 0, 100, "out of range") == value


@pytest.mark.parametrize("value", [0, -5, 101])
def test_check_range_rejects_outside(value):
    with pytest.raises(ValidationError) as exc:
        check_range(value, 0, 100, "Max score must be between 1 and 100")
    assert "Max score" in exc.value.msg


def test_check_range_passes_absent_value():
    assert check_range(None, 0, 100, "out of range") is None
