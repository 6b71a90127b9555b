import pytest

from src.employee_vcard.employee_vcard.common.validators import (
    is_safe_identifier,
    require_css_color,
    require_identifier,
    require_non_empty,
)
from src.employee_vcard.employee_vcard.core.exceptions import ValidationError


@pytest.mark.parametrize("value", ["abc123", "A-b_c", "x" * 128])
def test_safe_identifiers(value):
    assert is_safe_identifier(value)


@pytest.mark.parametrize("value", ["", "abc\n", "../etc/passwd", "a/b", "a b", "a.json", "x" * 129, "café"])
def test_unsafe_identifiers(value):
    assert not is_safe_identifier(value)


def test_require_identifier_strips_whitespace():
    assert require_identifier("  abc123 ") == "abc123"


def test_require_identifier_rejects_blank():
    with pytest.raises(ValidationError):
        require_identifier("   ")


def test_require_identifier_rejects_path_traversal():
    with pytest.raises(ValidationError, match="Invalid"):
        require_identifier("../secrets")


def test_require_non_empty_none():
    with pytest.raises(ValidationError, match="Missing name"):
        require_non_empty(None, "name")


@pytest.mark.parametrize("value", ["", "#222326", "#fff", "#11223344", "rebeccapurple", "rgb(1, 2, 3)", "rgba(0,0,0,0.5)", "hsl(120deg, 50%, 50%)"])
def test_css_colors_accepted(value):
    assert require_css_color(value) == value


@pytest.mark.parametrize("value", ["red; background-image:url(//x)", "url(//x)", "#12345z", "rgb(1,2,3);x", "expression(alert(1))"])
def test_css_colors_rejected(value):
    with pytest.raises(ValidationError):
        require_css_color(value)
