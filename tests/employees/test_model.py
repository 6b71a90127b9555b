import pytest

from src.employee_vcard.employee_vcard.core.constants import DEFAULT_BACKGROUND_COLOR
from src.employee_vcard.employee_vcard.core.enums import BackgroundType
from src.employee_vcard.employee_vcard.core.exceptions import ValidationError
from src.employee_vcard.employee_vcard.employees.model import EmployeeRecord


def test_defaults_match_blank_form():
    assert EmployeeRecord().to_dict() == {
        "name": "",
        "company": "",
        "position": "",
        "phone": "",
        "workPhone": "",
        "email": "",
        "website": "",
        "photo": None,
        "backgroundType": "solid",
        "backgroundColor": "#222326",
    }


def test_from_dict_uses_wire_keys(jane):
    data = jane.to_dict()
    assert data["workPhone"] == ""
    assert EmployeeRecord.from_dict(data) == jane


def test_from_dict_fills_missing_keys_with_defaults():
    record = EmployeeRecord.from_dict({"name": "Solo"})
    assert record.name == "Solo"
    assert record.company == ""
    assert record.photo is None
    assert record.background_type is BackgroundType.SOLID
    assert record.background_color == DEFAULT_BACKGROUND_COLOR


def test_from_dict_ignores_unknown_keys():
    record = EmployeeRecord.from_dict({"name": "X", "schemaVersion": 1, "extra": [1, 2]})
    assert record.name == "X"


def test_none_text_becomes_empty_string():
    assert EmployeeRecord.from_dict({"email": None}).email == ""


def test_gradient_background():
    record = EmployeeRecord.from_dict({"backgroundType": "gradient", "backgroundColor": "#ff0000"})
    assert record.background_type is BackgroundType.GRADIENT
    assert record.to_dict()["backgroundType"] == "gradient"


@pytest.mark.parametrize(
    "data",
    [
        {"backgroundType": "striped"},
        {"backgroundType": ["solid"]},
        {"name": 42},
        {"photo": {"src": "x"}},
        {"backgroundColor": 123},
        {"backgroundColor": "red; background-image:url(//x)"},
    ],
)
def test_from_dict_rejects_bad_values(data):
    with pytest.raises(ValidationError):
        EmployeeRecord.from_dict(data)


def test_from_dict_rejects_non_mapping():
    with pytest.raises(ValidationError):
        EmployeeRecord.from_dict(["name", "Jane"])


def test_website_href_adds_scheme():
    assert EmployeeRecord(website="acme.test").website_href == "https://acme.test"
    assert EmployeeRecord(website="http://acme.test").website_href == "http://acme.test"
    assert EmployeeRecord().website_href == ""


def test_initial():
    assert EmployeeRecord(name="  jane").initial == "J"
    assert EmployeeRecord().initial == ""
