from leadforms.signup.mapper import assemble, clamp_non_negative


def _fields(**overrides):
    data = {
        "first-name": " Jane ",
        "last-name": "Doe ",
        "email": " jane@acme.io",
        "phone-number": "(555) 555-1234 Ext.",
        "company-name": "Acme LLC",
        "role": " Founder",
        "employee-count": "10",
        "additional-notes": "",
    }
    data.update(overrides)
    return data


def test_assemble_trims_and_types_fields():
    payload = assemble(_fields())
    assert payload.first_name == "Jane"
    assert payload.last_name == "Doe"
    assert payload.email == "jane@acme.io"
    assert payload.role == "Founder"
    assert payload.employee_count == 10
    assert payload.additional_notes == ""


def test_assemble_to_dict_uses_wire_keys():
    body = assemble(_fields(**{"additional-notes": "  call after 5pm  "})).to_dict()
    assert body == {
        "firstName": "Jane",
        "lastName": "Doe",
        "email": "jane@acme.io",
        "phoneNumber": "(555) 555-1234 Ext.",
        "companyName": "Acme LLC",
        "role": "Founder",
        "employeeCount": 10,
        "additionalNotes": "call after 5pm",
    }


def test_assemble_coerces_bad_employee_count_to_zero():
    assert assemble(_fields(**{"employee-count": "lots"})).employee_count == 0
    assert assemble(_fields(**{"employee-count": "-4"})).employee_count == 0
    assert assemble(_fields(**{"employee-count": ""})).employee_count == 0
    assert assemble(_fields(**{"employee-count": "2.7"})).employee_count == 2
    assert assemble(_fields(**{"employee-count": 0})).employee_count == 0


def test_assemble_accepts_missing_keys():
    payload = assemble({})
    assert payload.first_name == ""
    assert payload.employee_count == 0
    assert payload.additional_notes == ""


def test_clamp_non_negative():
    assert clamp_non_negative("12") == "12"
    assert clamp_non_negative("-1") == "0"
    assert clamp_non_negative("abc") == "0"
    assert clamp_non_negative("nan") == "0"
    assert clamp_non_negative("") == ""
    assert clamp_non_negative(None) == ""
