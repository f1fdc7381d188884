from leadforms.signup.service import SubmissionState
from leadforms.signup.ui_sections import FIELDS, button_label, collect_fields, session_key
from leadforms.signup.validators import REQUIRED_FIELDS


def test_every_required_field_is_rendered():
    names = {field_def.name for field_def in FIELDS}
    assert set(REQUIRED_FIELDS) <= names
    assert "additional-notes" in names


def test_collect_fields_reads_session_keys():
    session = {
        session_key("first-name"): "Jane",
        session_key("employee-count"): "4",
        session_key("phone-number"): None,
    }
    fields = collect_fields(session)
    assert fields["first-name"] == "Jane"
    assert fields["employee-count"] == "4"
    assert fields["phone-number"] == ""
    assert fields["role"] == ""


def test_button_label_per_state():
    assert button_label(SubmissionState.IDLE) == "Connect with us"
    assert button_label(SubmissionState.LOADING) == "Submitting"
    assert button_label(SubmissionState.SUCCESS) == "✓ Sent!"


class BrokenFields(dict):
    def get(self, key, default=None):
        raise RuntimeError("session went away")


class FakeTransport:
    def __init__(self):
        self.sent = []

    async def send(self, payload):
        self.sent.append(payload)


def test_run_submit_logs_and_reports_unexpected_errors(monkeypatch, caplog):
    from leadforms.signup import ui_sections
    from leadforms.signup.service import SubmissionController

    shown = []
    monkeypatch.setattr(ui_sections.st, "error", shown.append)
    transport = FakeTransport()
    controller = SubmissionController(transport)

    with caplog.at_level("ERROR"):
        result = ui_sections.run_submit(controller, BrokenFields())

    assert result is None
    assert len(shown) == 1
    assert "signup.submit.error" in caplog.text
    assert transport.sent == []
    assert controller.state is SubmissionState.IDLE
    assert not controller.in_flight
