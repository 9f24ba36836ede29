import pytest

from app.domain.entities.application import (
    Application,
    ApplicationState,
    can_transition,
    pending_key_for,
)
from app.domain.errors import InvalidApplicationStateError


def _pending(application_id: int = 1) -> Application:
    return Application(user_id=1, property_id=10, id=application_id)


def test_new_application_starts_pending():
    application = _pending()

    assert application.state == ApplicationState.PENDING
    assert application.is_pending
    assert application.pending_key == "1:10"


def test_accept_from_pending():
    application = _pending()

    application.accept()

    assert application.state == ApplicationState.ACCEPTED
    assert application.is_accepted
    assert application.pending_key is None


def test_reject_from_pending():
    application = _pending()

    application.reject()

    assert application.state == ApplicationState.REJECTED
    assert application.pending_key is None


@pytest.mark.parametrize("terminal", [ApplicationState.ACCEPTED, ApplicationState.REJECTED])
def test_terminal_states_do_not_transition(terminal):
    application = Application(user_id=1, property_id=10, state=terminal, id=7)

    with pytest.raises(InvalidApplicationStateError) as exc_info:
        application.accept()
    assert exc_info.value.code == "INVALID_STATE"
    assert exc_info.value.current_state == terminal.value

    with pytest.raises(InvalidApplicationStateError):
        application.reject()

    assert application.state == terminal


def test_transition_table():
    assert can_transition(ApplicationState.PENDING, ApplicationState.ACCEPTED)
    assert can_transition(ApplicationState.PENDING, ApplicationState.REJECTED)
    assert not can_transition(ApplicationState.ACCEPTED, ApplicationState.REJECTED)
    assert not can_transition(ApplicationState.REJECTED, ApplicationState.PENDING)
    assert not can_transition(ApplicationState.PENDING, ApplicationState.PENDING)


def test_pending_key_format():
    assert pending_key_for(42, 7) == "42:7"
