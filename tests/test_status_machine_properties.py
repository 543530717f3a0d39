"""Property-based tests for application status transitions."""

import pytest
from hypothesis import given, strategies as st

from jobboard.errors import InvalidStatusTransition, ValidationError
from jobboard.models import APPLICATION_STATUSES
from jobboard.services.status_machine import StatusMachine, STRICT_TRANSITIONS

statuses = st.sampled_from(APPLICATION_STATUSES)


@given(current=statuses, target=statuses)
def test_permissive_allows_every_move(current, target):
    machine = StatusMachine.for_policy("permissive")
    assert machine.transition(current, target) == target


@given(current=statuses, target=statuses)
def test_strict_matches_its_table(current, target):
    machine = StatusMachine.for_policy("strict")
    allowed = current == target or target in STRICT_TRANSITIONS[current]
    if allowed:
        assert machine.transition(current, target) == target
    else:
        with pytest.raises(InvalidStatusTransition):
            machine.transition(current, target)


@given(current=statuses)
def test_reasserting_current_status_is_always_allowed(current):
    for policy in ("permissive", "strict"):
        assert StatusMachine.for_policy(policy).can_transition(current, current)


@given(current=statuses, target=st.text().filter(lambda s: s not in APPLICATION_STATUSES))
def test_unknown_target_is_a_validation_error(current, target):
    machine = StatusMachine.for_policy("permissive")
    assert machine.can_transition(current, target) is False
    with pytest.raises(ValidationError):
        machine.transition(current, target)


def test_strict_final_states_are_terminal():
    machine = StatusMachine.for_policy("strict")
    for final in ("accepted", "rejected"):
        assert not any(machine.can_transition(final, s) for s in APPLICATION_STATUSES if s != final)


def test_policy_name_is_case_insensitive_and_defaults_to_permissive():
    assert StatusMachine.for_policy("STRICT").transitions is STRICT_TRANSITIONS
    assert StatusMachine.for_policy(None).can_transition("accepted", "pending")


def test_unknown_policy():
    with pytest.raises(ValueError, match="Unknown application status policy"):
        StatusMachine.for_policy("chaotic")
