# jobboard/services/status_machine.py
"""
Allowed moves between application statuses.

``permissive`` lets an employer move an application between any two
statuses (including reverting an accepted application to pending).
``strict`` only moves forward and treats accepted/rejected as final.
Re-asserting the current status is accepted under every policy.
"""
from typing import Dict, FrozenSet, Optional

from jobboard.errors import InvalidStatusTransition, ValidationError
from jobboard.models import APPLICATION_STATUSES

PERMISSIVE_TRANSITIONS: Dict[str, FrozenSet[str]] = {
    status: frozenset(APPLICATION_STATUSES) for status in APPLICATION_STATUSES
}

STRICT_TRANSITIONS: Dict[str, FrozenSet[str]] = {
    "pending": frozenset({"reviewed", "accepted", "rejected"}),
    "reviewed": frozenset({"accepted", "rejected"}),
    "accepted": frozenset(),
    "rejected": frozenset(),
}

POLICIES = {
    "permissive": PERMISSIVE_TRANSITIONS,
    "strict": STRICT_TRANSITIONS,
}


class StatusMachine:
    def __init__(self, transitions: Dict[str, FrozenSet[str]]):
        self.transitions = transitions

    @classmethod
    def for_policy(cls, policy: Optional[str]) -> "StatusMachine":
        name = (policy or "permissive").lower()
        if name not in POLICIES:
            raise ValueError(f"Unknown application status policy: {policy}")
        return cls(POLICIES[name])

    def can_transition(self, current: str, target: str) -> bool:
        if target not in APPLICATION_STATUSES:
            return False
        if current == target:
            return True
        return target in self.transitions.get(current, frozenset())

    def transition(self, current: str, target: str) -> str:
        """Return ``target`` if the move is allowed, otherwise raise."""
        if target not in APPLICATION_STATUSES:
            raise ValidationError(
                f"Status must be one of: {', '.join(APPLICATION_STATUSES)}"
            )
        if not self.can_transition(current, target):
            raise InvalidStatusTransition(
                f"Cannot change application status from {current} to {target}"
            )
        return target
