"""Document lifecycle state machine.

State Machine:
    EDITING -> EDITING (reset / new document)
    EDITING -> LOADING (route to a key)
    EDITING -> SAVING (save command with non-blank content)
    LOADING -> PRESENTING (load succeeded)
    LOADING -> EDITING (load failed, blank document)
    SAVING -> PRESENTING (save succeeded)
    SAVING -> EDITING (save failed, content kept)
    PRESENTING -> EDITING (new / duplicate / route to empty path)
    PRESENTING -> LOADING (route to another key)

LOADING and SAVING are the in-flight states; route, new and save commands
are refused while in either of them.
"""

from enum import Enum


class LifecycleState(str, Enum):
    """Lifecycle state of the client document."""

    EDITING = "editing"
    """User owns the content; it may be saved."""

    LOADING = "loading"
    """A document is being fetched from the server."""

    SAVING = "saving"
    """Content is being sent to the server."""

    PRESENTING = "presenting"
    """A stored document is displayed read-only."""


ALLOWED_TRANSITIONS: dict[LifecycleState, list[LifecycleState]] = {
    LifecycleState.EDITING: [
        LifecycleState.EDITING,
        LifecycleState.LOADING,
        LifecycleState.SAVING,
    ],
    LifecycleState.LOADING: [
        LifecycleState.PRESENTING,
        LifecycleState.EDITING,
    ],
    LifecycleState.SAVING: [
        LifecycleState.PRESENTING,
        LifecycleState.EDITING,
    ],
    LifecycleState.PRESENTING: [
        LifecycleState.EDITING,
        LifecycleState.LOADING,
    ],
}

IN_FLIGHT_STATES = frozenset({LifecycleState.LOADING, LifecycleState.SAVING})


class StateTransitionError(Exception):
    """Raised when an invalid lifecycle transition is attempted."""
    pass


def can_transition(from_state: LifecycleState, to_state: LifecycleState) -> bool:
    return to_state in ALLOWED_TRANSITIONS.get(from_state, [])


def validate_transition(from_state: LifecycleState, to_state: LifecycleState) -> None:
    """Validate a lifecycle transition.

    Raises:
        StateTransitionError: If transition is not allowed
    """
    if not can_transition(from_state, to_state):
        allowed = ALLOWED_TRANSITIONS.get(from_state, [])
        allowed_str = ", ".join(s.value for s in allowed) if allowed else "none"
        raise StateTransitionError(
            f"Invalid transition from {from_state.value} to {to_state.value}. "
            f"Allowed transitions: {allowed_str}"
        )
