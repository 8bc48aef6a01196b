"""Generic state-flow transition table and executor."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

TState = TypeVar("TState")


@dataclass(frozen=True, slots=True)
class FlowContext(Generic[TState]):
    """Transition execution context."""

    trigger: str
    source: TState
    target: TState
    payload: object | None = None


TransitionGuard: TypeAlias = "Callable[[FlowContext[TState]], bool]"
TransitionHook: TypeAlias = "Callable[[FlowContext[TState]], None]"


@dataclass(frozen=True, slots=True)
class FlowTransition(Generic[TState]):
    """Transition definition. A ``None`` source matches any state."""

    trigger: str
    source: TState | None
    target: TState
    guard: TransitionGuard[TState] | None = None
    before: TransitionHook[TState] | None = None
    after: TransitionHook[TState] | None = None


class FlowMachine(Generic[TState]):
    """Deterministic transition table executor."""

    def __init__(
        self,
        initial_state: TState,
        *,
        terminal_states: frozenset[TState] = frozenset(),
    ) -> None:
        self._state = initial_state
        self._terminal_states = terminal_states
        self._transitions: list[FlowTransition[TState]] = []

    @property
    def state(self) -> TState:
        return self._state

    @property
    def is_terminal(self) -> bool:
        return self._state in self._terminal_states

    def add_transition(self, transition: FlowTransition[TState]) -> None:
        """Register one transition."""
        self._transitions.append(transition)

    def resolve(self, event: str, *, payload: object | None = None) -> FlowTransition[TState] | None:
        """Return the transition ``trigger`` would take, without running hooks."""
        context = self._match(event, payload)
        if context is None:
            return None
        return context[0]

    def trigger(self, event: str, *, payload: object | None = None) -> bool:
        """Execute first matching transition. Returns whether state changed."""
        matched = self._match(event, payload)
        if matched is None:
            return False
        transition, context = matched
        if transition.before is not None:
            transition.before(context)
        self._state = transition.target
        if transition.after is not None:
            transition.after(context)
        return True

    def _match(
        self, event: str, payload: object | None
    ) -> tuple[FlowTransition[TState], FlowContext[TState]] | None:
        source_state = self._state
        if source_state in self._terminal_states:
            return None
        for transition in self._transitions:
            if transition.trigger != event:
                continue
            if transition.source is not None and transition.source != source_state:
                continue
            context = FlowContext(
                trigger=event,
                source=source_state,
                target=transition.target,
                payload=payload,
            )
            if transition.guard is not None and not transition.guard(context):
                continue
            return transition, context
        return None
