from __future__ import annotations

from dataclasses import dataclass

from broadside.runtime.flow import FlowMachine, FlowTransition


@dataclass(frozen=True, slots=True)
class _Payload:
    value: int


def test_flow_machine_transitions_on_matching_trigger() -> None:
    machine = FlowMachine("idle")
    machine.add_transition(FlowTransition(trigger="start", source="idle", target="running"))
    assert machine.trigger("start")
    assert machine.state == "running"
    assert not machine.trigger("start")


def test_flow_machine_respects_guard_and_hooks() -> None:
    machine = FlowMachine("idle")
    before: list[str] = []
    after: list[str] = []

    def guard(context) -> bool:
        payload = context.payload
        return isinstance(payload, _Payload) and payload.value > 0

    machine.add_transition(
        FlowTransition(
            trigger="start",
            source="idle",
            target="running",
            guard=guard,
            before=lambda context: before.append(f"{context.source}->{context.target}"),
            after=lambda context: after.append(context.trigger),
        )
    )

    assert not machine.trigger("start", payload=_Payload(0))
    assert machine.state == "idle"
    assert machine.resolve("start", payload=_Payload(1)) is not None
    assert before == []
    assert machine.trigger("start", payload=_Payload(1))
    assert machine.state == "running"
    assert before == ["idle->running"]
    assert after == ["start"]


def test_flow_machine_wildcard_source_and_terminal_state() -> None:
    machine = FlowMachine("a", terminal_states=frozenset({"done"}))
    machine.add_transition(FlowTransition(trigger="next", source="a", target="b"))
    machine.add_transition(FlowTransition(trigger="finish", source=None, target="done"))

    assert machine.trigger("next")
    assert machine.trigger("finish")
    assert machine.is_terminal
    assert not machine.trigger("finish")
    assert machine.resolve("finish") is None
    assert machine.state == "done"
