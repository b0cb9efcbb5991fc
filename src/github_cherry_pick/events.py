"""Structured progress events emitted by the cherry-pick core.

The core never prints. Callers that want progress pass an EventSink; without
one, events are dropped and only DEBUG log records remain.
"""

from collections.abc import Callable
from dataclasses import dataclass, field


@dataclass(frozen=True)
class CherryPickEvent:
    """A single step of a cherry-pick operation.

    Event names:
        started, initial_head, sandbox.created, sandbox.deleted,
        sandbox.cleanup_failed, commit.started, commit.sibling_created,
        commit.merged, commit.created, published
    """

    name: str
    fields: dict[str, str] = field(default_factory=dict)


EventSink = Callable[[CherryPickEvent], None]


def emit(sink: EventSink | None, name: str, **fields: str) -> None:
    """Send an event to sink, if there is one."""
    if sink is None:
        return
    sink(CherryPickEvent(name=name, fields=fields))
