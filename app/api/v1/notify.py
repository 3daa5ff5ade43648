"""Schedule a state-changed notification to run once the response (and its commit) is done."""

from fastapi import BackgroundTasks

from app.core.enums import StateChangeKind
from app.services.events import event_bus


def notify_state_changed(background_tasks: BackgroundTasks, kind: StateChangeKind) -> None:
    background_tasks.add_task(event_bus.publish, kind)
