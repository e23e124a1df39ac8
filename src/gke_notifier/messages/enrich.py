"""Attach ambient context to a decoded message."""

from gke_notifier.models.pubsub import PubSubMessage


def with_project_name(message: PubSubMessage, project: str | None) -> PubSubMessage:
    """Return a copy of ``message`` carrying ``project`` as its project name.

    Without a project the message is returned unchanged and renderers fall
    back to the numeric ``project_id`` attribute and omit console links.
    """
    if not project:
        return message
    return message.model_copy(update={"project_name": project})
