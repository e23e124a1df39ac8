"""Pub/Sub push endpoint for GKE cluster notifications."""

import logging

from fastapi import APIRouter, BackgroundTasks, HTTPException, Request
from fastapi.responses import PlainTextResponse

from gke_notifier.config import get_settings
from gke_notifier.messages.decoder import decode_envelope
from gke_notifier.messages.errors import NotificationDecodeError
from gke_notifier.pipeline import process_envelope
from gke_notifier.slack.notifier import deliver

logger = logging.getLogger(__name__)

router = APIRouter(prefix="", tags=["notifications"])


@router.post("/", response_class=PlainTextResponse)
async def receive_notification(request: Request, background_tasks: BackgroundTasks) -> str:
    """Receive a cluster notification pushed by Cloud Pub/Sub.

    Supported event types:

    - type.googleapis.com/google.container.v1beta1.SecurityBulletinEvent
    - type.googleapis.com/google.container.v1beta1.UpgradeAvailableEvent
    - type.googleapis.com/google.container.v1beta1.UpgradeEvent

    Other types are still logged using their ``type_url`` and data. The
    formatted line is returned as the response body; the Slack message is
    posted after the response is sent.
    """
    settings = get_settings()
    body = await request.body()
    try:
        envelope = decode_envelope(body)
    except NotificationDecodeError as exc:
        logger.warning("Rejected notification: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    result = process_envelope(
        envelope,
        project=settings.gcp_project or None,
        webhook_configured=bool(settings.slack_webhook),
        channel=settings.slack_channel or None,
    )

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "%s",
            result.formatted,
            extra={
                "notification": result.message.model_dump(),
                "subscription": envelope.subscription,
                "slack_message": (
                    result.webhook_message.model_dump(exclude_none=True)
                    if result.webhook_message is not None
                    else None
                ),
            },
        )
    else:
        logger.info("%s", result.formatted)

    if result.webhook_message is not None:
        background_tasks.add_task(deliver, result.webhook_message)

    return result.formatted
