"""Block until an image tag reaches a status (uploads and snapshots are asynchronous)."""

from __future__ import annotations

from cloudsdk.vrm.models import TagStatus
from cloudsdk.vrm.tags import TagsClient
from cloudsdk.waiter import WaitOptions, wait_for_status

TAG_WAIT = WaitOptions(interval=5, max_wait=600, backoff_multiplier=1.2, max_interval=30)


def wait_for_tag_status(tags: TagsClient, tag_id: str, target: str, **options: float) -> None:
    wait_for_status(
        "tag",
        lambda tid: tags.get(tid).status,
        tag_id,
        target,
        TagStatus.ERROR,
        TAG_WAIT.override(**options),
    )


def wait_for_tag_active(tags: TagsClient, tag_id: str, **options: float) -> None:
    wait_for_tag_status(tags, tag_id, TagStatus.ACTIVE, **options)


def wait_for_tag_available(tags: TagsClient, tag_id: str, **options: float) -> None:
    wait_for_tag_status(tags, tag_id, TagStatus.AVAILABLE, **options)
