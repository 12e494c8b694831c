"""Subscription export helpers."""

from __future__ import annotations

from typing import Callable, Iterable

from pydantic import ValidationError

from config.settings import NEWPIPE_SERVICE_ID, YOUTUBE_ORIGIN
from formats.documents import NewPipeSubscription, NewPipeSubscriptionsDocument
from formats.errors import EncodeError
from formats.types import SubscriptionEntry


def serialize_subscriptions(entries: Iterable[SubscriptionEntry]) -> bytes:
    """Encode subscriptions as a NewPipe subscriptions JSON document.

    Each ``url`` is a site-relative channel path and is written fully
    qualified. Nothing is written unless every entry encodes.
    """
    try:
        subscriptions = [
            NewPipeSubscription(
                name=entry.name,
                service_id=NEWPIPE_SERVICE_ID,
                url=YOUTUBE_ORIGIN + entry.url,
            )
            for entry in entries
        ]
        document = NewPipeSubscriptionsDocument(subscriptions=subscriptions)
    except (AttributeError, TypeError, ValidationError) as exc:
        raise EncodeError(f"cannot encode subscriptions: {exc}") from exc
    return document.model_dump_json().encode("utf-8")


def export_subscriptions(source: Callable[[], Iterable[SubscriptionEntry]]) -> bytes:
    """Serialize the subscriptions returned by ``source``.

    ``source`` is supplied by the caller and already knows whether to read the
    account's remote subscriptions or the local list.
    """
    return serialize_subscriptions(source())
