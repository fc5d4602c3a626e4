"""
Signals emitted by the catalog importer.

Signals:
    generate_thumbnails (Signal): Emitted after a new image asset was stored
        (never when an existing asset is reused). Receivers run synchronously
        in the sending process.
        Sender:
            GenerateThumbnailsEvent
        Keyword arguments:
            event (GenerateThumbnailsEvent): Carries the new asset.
"""

import logging
from dataclasses import dataclass

from django.dispatch import Signal

from .models import Asset

logger = logging.getLogger(__name__)

generate_thumbnails: Signal = Signal()


@dataclass(frozen=True)
class GenerateThumbnailsEvent:
    NAME = 'app.generate_thumbnails'

    asset: Asset


def dispatch(event: GenerateThumbnailsEvent):
    """
    Send `event` to every connected receiver and return their responses.

    A failing receiver is logged and does not stop the others or the caller.
    """
    responses = generate_thumbnails.send_robust(sender=GenerateThumbnailsEvent, event=event)
    for receiver, response in responses:
        if isinstance(response, Exception):
            logger.warning(
                "%s receiver %s failed for asset %s: %r",
                event.NAME,
                getattr(receiver, '__qualname__', receiver),
                event.asset.pk,
                response,
            )
    return responses
