import logging

from django.dispatch import receiver

from .signals import GenerateThumbnailsEvent, generate_thumbnails
from .thumbnails import get_thumbnail

logger = logging.getLogger(__name__)

THUMBNAIL_PRESETS_ON_UPLOAD = ('thumb_200', 'thumb_800')


@receiver(generate_thumbnails, dispatch_uid=GenerateThumbnailsEvent.NAME)
def on_asset_upload(sender, event, **kwargs):
    """Request the upload renditions of a newly stored image asset."""
    asset = event.asset
    if not asset.is_image:
        logger.debug("Asset %s is not an image, no thumbnails requested.", asset.pk)
        return

    for preset in THUMBNAIL_PRESETS_ON_UPLOAD:
        get_thumbnail(asset, preset).path_reference
