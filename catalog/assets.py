import logging
import uuid

from django.db.models import F, OuterRef, Subquery

from .checksum import file_checksum
from .models import Asset, Folder, Version
from .signals import GenerateThumbnailsEvent, dispatch

logger = logging.getLogger(__name__)


def _current_asset_versions():
    """Asset history rows that are the most recent version of their asset."""
    latest_count = (
        Version.objects.filter(
            content_type=Version.ContentType.ASSET,
            content_id=OuterRef('content_id'),
        )
        .order_by('-version_count')
        .values('version_count')[:1]
    )
    return (
        Version.objects.filter(content_type=Version.ContentType.ASSET)
        .annotate(latest_count=Subquery(latest_count))
        .filter(version_count=F('latest_count'))
    )


def find_asset_by_checksum(checksum: str):
    """
    Return the asset whose current binary has `checksum`, or None.

    Older versions do not count. When several assets match, the lowest id
    wins.
    """
    matching_ids = _current_asset_versions().filter(binary_file_hash=checksum).values('content_id')
    return Asset.objects.filter(pk__in=Subquery(matching_ids)).order_by('pk').first()


def store_image(content: bytes) -> Asset:
    """
    Store `content` as a new image asset below the asset root.

    Never deduplicates. Raises DuplicatePathError if the generated filename is
    already taken.
    """
    asset = Asset(
        parent=Folder.get_by_path(Folder.Tree.ASSET, '/'),
        filename=str(uuid.uuid4()),
        type=Asset.Type.IMAGE,
    )
    asset.set_data(content)
    asset.save()
    logger.info("Stored new image asset %s (%s, %d bytes).", asset.pk, asset.full_path, len(content))
    return asset


def upload_image(content: bytes):
    """
    Return an asset holding `content`, storing it only if no asset has it yet.

    Returns (asset, created). Thumbnails are requested only for created
    assets.
    """
    checksum = file_checksum(content)
    existing = find_asset_by_checksum(checksum)
    if existing is not None:
        logger.debug("Checksum %s... matches asset %s.", checksum[:16], existing.pk)
        return existing, False

    asset = store_image(content)
    dispatch(GenerateThumbnailsEvent(asset))
    return asset, True
