import io
import logging
import os

from django.conf import settings
from django.core.files.base import ContentFile
from PIL import Image, UnidentifiedImageError

from .models import Thumbnail

logger = logging.getLogger(__name__)


def get_preset(name: str):
    """Return the (width, height) bounding box configured for `name`."""
    presets = settings.THUMBNAIL_PRESETS
    try:
        return presets[name]
    except KeyError:
        raise ValueError(f"Unknown thumbnail preset {name!r}; known presets: {sorted(presets)}")


def get_thumbnail(asset, preset_name: str) -> Thumbnail:
    """
    Return the thumbnail of `asset` for `preset_name`.

    Nothing is rendered here; reading Thumbnail.path_reference renders the
    image on first access.
    """
    get_preset(preset_name)
    thumbnail, _ = Thumbnail.objects.get_or_create(asset=asset, preset=preset_name)
    return thumbnail


def render_thumbnail(thumbnail: Thumbnail) -> bool:
    """
    Render the source asset into `thumbnail` and save it.

    Returns False when the source cannot be decoded; the thumbnail then stays
    unrendered and is retried on the next access.
    """
    asset = thumbnail.asset
    size = get_preset(thumbnail.preset)

    try:
        with Image.open(io.BytesIO(asset.get_data())) as image:
            image.thumbnail(size)
            if image.mode not in ('RGB', 'L'):
                image = image.convert('RGB')
            buf = io.BytesIO()
            image.save(buf, format='JPEG')
            width, height = image.size
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as exc:
        logger.warning(
            "Cannot render %s thumbnail for asset %s (%s): %s",
            thumbnail.preset,
            asset.pk,
            asset.full_path,
            exc,
        )
        return False

    base = os.path.splitext(asset.filename)[0]
    thumbnail.width, thumbnail.height = width, height
    thumbnail.file.save(f"{base}-{thumbnail.preset}.jpg", ContentFile(buf.getvalue()), save=False)
    thumbnail.save()
    logger.info(
        "Rendered %s thumbnail for asset %s (%dx%d).", thumbnail.preset, asset.pk, width, height
    )
    return True
