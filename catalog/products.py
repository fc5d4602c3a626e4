import logging
import re

from .models import OBJECT_ROOT_ID, Product

logger = logging.getLogger(__name__)

MAX_KEY_LENGTH = 255

_UNSAFE_KEY_CHARS = re.compile(r'[/\\\x00-\x1f\x7f]')
_WHITESPACE = re.compile(r'\s+')


def valid_key(value: str) -> str:
    """Turn `value` into a key that is safe to use as one element of a path."""
    key = _UNSAFE_KEY_CHARS.sub('-', value)
    key = _WHITESPACE.sub(' ', key).strip()
    key = key[:MAX_KEY_LENGTH].rstrip()
    # "." and ".." would resolve to other paths.
    if not key or key in ('.', '..'):
        return '_'
    return key


def get_product(gtin: str, include_unpublished: bool = True) -> Product:
    """
    Return the product with `gtin`, or a new unsaved one below the object root.

    The caller sets the remaining fields and saves it.
    """
    existing = Product.objects.visible(include_unpublished).filter(gtin=gtin).first()
    if existing is not None:
        logger.debug("GTIN %s matches product %s.", gtin, existing.pk)
        return existing

    logger.debug("GTIN %s not found, creating a new product.", gtin)
    return Product(key=valid_key(gtin), parent_id=OBJECT_ROOT_ID, gtin=gtin)
