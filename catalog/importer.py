import logging

from django.db import transaction

from .assets import upload_image
from .client import FeedClient
from .exceptions import DuplicatePathError, FetchError, MissingFeedUrlError
from .feed import FeedEntry, parse_date, parse_feed
from .products import get_product

logger = logging.getLogger(__name__)


class _Reporter:
    """Writes per-entry warnings to the log and, if given, an output stream."""

    def __init__(self, stdout=None):
        self._stdout = stdout
        self.count = 0

    def warn(self, gtin, message):
        self.count += 1
        if self._stdout is None:
            logger.warning("GTIN: %s - %s", gtin, message)
        else:
            logger.debug("GTIN: %s - %s", gtin, message)
            self._stdout.write(f"GTIN: {gtin} - {message}\n")


def import_feed(url, stdout=None, client=None) -> dict:
    """
    Import every product of the JSON feed at `url`.

    Steps:
      1. Fetch and decode the feed. Any failure here aborts the run.
      2. For each entry, in feed order, find or create the product by GTIN
         and set its name and date. An invalid GTIN or date aborts the run;
         entries saved before it stay saved.
      3. Fetch the entry's image and attach the asset holding those bytes,
         storing a new asset (and requesting its thumbnails) only when no
         asset has the same checksum. Image failures are reported and the
         product is saved without a new image.
      4. Save the product. A failed save is reported and the run continues.
    """
    if not url:
        raise MissingFeedUrlError('The "--url=<URL>" option is required.')

    client = client or FeedClient()
    reporter = _Reporter(stdout)

    logger.info("Starting feed import from %s.", url)
    entries = parse_feed(client.fetch(url))
    logger.info("Loaded %d entries from the feed.", len(entries))

    saved = created = reused = 0

    for raw in entries:
        entry = FeedEntry.from_raw(raw)
        gtin = entry.gtin

        product = get_product(gtin, include_unpublished=True)
        product.name = entry.name
        product.date = parse_date(entry.date)

        try:
            image_content = client.fetch(entry.image_url)
        except FetchError:
            reporter.warn(gtin, f"Broken image URL: {entry.image_url}, skipping asset")
        else:
            try:
                asset, is_new = upload_image(image_content)
            except DuplicatePathError as exc:
                reporter.warn(gtin, f"Error during asset save: {exc}")
            else:
                product.image = asset
                if is_new:
                    created += 1
                else:
                    reused += 1

        try:
            with transaction.atomic():
                product.save()
        except Exception as exc:
            reporter.warn(gtin, f"Product was not saved: {exc}")
            continue

        saved += 1
        logger.debug("GTIN %s saved as product %s.", gtin, product.pk)

    logger.info(
        "Import complete. products=%d, assets_created=%d, assets_reused=%d, warnings=%d.",
        saved, created, reused, reporter.count,
    )
    return {
        'products': saved,
        'assets_created': created,
        'assets_reused': reused,
        'warnings': reporter.count,
    }
