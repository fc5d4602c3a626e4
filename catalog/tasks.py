import logging

from celery import shared_task

from .importer import import_feed

logger = logging.getLogger(__name__)


@shared_task(bind=True, name='catalog.import_feed')
def import_feed_task(self, url):
    """
    Run one feed import as a Celery task.

    Same pipeline as the import_json_url command; per-entry warnings go to
    the log only. Returns the import counters.
    """
    logger.info("Feed import task %s started for %s.", self.request.id, url)
    return import_feed(url)
