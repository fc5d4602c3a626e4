from django.core.management.base import BaseCommand, CommandError

from ...exceptions import FeedImportError
from ...importer import import_feed


class Command(BaseCommand):
    help = "Import Product objects from the url with JSON resource"

    def add_arguments(self, parser):
        parser.add_argument('--url', help="The URL to import")

    def handle(self, *args, url=None, **options):
        if not url:
            raise CommandError('The "--url=<URL>" option is required.')

        try:
            result = import_feed(url, stdout=self.stdout)
        except FeedImportError as exc:
            raise CommandError(str(exc)) from exc

        self.stdout.write(
            self.style.SUCCESS(
                "Imported {products} products ({assets_created} new assets, "
                "{assets_reused} reused, {warnings} warnings).".format(**result)
            )
        )
