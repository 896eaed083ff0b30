from __future__ import annotations

from django.core.management.base import BaseCommand

from sportsmeet import services
from sportsmeet.apps import get_store


class Command(BaseCommand):
    help = "Erase all events and results; the seed events return on next use"

    def add_arguments(self, parser):
        parser.add_argument("--no-output", action="store_true", help="Suppress success output")

    def handle(self, *args, **options):
        services.reset_database(get_store())
        if not options["no_output"]:
            self.stdout.write(self.style.SUCCESS("Meet data erased."))
