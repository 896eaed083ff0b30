from __future__ import annotations

from django.core.management.base import BaseCommand, CommandError

from sportsmeet import services
from sportsmeet.apps import get_store
from sportsmeet.exceptions import SportsMeetError

DEMO_RESULTS = (
    ("1", "Aisha Rahman", "JI2026-014", "Green", 1),
    ("1", "Farhan Ali", "JI2026-027", "Red", 2),
    ("1", "Neha Joseph", "JI2026-033", "Blue", 3),
    ("2", "Red Team XI", "JI2026-T02", "Red", 1),
    ("2", "Blue Team XI", "JI2026-T03", "Blue", 2),
    ("5", "Rahul Menon", "JI2026-041", "Blue", 1),
    ("5", "Sana Yusuf", "JI2026-052", "Green", 2),
)


class Command(BaseCommand):
    help = "Record demo results against the seed events"

    def add_arguments(self, parser):
        parser.add_argument("--reset", action="store_true", help="Erase existing data first")
        parser.add_argument("--no-output", action="store_true", help="Suppress success output")

    def handle(self, *args, **options):
        store = get_store()
        if options["reset"]:
            services.reset_database(store)
        recorded = 0
        for event_id, name, reg_no, group, position in DEMO_RESULTS:
            try:
                services.add_result(store, event_id, name, reg_no, group, position)
            except SportsMeetError as exc:
                raise CommandError(f"Could not record {name} in event {event_id}: {exc.message}") from exc
            recorded += 1
        if not options["no_output"]:
            self.stdout.write(self.style.SUCCESS(f"Recorded {recorded} demo results."))
