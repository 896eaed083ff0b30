from __future__ import annotations

from django.core.management.base import BaseCommand

from sportsmeet import services
from sportsmeet.apps import get_store


class Command(BaseCommand):
    help = "Print the current team standings"

    def handle(self, *args, **options):
        scores = services.calculate_leaderboard(get_store())
        self.stdout.write(f"{'#':<3}{'Group':<8}{'Points':>7}{'Gold':>6}{'Silver':>8}{'Bronze':>8}")
        for rank, score in enumerate(scores, start=1):
            self.stdout.write(
                f"{rank:<3}{score.team_color:<8}{score.total_points:>7}"
                f"{score.golds:>6}{score.silvers:>8}{score.bronzes:>8}"
            )
