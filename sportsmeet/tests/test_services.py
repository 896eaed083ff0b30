import os
import threading

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "sportiva.settings")

import django

django.setup()

from django.test import SimpleTestCase

from sportsmeet import models, services
from sportsmeet.exceptions import ConflictError, NotFoundError, ValidationError
from sportsmeet.storage import MemoryKeyValueStore
from sportsmeet.store import MeetStore


def _result(color, placement, event_id="1", pk="r"):
    return models.Result(
        id=pk,
        event_id=event_id,
        student_name="Runner",
        register_number="REG",
        team_color=color,
        placement=placement,
        points=models.POINTS[placement],
    )


class EventOperationTests(SimpleTestCase):
    def setUp(self):
        self.store = MeetStore(MemoryKeyValueStore())

    def test_add_event_appends_uncompleted_event(self):
        event = services.add_event(self.store, "  Long Jump ", "Athletics")
        self.assertEqual(event.name, "Long Jump")
        self.assertEqual(event.category, "Athletics")
        self.assertFalse(event.is_completed)
        events = services.get_events(self.store)
        self.assertEqual(len(events), 6)
        self.assertEqual(events[-1], event)

    def test_add_event_rejects_blank_name(self):
        with self.assertRaises(ValidationError) as ctx:
            services.add_event(self.store, "   ", "Games")
        self.assertEqual(ctx.exception.field, "name")
        self.assertEqual(len(services.get_events(self.store)), 5)

    def test_add_event_rejects_unknown_category(self):
        with self.assertRaises(ValidationError):
            services.add_event(self.store, "Chess", "Board Games")

    def test_event_ids_stay_unique_across_adds_and_deletes(self):
        for index in range(10):
            event = services.add_event(self.store, f"Heat {index}", "Athletics")
            if index % 3 == 0:
                services.delete_event(self.store, event.id)
        services.delete_event(self.store, "2")
        services.add_event(self.store, "Kabaddi", "Games")
        ids = [event.id for event in services.get_events(self.store)]
        self.assertEqual(len(ids), len(set(ids)))

    def test_delete_event_cascades_to_its_results_only(self):
        services.add_result(self.store, "1", "Alice", "REG1", "Green", 1)
        services.add_result(self.store, "1", "Bilal", "REG2", "Red", 2)
        other = services.add_result(self.store, "2", "Chitra", "REG3", "Blue", 1)

        services.delete_event(self.store, "1")

        self.assertNotIn("1", [event.id for event in services.get_events(self.store)])
        self.assertEqual(services.get_results(self.store), [other])

    def test_delete_missing_event_is_a_no_op(self):
        before = self.store.load()
        services.delete_event(self.store, "does-not-exist")
        self.assertEqual(self.store.load(), before)


class ResultOperationTests(SimpleTestCase):
    def setUp(self):
        self.store = MeetStore(MemoryKeyValueStore())

    def test_first_place_scores_ten_and_completes_event(self):
        result = services.add_result(self.store, "1", "Alice", "REG1", "Green", 1)
        self.assertEqual(result.points, 10)
        self.assertEqual(result.team_color, "Green")
        self.assertTrue(self.store.load().find_event("1").is_completed)

        board = {score.team_color: score for score in services.calculate_leaderboard(self.store)}
        self.assertEqual(board["Green"].total_points, 10)
        self.assertEqual(board["Green"].golds, 1)

    def test_points_follow_placement_table(self):
        points = [
            services.add_result(self.store, "3", f"Runner {p}", f"REG{p}", "Red", p).points
            for p in (1, 2, 3)
        ]
        self.assertEqual(points, [10, 5, 3])

    def test_taken_placement_raises_conflict_and_keeps_results(self):
        services.add_result(self.store, "1", "Alice", "REG1", "Green", 1)
        with self.assertRaises(ConflictError) as ctx:
            services.add_result(self.store, "1", "Alice", "REG1", "Green", 1)
        self.assertEqual(ctx.exception.placement, 1)
        self.assertIn("Position 1", str(ctx.exception))
        self.assertEqual(len(services.get_results(self.store)), 1)

    def test_same_placement_allowed_in_other_events(self):
        services.add_result(self.store, "1", "Alice", "REG1", "Green", 1)
        services.add_result(self.store, "2", "Bilal", "REG2", "Red", 1)
        self.assertEqual(len(services.get_results(self.store)), 2)

    def test_unknown_event_raises_not_found_without_changes(self):
        before = self.store.load()
        with self.assertRaises(NotFoundError):
            services.add_result(self.store, "404", "Alice", "REG1", "Green", 1)
        self.assertEqual(self.store.load(), before)

    def test_invalid_inputs_raise_validation_error(self):
        cases = [
            ("", "REG1", "Green", 1, "studentName"),
            ("Alice", "  ", "Green", 1, "studentRegisterNumber"),
            ("Alice", "REG1", "Yellow", 1, "group"),
            ("Alice", "REG1", "Green", 4, "position"),
            ("Alice", "REG1", "Green", True, "position"),
        ]
        for name, reg_no, color, placement, field in cases:
            with self.subTest(field=field, placement=placement):
                with self.assertRaises(ValidationError) as ctx:
                    services.add_result(self.store, "1", name, reg_no, color, placement)
                self.assertEqual(ctx.exception.field, field)
        self.assertEqual(services.get_results(self.store), [])

    def test_delete_result_keeps_event_completed(self):
        result = services.add_result(self.store, "4", "Dev", "REG9", "Blue", 2)
        services.delete_result(self.store, result.id)
        self.assertEqual(services.get_results(self.store), [])
        self.assertTrue(self.store.load().find_event("4").is_completed)

    def test_delete_missing_result_is_a_no_op(self):
        services.add_result(self.store, "4", "Dev", "REG9", "Blue", 2)
        services.delete_result(self.store, "missing")
        self.assertEqual(len(services.get_results(self.store)), 1)

    def test_concurrent_entries_for_one_placement_keep_a_single_result(self):
        workers = 16
        barrier = threading.Barrier(workers)
        conflicts = []
        recorded = []

        def record(index):
            barrier.wait()
            try:
                recorded.append(
                    services.add_result(self.store, "1", f"Runner {index}", f"REG{index}", "Red", 1)
                )
            except ConflictError as exc:
                conflicts.append(exc)

        threads = [threading.Thread(target=record, args=(index,)) for index in range(workers)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(len(recorded), 1)
        self.assertEqual(len(conflicts), workers - 1)
        self.assertEqual(services.get_results(self.store), recorded)

    def test_integer_event_id_matches_stored_event(self):
        result = services.add_result(self.store, 1, "Alice", "REG1", "Green", 1)
        self.assertEqual(result.event_id, "1")
        services.delete_event(self.store, 1)
        self.assertEqual(services.get_results(self.store), [])

    def test_conflict_then_event_delete_clears_results(self):
        services.add_result(self.store, "1", "Alice", "REG1", "Green", 1)
        with self.assertRaises(ConflictError):
            services.add_result(self.store, "1", "Alice", "REG1", "Green", 1)
        services.delete_event(self.store, "1")
        self.assertEqual(services.get_results(self.store), [])
        self.assertIsNone(self.store.load().find_event("1"))


class LeaderboardTests(SimpleTestCase):
    def test_seed_board_has_three_zero_rows_in_colour_order(self):
        store = MeetStore(MemoryKeyValueStore())
        board = services.calculate_leaderboard(store)
        self.assertEqual(
            board,
            [
                models.GroupScore("Green"),
                models.GroupScore("Red"),
                models.GroupScore("Blue"),
            ],
        )

    def test_totals_and_medal_counts(self):
        results = [
            _result("Blue", 1),
            _result("Blue", 3, event_id="2"),
            _result("Red", 2),
            _result("Green", 3),
            _result("Red", 1, event_id="2"),
        ]
        board = services.compute_leaderboard(results)
        self.assertEqual([score.team_color for score in board], ["Red", "Blue", "Green"])
        red, blue, green = board
        self.assertEqual((red.total_points, red.golds, red.silvers, red.bronzes), (15, 1, 1, 0))
        self.assertEqual((blue.total_points, blue.golds, blue.silvers, blue.bronzes), (13, 1, 0, 1))
        self.assertEqual((green.total_points, green.golds, green.silvers, green.bronzes), (3, 0, 0, 1))
        self.assertEqual(sum(score.total_points for score in board), sum(r.points for r in results))

    def test_ties_keep_colour_enumeration_order(self):
        board = services.compute_leaderboard([_result("Blue", 1), _result("Red", 1, event_id="2")])
        self.assertEqual([score.team_color for score in board], ["Red", "Blue", "Green"])


class ResultsFeedTests(SimpleTestCase):
    def setUp(self):
        self.store = MeetStore(MemoryKeyValueStore())
        self.sprint = services.add_result(self.store, "1", "Alice", "REG1", "Green", 1)
        self.football = services.add_result(self.store, "2", "Bilal", "REG2", "Red", 1)
        self.shot_put = services.add_result(self.store, "5", "Chitra", "REG3", "Green", 2)

    def test_feed_is_newest_first_and_enriched(self):
        feed = services.results_feed(self.store)
        self.assertEqual([entry.result for entry in feed], [self.shot_put, self.football, self.sprint])
        self.assertEqual(feed[0].event_name, "Shot Put")
        self.assertEqual(feed[0].event_category, "Athletics")

    def test_feed_filters_by_group_and_type(self):
        greens = services.results_feed(self.store, team_color="Green")
        self.assertEqual([entry.result for entry in greens], [self.shot_put, self.sprint])
        games = services.results_feed(self.store, category="Games")
        self.assertEqual([entry.result for entry in games], [self.football])
        both = services.results_feed(self.store, team_color="Red", category="Athletics")
        self.assertEqual(both, [])
        self.assertEqual(len(services.results_feed(self.store, "All", "All")), 3)

    def test_feed_marks_orphaned_results(self):
        document = self.store.load()
        document.events = [event for event in document.events if event.id != "5"]
        self.store.save(document)
        entry = services.results_feed(self.store)[0]
        self.assertEqual(entry.event_name, "Unknown Event")
        self.assertEqual(entry.event_category, "Games")

    def test_unknown_filter_value_is_rejected(self):
        with self.assertRaises(ValidationError):
            services.results_feed(self.store, team_color="Purple")

    def test_reset_database_restores_seed(self):
        services.reset_database(self.store)
        self.assertEqual(services.get_results(self.store), [])
        self.assertEqual(len(services.get_events(self.store)), 5)
