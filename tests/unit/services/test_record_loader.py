"""
Unit tests for boundary validation of marketplace records.
"""

import unittest

from pydantic import ValidationError

from task_match_ai.services.record_loader import (
    RecordValidationError,
    load_candidate,
    load_candidates,
    load_task,
)


def _worker_record(**overrides):
    record = {
        "_id": "64f1c0ffee",
        "name": "Alice",
        "email": "alice@example.com",
        "skills": ["Python", "Data Labeling"],
        "completedTasks": 5,
        "rating": 4.5,
        "isActive": True,
    }
    record.update(overrides)
    return record


class TestLoadTask(unittest.TestCase):

    def test_reads_skills_from_task_data(self):
        task = load_task({
            "_id": "t1",
            "title": "Sentiment labeling",
            "category": "data_labeling",
            "hourlyRate": 20,
            "estimatedHours": 3,
            "taskData": {"requiredSkills": ["python", "nlp"]},
            "requiredSkills": ["ignored"],
        })

        self.assertEqual(task.id, "t1")
        self.assertEqual(task.required_skills, ["python", "nlp"])
        self.assertEqual(task.hourly_rate, 20.0)
        self.assertEqual(task.estimated_hours, 3.0)

    def test_falls_back_to_top_level_skills(self):
        task = load_task({"title": "Audit", "requiredSkills": ["excel"]})
        self.assertEqual(task.required_skills, ["excel"])

    def test_missing_skills_mean_no_requirements(self):
        self.assertEqual(load_task({"title": "Open task"}).required_skills, [])
        self.assertEqual(load_task({"taskData": {}}).required_skills, [])
        self.assertEqual(load_task({"taskData": None, "requiredSkills": None}).required_skills, [])

    def test_skills_kept_exactly_as_given(self):
        task = load_task({"taskData": {"requiredSkills": [" python ", "", "   "]}})
        self.assertEqual(task.required_skills, [" python ", "", "   "])

    def test_rejects_non_list_skills(self):
        with self.assertRaises(RecordValidationError) as ctx:
            load_task({"taskData": {"requiredSkills": "python"}})
        self.assertIsInstance(ctx.exception.__cause__, ValidationError)


class TestLoadCandidates(unittest.TestCase):

    def test_valid_record(self):
        worker = load_candidate(_worker_record())

        self.assertEqual(worker.id, "64f1c0ffee")
        self.assertEqual(worker.skills, ["Python", "Data Labeling"])
        self.assertEqual(worker.completed_tasks, 5)
        self.assertEqual(worker.rating, 4.5)
        self.assertTrue(worker.is_active)

    def test_defaults(self):
        worker = load_candidate({"_id": "w2"})
        self.assertEqual(worker.skills, [])
        self.assertEqual(worker.completed_tasks, 0)
        self.assertEqual(worker.rating, 0.0)
        self.assertTrue(worker.is_active)

    def test_rating_above_five_rejected(self):
        with self.assertRaises(RecordValidationError):
            load_candidate(_worker_record(rating=6))

    def test_negative_rating_rejected(self):
        with self.assertRaises(RecordValidationError):
            load_candidate(_worker_record(rating=-0.5))

    def test_negative_completed_tasks_rejected(self):
        with self.assertRaises(RecordValidationError):
            load_candidate(_worker_record(completedTasks=-1))

    def test_string_typed_values_rejected(self):
        for field, value in (("rating", "4.5"), ("completedTasks", "7"), ("isActive", "yes")):
            with self.subTest(field=field):
                with self.assertRaises(RecordValidationError):
                    load_candidate(_worker_record(**{field: value}))

    def test_string_typed_task_rate_rejected(self):
        with self.assertRaises(RecordValidationError):
            load_task({"title": "Audit", "hourlyRate": "20"})

    def test_missing_id_rejected(self):
        record = _worker_record()
        del record["_id"]
        with self.assertRaises(RecordValidationError):
            load_candidate(record)

    def test_batch_reports_failing_index(self):
        records = [_worker_record(_id="a"), _worker_record(_id="b"), _worker_record(_id="c", rating=9)]

        with self.assertRaises(RecordValidationError) as ctx:
            load_candidates(records)

        self.assertEqual(ctx.exception.index, 2)
        self.assertIn("index 2", str(ctx.exception))
        self.assertIsInstance(ctx.exception.__cause__, ValidationError)

    def test_batch_keeps_order(self):
        workers = load_candidates([_worker_record(_id=i) for i in ("z", "a", "m")])
        self.assertEqual([w.id for w in workers], ["z", "a", "m"])

    def test_is_value_error(self):
        self.assertTrue(issubclass(RecordValidationError, ValueError))


if __name__ == "__main__":
    unittest.main()
