import json
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from jobform.forms.constants import ACKNOWLEDGMENT_KEYS, TEXT_FIELDS  # noqa: E402
from jobform.forms.state import FormState  # noqa: E402
from jobform.schemas.application import PositionType  # noqa: E402


class FormStateTests(unittest.TestCase):
    def test_defaults_are_fully_defined(self):
        form = FormState()
        snapshot = form.snapshot()
        for name in TEXT_FIELDS:
            self.assertEqual(snapshot[name], "")
        self.assertEqual(form.state.position_type, PositionType.UNSET)
        self.assertEqual(set(snapshot["acknowledgments"]), set(ACKNOWLEDGMENT_KEYS))
        self.assertFalse(any(snapshot["acknowledgments"].values()))

    def test_update_field_overwrites(self):
        form = FormState()
        form.update_field("first_name", "Alex")
        form.update_field("first_name", "Sam")
        form.update_field("motivation", "I like mornings on the course.")
        self.assertEqual(form.state.first_name, "Sam")
        self.assertEqual(form.state.motivation, "I like mornings on the course.")

    def test_position_type_is_coerced(self):
        form = FormState()
        form.update_field("position_type", "Part-Time")
        self.assertIs(form.state.position_type, PositionType.PART_TIME)
        with self.assertRaises(ValueError):
            form.update_field("position_type", "Contract")
        self.assertIs(form.state.position_type, PositionType.PART_TIME)

    def test_unknown_names_are_programming_errors(self):
        form = FormState()
        with self.assertRaises(KeyError):
            form.update_field("favourite_color", "green")
        with self.assertRaises(KeyError):
            form.update_flag("ack_weekends", True)

    def test_update_flag(self):
        form = FormState()
        form.update_flag("ack_machinery", True)
        self.assertTrue(form.state.acknowledgments["ack_machinery"])
        form.update_flag("ack_machinery", False)
        self.assertFalse(form.state.acknowledgments["ack_machinery"])

    def test_snapshot_round_trip(self):
        form = FormState()
        form.update_field("first_name", "Alex")
        form.update_field("email", "alex@example.com")
        form.update_field("position_type", "Full-Time")
        form.update_field("start_date", "2026-11-02")
        form.update_flag("ack_outdoor", True)

        restored = FormState.from_snapshot(form.to_json())
        self.assertEqual(restored.snapshot(), form.snapshot())

    def test_overlay_keeps_defaults_for_missing_and_ignores_unknown(self):
        raw = json.dumps(
            {
                "last_name": "Chen",
                "shoe_size": "44",
                "phone": 5551234,
                "position_type": "Seasonal",
                "acknowledgments": {"ack_physical": True, "ack_outdoor": "yes", "ack_golf": True},
            }
        )
        form = FormState.from_snapshot(raw)
        self.assertEqual(form.state.last_name, "Chen")
        self.assertEqual(form.state.phone, "")
        self.assertEqual(form.state.position_type, PositionType.UNSET)
        self.assertTrue(form.state.acknowledgments["ack_physical"])
        self.assertFalse(form.state.acknowledgments["ack_outdoor"])
        self.assertNotIn("ack_golf", form.state.acknowledgments)
        self.assertNotIn("shoe_size", form.snapshot())

    def test_malformed_snapshots_yield_defaults(self):
        for raw in ("{not json", "[1, 2, 3]", '"just a string"', "null", ""):
            with self.subTest(raw=raw):
                form = FormState.from_snapshot(raw)
                self.assertEqual(form.snapshot(), FormState().snapshot())


if __name__ == "__main__":
    unittest.main()
