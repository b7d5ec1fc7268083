import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from jobform.forms.reconcile import merge_parsed_resume  # noqa: E402
from jobform.forms.state import FormState  # noqa: E402
from jobform.schemas.application import ParsedResumeData, PositionType  # noqa: E402


class ReconcileTests(unittest.TestCase):
    def test_empty_import_value_does_not_overwrite(self):
        form = FormState()
        form.update_field("first_name", "Alex")
        merge_parsed_resume(form, ParsedResumeData(first_name="", last_name="Chen"))
        self.assertEqual(form.state.first_name, "Alex")
        self.assertEqual(form.state.last_name, "Chen")

    def test_present_import_value_overwrites_existing_input(self):
        form = FormState()
        form.update_field("first_name", "Alex")
        changed = merge_parsed_resume(form, ParsedResumeData(first_name="Alexandra"))
        self.assertEqual(form.state.first_name, "Alexandra")
        self.assertEqual(changed, ["first_name"])

    def test_summary_is_prepended_to_experience(self):
        form = FormState()
        form.update_field("experience", "Worked retail 2018-2020.")
        merge_parsed_resume(form, ParsedResumeData(experience_summary="5 years groundskeeping."))
        self.assertEqual(form.state.experience, "5 years groundskeeping.\n\nWorked retail 2018-2020.")

    def test_summary_into_empty_experience_is_trimmed(self):
        form = FormState()
        merge_parsed_resume(form, ParsedResumeData(experience_summary="Mowed fairways for 3 seasons."))
        self.assertEqual(form.state.experience, "Mowed fairways for 3 seasons.")

    def test_absent_summary_leaves_experience(self):
        form = FormState()
        form.update_field("experience", "Worked retail 2018-2020.")
        merge_parsed_resume(form, ParsedResumeData(experience_summary=""))
        self.assertEqual(form.state.experience, "Worked retail 2018-2020.")

    def test_other_fields_are_never_touched(self):
        form = FormState()
        form.update_field("position_type", "Full-Time")
        form.update_field("start_date", "2026-11-02")
        form.update_field("references", "Pat - 555-0101 - Supervisor")
        form.update_field("motivation", "Love the outdoors.")
        form.update_flag("ack_outdoor", True)
        before = form.snapshot()

        merge_parsed_resume(
            form,
            ParsedResumeData(
                first_name="Alex",
                last_name="Chen",
                email="alex@example.com",
                phone="555-0100",
                address="1 Fairway Dr",
                experience_summary="Groundskeeper.",
            ),
        )
        after = form.snapshot()
        for name in ("position_type", "start_date", "references", "motivation", "acknowledgments"):
            self.assertEqual(after[name], before[name])
        self.assertIs(form.state.position_type, PositionType.FULL_TIME)
        self.assertEqual(form.state.address, "1 Fairway Dr")

    def test_all_empty_import_changes_nothing(self):
        form = FormState()
        form.update_field("email", "alex@example.com")
        before = form.snapshot()
        self.assertEqual(merge_parsed_resume(form, ParsedResumeData()), [])
        self.assertEqual(form.snapshot(), before)


if __name__ == "__main__":
    unittest.main()
