import unittest

from coach.domain.AthleteProfile import AthleteProfile
from coach.logic.prompt.builder import build_prompt
from coach.tests.fakes import SOCCER_FORM


class TestPromptBuilder(unittest.TestCase):

    def setUp(self):
        self.profile = AthleteProfile.from_form(SOCCER_FORM)

    def test_profile_values_are_interpolated(self):
        prompt = build_prompt(self.profile)
        self.assertIn("Sport: Soccer", prompt)
        self.assertIn("Age: 22 years old", prompt)
        self.assertIn("Height: 180 cm", prompt)
        self.assertIn("Weight: 75 kg", prompt)
        self.assertIn("Goal: Improve sprint speed", prompt)

    def test_empty_injuries_render_as_none(self):
        self.assertIn("Injuries/Limitations: None", build_prompt(self.profile))

    def test_injuries_are_included(self):
        profile = AthleteProfile.from_form({**SOCCER_FORM, "injuries": "Previous ankle sprain"})
        self.assertIn("Injuries/Limitations: Previous ankle sprain", build_prompt(profile))

    def test_requests_three_labelled_sections(self):
        prompt = build_prompt(self.profile)
        for label in ("**TRAINING PLAN**", "**NUTRITION PLAN**", "**RECOVERY PLAN**"):
            self.assertIn(label, prompt)
        self.assertIn("Macro breakdown", prompt)
        self.assertIn("Sleep recommendations", prompt)

    def test_braces_in_values_are_kept_literally(self):
        profile = AthleteProfile.from_form({**SOCCER_FORM, "goal": "Run {fast}"})
        self.assertIn("Goal: Run {fast}", build_prompt(profile))


class TestAthleteProfile(unittest.TestCase):

    def test_from_form_strips_and_formats_numbers(self):
        profile = AthleteProfile.from_form({"sport": " Rowing ", "age": 30, "height": 185.0, "weight": 82.5, "goal": "Win"})
        self.assertEqual(profile.sport, "Rowing")
        self.assertEqual(profile.age, "30")
        self.assertEqual(profile.height, "185")
        self.assertEqual(profile.weight, "82.5")
        self.assertEqual(profile.injuries, "")

    def test_to_record_converts_numeric_text(self):
        record = AthleteProfile.from_form({**SOCCER_FORM, "weight": "75.5"}).to_record()
        self.assertEqual(record["age"], 22)
        self.assertEqual(record["height"], 180)
        self.assertEqual(record["weight"], 75.5)
        self.assertEqual(record["sport"], "Soccer")

    def test_to_record_keeps_unparsable_text(self):
        record = AthleteProfile.from_form({**SOCCER_FORM, "age": "twenty"}).to_record()
        self.assertEqual(record["age"], "twenty")

    def test_profile_is_immutable(self):
        profile = AthleteProfile.from_form(SOCCER_FORM)
        with self.assertRaises(Exception):
            profile.sport = "Tennis"


if __name__ == '__main__':
    unittest.main()
