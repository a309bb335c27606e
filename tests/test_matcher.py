import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.features.matcher import (  # noqa: E402
    ResumeIndex,
    StructureFlags,
    compute_score,
    detect_structure,
    is_short_resume,
    match_keywords,
    match_section_keywords,
)
from app.schemas.ats import LineFeedback, SectionBreakdown  # noqa: E402


class ResumeIndexTests(unittest.TestCase):
    def setUp(self):
        self.index = ResumeIndex("Managed bookings and travel operations")

    def test_unigrams_match_by_token_stem_or_substring(self):
        self.assertTrue(self.index.contains("travel"))
        self.assertTrue(self.index.contains("managing"))
        self.assertTrue(self.index.contains("booking"))
        self.assertTrue(self.index.contains("operation"))
        self.assertFalse(self.index.contains("booked"))

    def test_phrases_match_by_substring_only(self):
        self.assertTrue(self.index.contains("travel operations"))
        self.assertFalse(self.index.contains("operations travel"))

    def test_match_partitions_keywords_in_order(self):
        result = match_keywords(self.index, ["travel", "booking management", "operation", "excel"])
        self.assertEqual(result.matched, ["travel", "operation"])
        self.assertEqual(result.missing, ["booking management", "excel"])


class StructureAndScoreTests(unittest.TestCase):
    def test_structure_flags_from_normalized_text(self):
        flags = detect_structure("jane doe skills excel work experience acme")
        self.assertEqual(flags, StructureFlags(has_skills=True, has_experience=True, has_education=False))
        self.assertAlmostEqual(flags.bonus, 2 / 3)

    def test_short_resume_threshold(self):
        self.assertTrue(is_short_resume("x" * 1199))
        self.assertFalse(is_short_resume("x" * 1200))

    def test_score_formula_and_clamping(self):
        none = StructureFlags(False, False, False)
        full = StructureFlags(True, True, True)
        skills_only = StructureFlags(True, False, False)
        self.assertEqual(compute_score(0, 0, none, short_resume=True), 0)
        self.assertEqual(compute_score(10, 10, full, short_resume=False), 100)
        self.assertEqual(compute_score(5, 10, skills_only, short_resume=True), 32)
        self.assertEqual(compute_score(1, 2, full, short_resume=False), 60)


class SectionKeywordTests(unittest.TestCase):
    def test_skills_section_checks_tools_and_platforms(self):
        section = SectionBreakdown(
            name="Skills",
            start_line=5,
            end_line=6,
            lines=[LineFeedback(line_number=6, section="Skills", text="Excel, CRM")],
        )
        match_section_keywords(section, ["excel", "google sheets", "crm", "travel", "ota"])
        self.assertEqual(section.matched_keywords, ["excel", "crm"])
        self.assertEqual(section.missing_keywords, ["google sheets", "ota"])

    def test_missing_keywords_are_capped(self):
        section = SectionBreakdown(name="Experience", start_line=1, end_line=1)
        keywords = [f"travel{i}" for i in range(30)]
        match_section_keywords(section, keywords)
        self.assertEqual(section.matched_keywords, [])
        self.assertEqual(section.missing_keywords, keywords[:20])


if __name__ == "__main__":
    unittest.main()
