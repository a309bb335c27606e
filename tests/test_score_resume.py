import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.services.ats_service import score_resume  # noqa: E402

RICH_RESUME = (
    "Jane Doe\n"
    "Travel Operations Associate\n"
    "jane.doe@example.com\n"
    "+49 151 2345 6789\n"
    "SKILLS\n"
    "Excel, Google Sheets\n"
    "EXPERIENCE\n"
    "responsible for bookings and vouchers\n"
    "- Supplier coordination for 120 tours per month\n"
    "EDUCATION\n"
    "B.A. Tourism Management, 2019\n"
)
RICH_JD = "Operations associate for supplier coordination, vouchers and CRM updates."


class ScoreResumeTests(unittest.TestCase):
    def test_empty_inputs(self):
        result = score_resume("", "")
        self.assertEqual(result.score, 0)
        self.assertEqual(result.matched_keywords, [])
        self.assertEqual(result.missing_keywords, [])
        self.assertEqual(result.job_keywords, [])
        self.assertEqual(result.sections, [])
        self.assertEqual(result.corrected_resume, "")

    def test_stopword_only_job_description(self):
        result = score_resume("Managed bookings for 40 clients", "the and for with")
        self.assertEqual(result.job_keywords, [])
        self.assertEqual(result.matched_keywords, [])

    def test_keyword_match_on_single_line_resume(self):
        resume = "Managed bookings and travel operations for 50+ clients. Skills: Excel, CRM."
        jd = "Looking for booking management and travel operations experience, Excel skills preferred."
        result = score_resume(resume, jd)

        self.assertEqual(len(result.job_keywords), 13)
        self.assertIn("travel operations", result.matched_keywords)
        self.assertIn("booking", result.matched_keywords)
        self.assertIn("excel", result.matched_keywords)
        self.assertIn("booking management", result.missing_keywords)
        # 6/13 keywords, one of three structure signals, short resume penalty.
        self.assertEqual(result.score, 29)
        self.assertEqual([section.name for section in result.sections], ["General"])
        self.assertEqual(result.corrected_resume, resume)

    def test_heading_lines_open_sections(self):
        result = score_resume("EXPERIENCE\n- Did X\nPROJECTS\n- Did Y", "travel booking")
        self.assertEqual(
            [(s.name, s.start_line, s.end_line) for s in result.sections],
            [("Experience", 1, 2), ("Projects", 3, 4)],
        )

    def test_byte_order_mark_does_not_hide_first_heading(self):
        result = score_resume("\ufeffEXPERIENCE\n- Managed 40 bookings daily", "bookings")
        self.assertEqual(
            [(s.name, s.start_line, s.end_line) for s in result.sections],
            [("Experience", 1, 2)],
        )

    def test_matched_and_missing_partition_job_keywords(self):
        result = score_resume(RICH_RESUME, RICH_JD)
        self.assertFalse(set(result.matched_keywords) & set(result.missing_keywords))
        self.assertEqual(set(result.matched_keywords) | set(result.missing_keywords), set(result.job_keywords))
        merged = sorted(
            result.matched_keywords + result.missing_keywords,
            key=result.job_keywords.index,
        )
        self.assertEqual(merged, result.job_keywords)
        self.assertEqual(result.score, 52)

    def test_rich_resume_sections_and_feedback(self):
        result = score_resume(RICH_RESUME, RICH_JD)
        self.assertEqual(
            [(s.name, s.start_line, s.end_line) for s in result.sections],
            [("General", 1, 4), ("Skills", 5, 6), ("Experience", 7, 9), ("Education", 10, 11)],
        )
        sections = {section.name: section for section in result.sections}

        experience = sections["Experience"]
        self.assertEqual(experience.lines[0].suggested_rewrite, "Managed bookings and vouchers")
        self.assertIn("supplier coordination", experience.matched_keywords)
        self.assertIn("vouchers", experience.matched_keywords)
        self.assertIn("crm", sections["Skills"].missing_keywords)
        self.assertIn(
            "If you have these tools/platforms, add them to Skills for ATS matching.",
            sections["Skills"].issues,
        )
        self.assertIn("- Managed bookings and vouchers", result.corrected_resume)
        self.assertTrue(result.corrected_resume.startswith("Jane Doe\n"))

    def test_keyword_lists_are_capped(self):
        jd = " ".join(f"travel{i}" for i in range(120))
        result = score_resume("EXPERIENCE\n- Coordinated suppliers daily", jd)
        self.assertEqual(len(result.job_keywords), 60)
        for section in result.sections:
            self.assertLessEqual(len(section.missing_keywords), 20)
            for line in section.lines:
                self.assertLessEqual(len(line.suggested_keywords), 6)

    def test_scoring_is_deterministic(self):
        self.assertEqual(score_resume(RICH_RESUME, RICH_JD), score_resume(RICH_RESUME, RICH_JD))


if __name__ == "__main__":
    unittest.main()
