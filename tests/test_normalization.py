import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.normalize.utils import (  # noqa: E402
    find_email,
    find_linkedin,
    find_phone,
    has_metric,
    is_bullet_line,
    normalize_line,
    normalize_text,
    split_lines,
    strip_bullet_prefix,
)


class NormalizationTests(unittest.TestCase):
    def test_normalize_text_collapses_whitespace_and_lowercases(self):
        self.assertEqual(normalize_text("  Senior\t Travel  \n Associate "), "senior travel associate")
        self.assertEqual(normalize_text(""), "")

    def test_normalize_line_keeps_case(self):
        self.assertEqual(normalize_line("  Built   APIs\tfor Payments "), "Built APIs for Payments")

    def test_split_lines_drops_blank_lines_and_normalizes_endings(self):
        raw = "Jane Doe\r\n\r\n\tSKILLS  \rExcel,\tCRM\n   \n"
        self.assertEqual(split_lines(raw), ["Jane Doe", "SKILLS", "Excel, CRM"])

    def test_bullet_detection(self):
        self.assertTrue(is_bullet_line("- Built dashboards"))
        self.assertTrue(is_bullet_line("• Led onboarding"))
        self.assertTrue(is_bullet_line("3) Reduced churn"))
        self.assertTrue(is_bullet_line("2. Owned pricing"))
        self.assertFalse(is_bullet_line("1.5 years of travel desk work"))
        self.assertFalse(is_bullet_line("-Built without space"))
        self.assertEqual(strip_bullet_prefix("* Excel"), "Excel")

    def test_metric_detection(self):
        self.assertTrue(has_metric("Cut refunds by 20%"))
        self.assertTrue(has_metric("Handled 45 bookings per day"))
        self.assertFalse(has_metric("Handled bookings for tours"))

    def test_byte_order_mark_counts_as_whitespace(self):
        self.assertEqual(normalize_line("\ufeffEXPERIENCE"), "EXPERIENCE")
        self.assertEqual(normalize_text("\ufeffSkills\ufeff Excel"), "skills excel")
        self.assertEqual(split_lines("\ufeffSUMMARY\nTravel ops"), ["SUMMARY", "Travel ops"])

    def test_contact_extraction(self):
        raw = "Jane Doe\njane.doe@Example.COM\n+49 151 2345 6789\nhttps://www.linkedin.com/in/jane-doe)."
        self.assertEqual(find_email(raw), "jane.doe@Example.COM")
        self.assertEqual(find_phone(raw), "+49 151 2345 6789")
        self.assertEqual(find_linkedin(raw), "https://www.linkedin.com/in/jane-doe")
        self.assertIsNone(find_linkedin("no profile here"))


if __name__ == "__main__":
    unittest.main()
