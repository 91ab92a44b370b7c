from winudid.test_init import *


class TestNormalize(unittest.IsolatedAsyncioTestCase):
    async def test_collapses_whitespace(self):
        raw = "  ABC \r\n  123\t\tXYZ \r\n"
        self.assertEqual(clean_output(raw), "ABC 123 XYZ")

    async def test_strips_control_chars(self):
        raw = "\ufeffPF2\x00ABC\x07DE\r\n"
        self.assertEqual(clean_output(raw), "PF2ABCDE")

    async def test_multi_instance_flattened(self):
        raw = "SERIAL-A\r\nSERIAL-B\r\n"
        self.assertEqual(clean_output(raw), "SERIAL-A SERIAL-B")

    async def test_placeholders_rejected(self):
        junk = [
            "To be filled by O.E.M.",
            "TO BE FILLED BY O.E.M.",
            "Not Available",
            "Not Applicable",
            "None",
            "Default string None",
            "0",
            "null",
            "  0  \r\n",
        ]
        for raw in junk:
            self.assertEqual(clean_output(raw), "")
            self.assertTrue(is_placeholder(collapse_output(raw)))

    async def test_exact_placeholders_only_match_whole_value(self):
        self.assertEqual(clean_output("000123"), "000123")
        self.assertEqual(clean_output("nullified"), "nullified")

    async def test_null_is_case_sensitive(self):
        # Only the substring list ignores case.
        self.assertEqual(clean_output("NULL"), "NULL")

    async def test_empty_is_not_a_placeholder(self):
        self.assertEqual(normalize_field("  \r\n "), "")

    async def test_normalize_field_raises_on_placeholder(self):
        with self.assertRaises(ErrorPlaceholderValue):
            normalize_field("To Be Filled By O.E.M.")

if __name__ == '__main__':
    main()
