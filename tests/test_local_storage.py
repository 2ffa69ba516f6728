"""
Test Load Layer - local copies of raw programs text and agencies
"""

import os
import sys
import tempfile
from datetime import date

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import unittest
import polars as pl

from src.load.local_storage import (
    agencies_to_frame,
    save_agency_data,
    save_text,
)


class TestLocalStorage(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.output_dir = self.tmp.name

    def tearDown(self):
        self.tmp.cleanup()

    def test_agencies_to_frame_keeps_order_and_nulls(self):
        df = agencies_to_frame(["DOE", None, "ACS", 7])

        self.assertEqual(df.schema, {"agency": pl.String})
        self.assertEqual(df["agency"].to_list(), ["DOE", None, "ACS", "7"])

    def test_agencies_to_frame_empty(self):
        df = agencies_to_frame([])

        self.assertEqual(df.height, 0)
        self.assertEqual(df.columns, ["agency"])

    def test_save_text_is_verbatim(self):
        path = os.path.join(self.output_dir, "nested", "raw.json")
        text = '[{"agency":"DOE"}]\r\n'

        save_text(text, path)

        with open(path, "r", encoding="utf-8", newline="") as f:
            self.assertEqual(f.read(), text)

    def test_save_agency_data(self):
        today = date.today().strftime("%Y-%m-%d")

        paths = save_agency_data(
            '[{"agency":"DOE"},{"other":"x"}]', ["DOE", None], self.output_dir
        )

        self.assertEqual(
            paths["raw"], os.path.join(self.output_dir, f"raw_programs_{today}.json")
        )
        self.assertEqual(
            paths["agencies"],
            os.path.join(self.output_dir, f"agencies_{today}.parquet"),
        )
        self.assertEqual(pl.read_parquet(paths["agencies"])["agency"].to_list(), ["DOE", None])


if __name__ == "__main__":
    unittest.main()
