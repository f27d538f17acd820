import os
import tempfile
import unittest

from unittest.mock import patch

from hashset.hash_set import HashSet
from hashset.main import main, fill


class SmallHashSet(HashSet):
    MAXIMUM_CAPACITY = 8


class TestFill(unittest.TestCase):
    def test_fill_counts_resizes(self):
        hash_set: HashSet[int] = HashSet()
        resizes = fill(hash_set, 100)
        # 4 -> 8 -> 16 -> 32 -> 64 -> 128 -> 256
        self.assertEqual(resizes, 6)
        self.assertEqual(len(hash_set), 100)

    def test_fill_without_resize(self):
        hash_set: HashSet[int] = HashSet(1024)
        self.assertEqual(fill(hash_set, 100), 0)


class TestMain(unittest.TestCase):
    @patch("builtins.print")
    def test_main_prints_summary(self, mock_print):
        exit_code = main(["--count", "100"])
        self.assertEqual(exit_code, 0)
        mock_print.assert_called_once_with("size=100 capacity=256 resizes=6")

    @patch("builtins.print")
    def test_main_with_capacity_and_load_factor(self, mock_print):
        exit_code = main(["--count", "10", "--capacity", "3", "--load-factor", "4"])
        self.assertEqual(exit_code, 0)
        mock_print.assert_called_once_with("size=10 capacity=4 resizes=0")

    @patch("builtins.print")
    def test_main_rejects_bad_load_factor(self, mock_print):
        with self.assertLogs(level="ERROR"):
            exit_code = main(["--load-factor", "0"])
        self.assertEqual(exit_code, 2)
        mock_print.assert_not_called()

    @patch("builtins.print")
    def test_main_reports_capacity_exceeded(self, mock_print):
        with patch("hashset.main.HashSet", SmallHashSet):
            with self.assertLogs(level="ERROR") as cm:
                exit_code = main(["--count", "100"])
        self.assertEqual(exit_code, 1)
        self.assertTrue(any("Stopped after" in line for line in cm.output))
        mock_print.assert_not_called()

    @patch("builtins.print")
    def test_main_with_profile_output(self, mock_print):
        with tempfile.TemporaryDirectory() as tmp_dir:
            output_file = os.path.join(tmp_dir, "profile_stats.prof")
            exit_code = main(["--count", "50", "--profile", "--profile-output", output_file])
            self.assertEqual(exit_code, 0)
            self.assertTrue(os.path.exists(output_file))
        mock_print.assert_called_once_with("size=50 capacity=128 resizes=5")


if __name__ == "__main__":
    unittest.main()
