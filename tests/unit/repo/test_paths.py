from __future__ import annotations

import unittest

from panecmder.repo.paths import get_file_name, get_file_path


class GetFilePathTests(unittest.TestCase):
    def test_joins_with_single_separator(self) -> None:
        self.assertEqual(get_file_path("/usr/bin", "ls", "/"), "/usr/bin/ls")
        self.assertEqual(get_file_path("/usr/bin/", "ls", "/"), "/usr/bin/ls")
        self.assertEqual(get_file_path("/", "etc", "/"), "/etc")
        self.assertEqual(get_file_path("", "etc", "/"), "etc")

    def test_dot_and_empty_keep_parent(self) -> None:
        self.assertEqual(get_file_path("/usr/bin", ".", "/"), "/usr/bin")
        self.assertEqual(get_file_path("/usr/bin", "", "/"), "/usr/bin")

    def test_parent_strips_last_component(self) -> None:
        self.assertEqual(get_file_path("/usr/bin", "..", "/"), "/usr")
        self.assertEqual(get_file_path("/usr", "..", "/"), "/")
        self.assertEqual(get_file_path("/", "..", "/"), "/")
        self.assertEqual(get_file_path("local:", "..", "/"), "local:")

    def test_custom_separator(self) -> None:
        self.assertEqual(get_file_path("C:\\data", "x.txt", "\\"), "C:\\data\\x.txt")
        self.assertEqual(get_file_path("C:\\data\\sub", "..", "\\"), "C:\\data")


class GetFileNameTests(unittest.TestCase):
    def test_returns_last_component(self) -> None:
        self.assertEqual(get_file_name("/usr/bin/ls", "/"), "ls")
        self.assertEqual(get_file_name("/usr/bin/", "/"), "bin")
        self.assertEqual(get_file_name("/", "/"), "/")


if __name__ == "__main__":
    unittest.main()
