import unittest

from launchgate.errors import MalformedVersion
from launchgate.version import Ordering, Version, compare_versions


class VersionTests(unittest.TestCase):
    def test_missing_trailing_component_is_zero(self) -> None:
        self.assertEqual(compare_versions("1.2", "1.2.0"), Ordering.EQUAL)
        self.assertEqual(compare_versions("1.2.0.0", "1.2"), Ordering.EQUAL)

    def test_less_and_greater(self) -> None:
        self.assertEqual(compare_versions("1.1", "1.2"), Ordering.LESS)
        self.assertEqual(compare_versions("1.3", "1.2"), Ordering.GREATER)

    def test_components_compare_numerically(self) -> None:
        self.assertEqual(compare_versions("1.2.10", "1.2.9"), Ordering.GREATER)
        self.assertEqual(compare_versions("1.10", "1.9.9"), Ordering.GREATER)

    def test_equal_to_itself(self) -> None:
        for value in ("0", "1.0", "2.14.3", "10.0.0.1"):
            self.assertEqual(compare_versions(value, value), Ordering.EQUAL)

    def test_antisymmetric_and_transitive(self) -> None:
        versions = ["0.9", "1", "1.0.1", "1.2", "1.10", "2.0.0"]
        opposite = {Ordering.LESS: Ordering.GREATER, Ordering.GREATER: Ordering.LESS, Ordering.EQUAL: Ordering.EQUAL}
        for a in versions:
            for b in versions:
                self.assertEqual(compare_versions(a, b), opposite[compare_versions(b, a)])
        for a, b, c in zip(versions, versions[1:], versions[2:]):
            self.assertEqual(compare_versions(a, b), Ordering.LESS)
            self.assertEqual(compare_versions(b, c), Ordering.LESS)
            self.assertEqual(compare_versions(a, c), Ordering.LESS)

    def test_accepts_parsed_versions(self) -> None:
        self.assertEqual(compare_versions(Version.parse("1.4"), "1.4.0"), Ordering.EQUAL)
        self.assertEqual(str(Version.parse(" 1.04.0 ")), "1.4.0")

    def test_malformed_versions_raise(self) -> None:
        for value in ("", "   ", "1..2", "1.a", "v1.2", "1.2.", "1.-2", "1.²", "1.2rc1"):
            with self.subTest(value=value):
                with self.assertRaises(MalformedVersion):
                    compare_versions(value, "1.0")

    def test_oversized_component_is_malformed(self) -> None:
        with self.assertRaises(MalformedVersion):
            compare_versions("1." + "9" * 5000, "1.0")
