import random
import sys
import unittest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from quiltcatalog.errors import InvalidSnapshot
from quiltcatalog.models import VersionEntry, Versions
from quiltcatalog.utils import InvalidVersion, SemanticVersion, find_first, sort_descending


class TestSemanticVersion(unittest.TestCase):
    def test_parse_components(self):
        v = SemanticVersion.parse("7.0.2-beta.1+0.83.0-1.20.1")
        self.assertEqual((v.major, v.minor, v.patch), (7, 0, 2))
        self.assertEqual(v.pre, ("beta", "1"))
        self.assertEqual(v.build_metadata, "0.83.0-1.20.1")
        self.assertEqual(str(v), "7.0.2-beta.1+0.83.0-1.20.1")

    def test_rejects_non_semver(self):
        for text in ["1.20", "1.2.3.4", "01.2.3", "1.2.3-01", "1.2.3+", "", "v1.2.3", "1.2.3-beta..1",
                     "1.2.3\u0663", "\u0661.2.3", "1.0.0-1\u0663", "1.0.0+build.\u0663"]:
            with self.subTest(text=text):
                with self.assertRaises(InvalidVersion):
                    SemanticVersion.parse(text)

    def test_precedence_chain(self):
        # Ordering example from the SemVer 2.0.0 document.
        chain = [
            "1.0.0-alpha", "1.0.0-alpha.1", "1.0.0-alpha.beta", "1.0.0-beta",
            "1.0.0-beta.2", "1.0.0-beta.11", "1.0.0-rc.1", "1.0.0", "1.0.1", "1.1.0", "2.0.0",
        ]
        parsed = [SemanticVersion.parse(v) for v in chain]
        for lower, higher in zip(parsed, parsed[1:]):
            with self.subTest(lower=str(lower), higher=str(higher)):
                self.assertLess(lower, higher)
                self.assertGreater(higher, lower)

    def test_build_metadata_ignored_for_ordering(self):
        a = SemanticVersion.parse("5.0.0+1.20.1")
        b = SemanticVersion.parse("5.0.0+1.19.2")
        self.assertFalse(a < b)
        self.assertFalse(b < a)
        self.assertTrue(a >= b and b >= a)
        self.assertLess(SemanticVersion.parse("4.9.9+1.21"), a)


class TestSortDescending(unittest.TestCase):
    def test_descending_permutation(self):
        raw = ["1.4.0", "1.3.0", "1.4.0-SNAPSHOT", "0.12.5", "1.10.0", "1.4.0+local", "1.3.0"]
        parsed = [SemanticVersion.parse(v) for v in raw]
        random.Random(7).shuffle(parsed)

        result = sort_descending(parsed)

        for current, following in zip(result, result[1:]):
            self.assertGreaterEqual(current, following)
        self.assertEqual(sorted(map(str, result)), sorted(raw))
        self.assertEqual(str(result[-1]), "0.12.5")
        self.assertEqual(str(result[0]), "1.10.0")

    def test_empty(self):
        self.assertEqual(sort_descending([]), [])


class TestFindFirst(unittest.TestCase):
    def test_returns_first_match_in_order(self):
        self.assertEqual(find_first([1, 4, 6, 8], lambda n: n % 2 == 0), 4)

    def test_returns_none_without_match(self):
        self.assertIsNone(find_first(["a", "b"], lambda s: s == "z"))


class TestModels(unittest.TestCase):
    def test_entry_from_json(self):
        entry = VersionEntry.from_json({"version": "1.20.1", "stable": True, "maven": "x"})
        self.assertEqual(entry.version, "1.20.1")
        self.assertTrue(entry.is_stable)
        self.assertEqual(entry.get("maven"), "x")
        self.assertIsNone(entry.get_bool("maven"))

    def test_string_stable_flag_is_not_stable(self):
        self.assertFalse(VersionEntry.from_json({"version": "1.20", "stable": "true"}).is_stable)

    def test_versions_requires_resolved_fields(self):
        with self.assertRaises(InvalidSnapshot):
            Versions(minecraft="", loader="0.20.0", mappings="1.20.1+build.1", loom="1.4.0")
        with self.assertRaises(InvalidSnapshot):
            Versions(minecraft="1.20.1", loader="0.20.0", mappings="1.20.1+build.1", loom="1.4.0", qfapi="")

    def test_invalid_snapshot_names_field(self):
        with self.assertRaises(InvalidSnapshot) as ctx:
            Versions(minecraft="1.20.1", loader="", mappings="1.20.1+build.1", loom="1.4.0")
        self.assertEqual(ctx.exception.field, "loader")
        self.assertIn("loader", str(ctx.exception))

    def test_versions_is_immutable(self):
        versions = Versions(minecraft="1.20.1", loader="0.20.0", mappings="1.20.1+build.1", loom="1.4.0")
        self.assertIsNone(versions.qfapi)
        with self.assertRaises(AttributeError):
            versions.loom = "1.5.0"


if __name__ == "__main__":
    unittest.main()
