import sys
import unittest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from quiltcatalog.models import Versions
from quiltcatalog.report import QFAPI_MISSING_COMMENT, format_gradle_catalog


def snapshot(qfapi=None):
    return Versions(minecraft="1.20.1", loader="0.20.0", mappings="1.20.1+build.1", loom="1.4.0", qfapi=qfapi)


class TestFormatGradleCatalog(unittest.TestCase):
    def test_sections_in_order(self):
        lines = format_gradle_catalog(snapshot("5.0.0+1.20.1")).splitlines()
        self.assertLess(lines.index("[versions]"), lines.index("[libraries]"))
        self.assertLess(lines.index("[libraries]"), lines.index("[plugins]"))
        self.assertIn('minecraft = "1.20.1"', lines)
        self.assertIn('quilt_loader = "0.20.0"', lines)
        self.assertIn('quilt_mappings = "1.20.1+build.1"', lines)
        self.assertEqual(lines[-1], 'quilt_loom = { id = "org.quiltmc.loom", version = "1.4.0" }')

    def test_qfapi_present(self):
        lines = format_gradle_catalog(snapshot("5.0.0+1.20.1")).splitlines()
        with_version = [line for line in lines if "5.0.0+1.20.1" in line and not line.startswith("#")]
        self.assertEqual(with_version, ['quilted_fabric_api = "5.0.0+1.20.1"'])
        self.assertIn(
            'quilted_fabric_api = { module = "org.quiltmc.quilted-fabric-api:quilted-fabric-api", '
            'version.ref = "quilted_fabric_api" }',
            lines,
        )
        self.assertNotIn(QFAPI_MISSING_COMMENT, lines)

    def test_qfapi_missing_is_commented_out(self):
        lines = format_gradle_catalog(snapshot()).splitlines()
        qfapi_lines = [line for line in lines if "quilted_fabric_api" in line]
        self.assertTrue(qfapi_lines)
        for line in qfapi_lines:
            self.assertTrue(line.startswith("# "), line)
        self.assertIn(QFAPI_MISSING_COMMENT, lines)
        self.assertIn("[plugins]", lines)


if __name__ == "__main__":
    unittest.main()
