"""
Basic functionality tests for Sinem's Amazing Web App.

These tests verify that core components and scripts can be imported without
errors.
"""

import unittest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class TestBasicFunctionality(unittest.TestCase):
    """Test basic functionality and imports."""

    def test_package_metadata(self):
        import sinem_web

        self.assertEqual(sinem_web.__version__, "1.0.0")

    def test_config_import(self):
        """Test that config module can be imported."""
        try:
            from sinem_web import config

            self.assertTrue(hasattr(config, "HOST"))
            self.assertTrue(hasattr(config, "PORT"))
        except ImportError as e:
            self.fail(f"Config import failed: {e}")

    def test_web_server_import(self):
        """Test that web server module can be imported."""
        try:
            from sinem_web import web_server

            self.assertTrue(hasattr(web_server, "create_flask_app"))
            self.assertTrue(callable(web_server.main))
        except ImportError as e:
            self.fail(f"Web server import failed: {e}")


class TestScripts(unittest.TestCase):
    """Test that scripts can be imported and have main functions."""

    def test_smoke_check_script(self):
        """Test smoke check script can be imported."""
        try:
            scripts_path = os.path.join(
                os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "scripts"
            )
            sys.path.insert(0, scripts_path)

            import smoke_check

            self.assertTrue(hasattr(smoke_check, "main"))
        except ImportError as e:
            self.fail(f"Smoke check script import failed: {e}")


@unittest.skipIf(sys.version_info < (3, 11), "tomllib requires Python 3.11")
class TestPackaging(unittest.TestCase):
    """Test that every directly imported library is declared."""

    def setUp(self):
        import tomllib

        pyproject = os.path.join(
            os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "pyproject.toml"
        )
        with open(pyproject, "rb") as f:
            self.project = tomllib.load(f)["project"]

    def _names(self, requirements):
        return {req.split(">")[0].split("=")[0].strip().lower() for req in requirements}

    def test_runtime_dependencies(self):
        names = self._names(self.project["dependencies"])
        self.assertTrue({"flask", "werkzeug", "python-dotenv"} <= names)

    def test_smoke_check_extra_has_requests(self):
        extras = self.project["optional-dependencies"]
        self.assertIn("requests", self._names(extras["scripts"]))
        self.assertIn("requests", self._names(extras["test"]))


if __name__ == "__main__":
    unittest.main()
