import json
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from typer.testing import CliRunner

from appconf.cli import app
from appconf.cli.commands.edit import assign_key, parse_value, remove_key


class CLITestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.temp_dir = tempfile.TemporaryDirectory()
        self.runner = CliRunner()
        self.env = {"XDG_CONFIG_HOME": self.temp_dir.name, "APPCONF_LOG_LEVEL": None}

    def tearDown(self) -> None:
        self.temp_dir.cleanup()

    def invoke(self, *args: str):
        return self.runner.invoke(app, list(args), env=self.env)

    def test_path_command_resolves_app_directory(self) -> None:
        result = self.invoke("path", "--app", "demo")

        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertEqual(result.output.strip(), f"{self.temp_dir.name}/demo/config.json")

    def test_path_command_respects_format_and_file(self) -> None:
        result = self.invoke("path", "--dir", self.temp_dir.name, "--format", "toml")
        named = self.invoke("path", "--dir", self.temp_dir.name, "--file", "app.conf")

        self.assertEqual(result.output.strip(), str(Path(self.temp_dir.name) / "config.toml"))
        self.assertEqual(named.output.strip(), str(Path(self.temp_dir.name) / "app.conf"))

    def test_path_command_uses_platform_directory_for_user_app(self) -> None:
        with patch("appconf.builder.user_config_dir", return_value=self.temp_dir.name):
            result = self.invoke("path", "--user-app", "demo", "--format", "yaml")

        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertEqual(result.output.strip(), str(Path(self.temp_dir.name) / "config.yaml"))

    def test_location_options_are_mutually_exclusive(self) -> None:
        result = self.invoke("path", "--app", "demo", "--dir", self.temp_dir.name)

        self.assertNotEqual(result.exit_code, 0)

    def test_unknown_format_is_rejected(self) -> None:
        result = self.invoke("path", "--format", "ini")

        self.assertNotEqual(result.exit_code, 0)

    def test_set_writes_typed_values(self) -> None:
        result = self.invoke("set", "server.port", "8080", "--app", "demo")
        self.assertEqual(result.exit_code, 0, msg=result.output)
        result = self.invoke("set", "debug", "true", "--app", "demo")
        self.assertEqual(result.exit_code, 0, msg=result.output)

        stored = json.loads((Path(self.temp_dir.name) / "demo" / "config.json").read_text(encoding="utf-8"))
        self.assertEqual(stored, {"server": {"port": 8080}, "debug": True})

    def test_set_stores_dates_as_strings(self) -> None:
        result = self.invoke("set", "released", "2024-01-01", "--dir", self.temp_dir.name)

        self.assertEqual(result.exit_code, 0, msg=result.output)
        stored = json.loads((Path(self.temp_dir.name) / "config.json").read_text(encoding="utf-8"))
        self.assertEqual(stored, {"released": "2024-01-01"})

    def test_show_prints_stored_config(self) -> None:
        self.invoke("set", "name", "demo", "--dir", self.temp_dir.name, "--format", "toml")

        result = self.invoke("show", "--dir", self.temp_dir.name, "--format", "toml")

        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertIn('name = "demo"', result.output)

    def test_show_reports_missing_file(self) -> None:
        result = self.invoke("show", "--app", "absent")

        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertIn("No config file at", result.output)

    def test_show_reports_malformed_file(self) -> None:
        (Path(self.temp_dir.name) / "config.json").write_text("{broken", encoding="utf-8")

        result = self.invoke("show", "--dir", self.temp_dir.name)

        self.assertEqual(result.exit_code, 2)
        self.assertIn("Could not read", result.output)

    def test_set_refuses_to_descend_into_scalar(self) -> None:
        self.invoke("set", "server", "local", "--dir", self.temp_dir.name)

        result = self.invoke("set", "server.port", "1", "--dir", self.temp_dir.name)

        self.assertEqual(result.exit_code, 2)
        self.assertIn("server is not a table", result.output)

    def test_unset_removes_key(self) -> None:
        self.invoke("set", "a.b", "1", "--dir", self.temp_dir.name)
        self.invoke("set", "a.c", "2", "--dir", self.temp_dir.name)

        result = self.invoke("unset", "a.b", "--dir", self.temp_dir.name)

        self.assertEqual(result.exit_code, 0, msg=result.output)
        stored = json.loads((Path(self.temp_dir.name) / "config.json").read_text(encoding="utf-8"))
        self.assertEqual(stored, {"a": {"c": 2}})

    def test_unset_missing_key_exits_with_one(self) -> None:
        result = self.invoke("unset", "nope", "--dir", self.temp_dir.name)

        self.assertEqual(result.exit_code, 1)
        self.assertIn("not found", result.output)
        self.assertFalse((Path(self.temp_dir.name) / "config.json").exists())


class EditHelpersTests(unittest.TestCase):
    def test_parse_value_uses_yaml_scalars(self) -> None:
        self.assertEqual(parse_value("3"), 3)
        self.assertIs(parse_value("false"), False)
        self.assertIsNone(parse_value("null"))
        self.assertEqual(parse_value("plain text"), "plain text")
        self.assertEqual(parse_value("a: b: c"), "a: b: c")

    def test_parse_value_keeps_dates_as_strings(self) -> None:
        self.assertEqual(parse_value("2024-01-01"), "2024-01-01")
        self.assertEqual(parse_value("2024-01-01T10:00:00Z"), "2024-01-01T10:00:00Z")

    def test_assign_key_creates_intermediate_tables(self) -> None:
        config: dict = {}

        assign_key(config, "a.b.c", 1)

        self.assertEqual(config, {"a": {"b": {"c": 1}}})

    def test_remove_key_reports_absence(self) -> None:
        config = {"a": {"b": 1}, "s": "x"}

        self.assertFalse(remove_key(config, "a.z"))
        self.assertFalse(remove_key(config, "s.t"))
        self.assertTrue(remove_key(config, "a.b"))
        self.assertEqual(config, {"a": {}, "s": "x"})


if __name__ == "__main__":
    unittest.main()
