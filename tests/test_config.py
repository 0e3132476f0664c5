import unittest
import sys
import os
import json
import tempfile
from pathlib import Path
from unittest.mock import patch

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from stack_diff.core.errors import ConfigError
from stack_diff.utils.config import CONFIG_DIR_ENV, ConfigManager, DiffOptions


class TestConfigManager(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self.tmp.name)

    def tearDown(self):
        self.tmp.cleanup()

    def test_builtin_defaults(self):
        config = ConfigManager(self.dir)
        self.assertEqual(config.get_default_over(), 10)
        self.assertEqual(config.get_default_diff(), 5)
        self.assertTrue(config.get_default_omit_identical())

    def test_set_default_persists(self):
        ConfigManager(self.dir).set_default("over", 3)
        ConfigManager(self.dir).set_default("omit_identical", False)

        config = ConfigManager(self.dir)
        self.assertEqual(config.get_default_over(), 3)
        self.assertFalse(config.get_default_omit_identical())
        saved = json.loads((self.dir / "config.json").read_text(encoding="utf-8"))
        self.assertEqual(saved["defaults"], {"over": 3, "omit_identical": False})

    def test_set_default_rejects_bad_values(self):
        config = ConfigManager(self.dir)
        with self.assertRaises(ConfigError):
            config.set_default("threshold", 3)
        with self.assertRaises(ConfigError):
            config.set_default("over", True)
        with self.assertRaises(ConfigError):
            config.set_default("omit_identical", 1)

    def test_invalid_json_is_ignored(self):
        (self.dir / "config.json").write_text("{not json", encoding="utf-8")
        self.assertEqual(ConfigManager(self.dir).get_default_diff(), 5)

    def test_wrongly_typed_default_is_ignored(self):
        (self.dir / "config.json").write_text(
            json.dumps({"defaults": {"diff": "7", "over": 2}}), encoding="utf-8")
        config = ConfigManager(self.dir)
        self.assertEqual(config.get_default_diff(), 5)
        self.assertEqual(config.get_default_over(), 2)

    def test_environment_override(self):
        target = self.dir / "from_env"
        with patch.dict(os.environ, {CONFIG_DIR_ENV: str(target)}):
            config = ConfigManager()
        self.assertEqual(config.config_dir, target)
        self.assertFalse(target.exists())

    def test_directory_created_on_first_save(self):
        target = self.dir / "nested" / "config"
        config = ConfigManager(target)
        self.assertFalse(target.exists())
        config.set_default("diff", 2)
        self.assertEqual(ConfigManager(target).get_default_diff(), 2)

    def test_unusable_directory_still_reads_defaults(self):
        blocker = self.dir / "blocker"
        blocker.write_text("", encoding="utf-8")
        config = ConfigManager(blocker)
        self.assertEqual(config.get_default_over(), 10)
        with self.assertRaises(OSError):
            config.get_log_dir()

    def test_log_dir(self):
        log_dir = ConfigManager(self.dir / "fresh").get_log_dir()
        self.assertEqual(log_dir, self.dir / "fresh" / "logs")
        self.assertTrue(log_dir.is_dir())


class TestDiffOptions(unittest.TestCase):
    def test_defaults(self):
        options = DiffOptions(left="a.txt", right="b.txt")
        self.assertEqual((options.over, options.diff, options.omit_identical), (10, 5, True))
        self.assertIs(options.validate(), options)

    def test_missing_paths(self):
        with self.assertRaises(ConfigError):
            DiffOptions(left=None, right="b.txt").validate()
        with self.assertRaises(ConfigError):
            DiffOptions(left="a.txt", right="").validate()

    def test_thresholds_must_be_integers(self):
        with self.assertRaises(ConfigError):
            DiffOptions(left="a", right="b", over="10").validate()
        with self.assertRaises(ConfigError):
            DiffOptions(left="a", right="b", diff=True).validate()


if __name__ == '__main__':
    unittest.main()
