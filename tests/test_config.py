import unittest
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from devevent.config import parse_log_level, parse_positive_int, require_mongodb_uri
from devevent.errors import ConfigError


class TestConfig(unittest.TestCase):

    def test_timeout_is_parsed(self):
        self.assertEqual(parse_positive_int("MONGODB_SERVER_SELECTION_TIMEOUT_MS", " 2500 "), 2500)

    def test_non_numeric_timeout_is_a_config_error(self):
        for value in ("five seconds", "", "1.5"):
            with self.assertRaises(ConfigError) as ctx:
                parse_positive_int("MONGODB_SERVER_SELECTION_TIMEOUT_MS", value)
            self.assertIn("MONGODB_SERVER_SELECTION_TIMEOUT_MS", str(ctx.exception))

    def test_non_positive_timeout_is_a_config_error(self):
        with self.assertRaises(ConfigError):
            parse_positive_int("MONGODB_SERVER_SELECTION_TIMEOUT_MS", "0")

    def test_log_level_is_normalized(self):
        self.assertEqual(parse_log_level(" debug "), "DEBUG")

    def test_unknown_log_level_is_a_config_error(self):
        with self.assertRaises(ConfigError):
            parse_log_level("verbose")

    def test_blank_uri_is_a_config_error(self):
        with self.assertRaises(ConfigError):
            require_mongodb_uri("   ")


if __name__ == '__main__':
    unittest.main()
