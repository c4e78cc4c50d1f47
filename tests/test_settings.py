import unittest

from game import Settings


class TestSettings(unittest.TestCase):
    def test_given_empty_env_then_defaults(self):
        s = Settings.from_env({})
        self.assertEqual(s, Settings())
        self.assertEqual(s.difficulty, "easy")
        self.assertIsNone(s.seed)
        self.assertFalse(s.debug)

    def test_given_env_values_then_parsed(self):
        s = Settings.from_env({
            "CARDFLIP_DIFFICULTY": " Hard ",
            "CARDFLIP_SEED": "12",
            "CARDFLIP_LOG_LEVEL": "debug",
            "PORT": "8080",
            "FLASK_DEBUG": "true",
        })
        self.assertEqual(s.difficulty, "hard")
        self.assertEqual(s.seed, 12)
        self.assertEqual(s.log_level, "DEBUG")
        self.assertEqual(s.port, 8080)
        self.assertTrue(s.debug)

    def test_given_unknown_difficulty_then_easy_with_warning(self):
        with self.assertLogs("cardflip.settings", level="WARNING"):
            s = Settings.from_env({"CARDFLIP_DIFFICULTY": "nightmare"})
        self.assertEqual(s.difficulty, "easy")
        self.assertEqual(Settings.from_env({"CARDFLIP_DIFFICULTY": "MEDIUM"}).difficulty, "medium")

    def test_given_bad_ints_then_defaults_with_warning(self):
        with self.assertLogs("cardflip.settings", level="WARNING"):
            s = Settings.from_env({"CARDFLIP_SEED": "abc", "PORT": "http"})
        self.assertIsNone(s.seed)
        self.assertEqual(s.port, 5000)


if __name__ == '__main__':
    unittest.main(verbosity=2)
