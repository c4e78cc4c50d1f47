import io
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

from cardflip_core import cli


class TestCli(unittest.TestCase):
    def test_given_seed_when_showing_board_then_prints_masked_grid(self):
        buf = io.StringIO()
        with redirect_stdout(buf):
            cli.main(["--difficulty", "easy", "--seed", "3", "--log-level", "WARNING"])
        out = buf.getvalue()
        self.assertIn("Easy: 4×4 Grid • 8 Unique Pairs", out)
        self.assertEqual(out.count("?"), 16)

    def test_given_reveal_flag_then_prints_pair_ids(self):
        buf = io.StringIO()
        with redirect_stdout(buf):
            cli.main(["--seed", "3", "--reveal", "--log-level", "WARNING"])
        self.assertIn("Dealt pairs:", buf.getvalue())

    def test_given_play_session_when_flipping_then_waits_and_reports(self):
        inputs = ["0", "0", "1", "99", "nope", "medium", "q"]
        buf = io.StringIO()
        with patch("builtins.input", side_effect=inputs), \
                patch.object(cli.time, "sleep") as sleep, \
                redirect_stdout(buf):
            cli.main(["--play", "--seed", "4", "--log-level", "WARNING"])
        out = buf.getvalue()
        self.assertIn("cannot be flipped", out)
        self.assertIn("Moves: 1", out)
        self.assertIn("error:", out)
        self.assertIn("Could not parse", out)
        self.assertIn("Medium: 6×6 Grid", out)
        sleep.assert_called_once()

    def test_given_end_of_input_then_exits_quietly(self):
        with patch("builtins.input", side_effect=EOFError), redirect_stdout(io.StringIO()):
            cli.main(["--play", "--log-level", "WARNING"])


if __name__ == "__main__":
    unittest.main(verbosity=2)
