import unittest

from logrotating.core.models import (
    EmitResult, Flag, Level, LogPanic, Signal, parse_flags, parse_level, passes, raise_for_signal,
)


class TestLevels(unittest.TestCase):
    def test_passes_iff_not_less_severe_than_threshold(self):
        for threshold in Level:
            for level in Level:
                self.assertEqual(passes(level, threshold), level <= threshold, (level, threshold))

    def test_ordering(self):
        self.assertEqual([l.name for l in sorted(Level)],
                         ["PANIC", "FATAL", "ERROR", "WARNING", "INFO", "DEBUG"])

    def test_parse_level(self):
        self.assertIs(parse_level("debug"), Level.DEBUG)
        self.assertIs(parse_level(" Warning "), Level.WARNING)
        self.assertIs(parse_level("warn"), Level.WARNING)
        self.assertIs(parse_level(2), Level.ERROR)
        self.assertIs(parse_level(Level.INFO), Level.INFO)

    def test_parse_level_rejects_unknown(self):
        with self.assertRaises(ValueError):
            parse_level("verbose")
        with self.assertRaises(ValueError):
            parse_level(6)
        with self.assertRaises(ValueError):
            parse_level(-1)


class TestFlags(unittest.TestCase):
    def test_std_combination(self):
        self.assertEqual(Flag.STD, Flag.DATE | Flag.TIME | Flag.SHORTFILE)

    def test_parse_flags(self):
        self.assertEqual(parse_flags(["date", "MIRROR_STDOUT"]), Flag.DATE | Flag.MIRROR_STDOUT)
        self.assertEqual(parse_flags([]), Flag(0))
        with self.assertRaises(ValueError):
            parse_flags(["color"])


class TestSignals(unittest.TestCase):
    def test_plain_result_passes_through(self):
        r = EmitResult("INFO x\n")
        self.assertIs(raise_for_signal(r), r)
        self.assertIsNone(raise_for_signal(None))

    def test_panic_signal_raises_with_line(self):
        with self.assertRaises(LogPanic) as cm:
            raise_for_signal(EmitResult("PANIC boom\n", signal=Signal.PANIC))
        self.assertEqual(cm.exception.text, "PANIC boom\n")
        self.assertEqual(str(cm.exception), "PANIC boom")


if __name__ == "__main__":
    unittest.main()
