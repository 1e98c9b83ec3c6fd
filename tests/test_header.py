import unittest
from datetime import datetime

from logrotating.core.header import format_header, short_name
from logrotating.core.models import Flag, Level

NOW = datetime(2024, 1, 15, 9, 30, 0, 123456)


class TestFormatHeader(unittest.TestCase):
    def test_std_flags(self):
        h = format_header(NOW, "/srv/app/server.py", 42, Level.ERROR, Flag.STD)
        self.assertEqual(h, "[2024-01-15 09:30:00.123] [server.py:42] ERROR ")

    def test_no_flags_is_level_only(self):
        self.assertEqual(format_header(NOW, "x.py", 1, Level.WARNING, 0), "WARNING ")

    def test_date_only(self):
        self.assertEqual(format_header(NOW, "", 0, Level.INFO, Flag.DATE), "[2024-01-15] INFO ")

    def test_time_only_keeps_leading_space(self):
        self.assertEqual(format_header(NOW, "", 0, Level.DEBUG, Flag.TIME), "[ 09:30:00.123] DEBUG ")

    def test_milliseconds_are_zero_padded(self):
        t = datetime(2024, 1, 2, 3, 4, 5, 7000)
        self.assertEqual(format_header(t, "", 0, Level.INFO, Flag.TIME), "[ 03:04:05.007] INFO ")

    def test_long_file_keeps_path(self):
        h = format_header(NOW, "/a/b/c.ext", 7, Level.INFO, Flag.LONGFILE)
        self.assertEqual(h, "[/a/b/c.ext:7] INFO ")

    def test_short_file_overrides_long(self):
        h = format_header(NOW, "/a/b/c.ext", 7, Level.INFO, Flag.LONGFILE | Flag.SHORTFILE)
        self.assertEqual(h, "[c.ext:7] INFO ")

    def test_short_name(self):
        self.assertEqual(short_name("/a/b/c.ext"), "c.ext")
        self.assertEqual(short_name("C:\\src\\mod.py"), "mod.py")
        self.assertEqual(short_name("plain.py"), "plain.py")

    def test_unknown_caller_placeholder(self):
        h = format_header(NOW, "???", 0, Level.PANIC, Flag.SHORTFILE)
        self.assertEqual(h, "[???:0] PANIC ")

    def test_every_level_tag(self):
        tags = [format_header(NOW, "", 0, l, 0) for l in Level]
        self.assertEqual(tags, ["PANIC ", "FATAL ", "ERROR ", "WARNING ", "INFO ", "DEBUG "])

    def test_pure(self):
        args = (NOW, "/x/y.py", 3, Level.ERROR, Flag.STD | Flag.MIRROR_STDOUT)
        self.assertEqual(format_header(*args), format_header(*args))


if __name__ == "__main__":
    unittest.main()
