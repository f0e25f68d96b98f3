from io import StringIO

from django.core.management import CommandError, call_command
from django.test import SimpleTestCase

from packtags.tests.base import (
    CALENDAR_CSS,
    CALENDAR_JS,
    CALENDAR_RUNTIME_JS,
    MAP_CSS,
    MAP_JS,
    MAP_RUNTIME_JS,
    VENDOR_CSS,
    VENDOR_JS,
)


class PacksResolveCommandTests(SimpleTestCase):
    def run_command(self, *args):
        out = StringIO()
        call_command("packs_resolve", *args, stdout=out)
        return out.getvalue().splitlines()

    def test_first_seen_by_default(self):
        self.assertEqual(
            self.run_command("calendar", "map"),
            [VENDOR_JS, CALENDAR_RUNTIME_JS, CALENDAR_JS, MAP_RUNTIME_JS, MAP_JS],
        )

    def test_topological(self):
        self.assertEqual(
            self.run_command("calendar", "map", "--topological"),
            [VENDOR_JS, CALENDAR_RUNTIME_JS, MAP_RUNTIME_JS, CALENDAR_JS, MAP_JS],
        )

    def test_stylesheets(self):
        self.assertEqual(
            self.run_command("map", "calendar", "--type", "stylesheet"),
            [MAP_CSS, VENDOR_CSS, CALENDAR_CSS],
        )

    def test_unknown_pack(self):
        with self.assertRaises(CommandError):
            self.run_command("nope")
        self.assertEqual(self.run_command("nope", "map", "--available"), [VENDOR_JS, MAP_RUNTIME_JS, MAP_JS])

    def test_verbose_header(self):
        lines = self.run_command("map", "--first-seen", "--verbosity", "2")
        self.assertTrue(lines[0].startswith("# "))
        self.assertIn("first-seen", lines[0])
        self.assertEqual(lines[1:], [VENDOR_JS, MAP_RUNTIME_JS, MAP_JS])
