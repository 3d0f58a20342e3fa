import os
import sys
import unittest
from unittest.mock import MagicMock, patch

from PySide6.QtGui import QColor

# Ensure src is in path
sys.path.append(os.path.join(os.path.dirname(__file__), "../src"))

import preferences
from options import InvalidConfigurationError, SnowflakeOptions
from preferences import get_global_preferences
from renderer import render_to_qimage
from shape import Path, Point


class TestPreferences(unittest.TestCase):
    def setUp(self):
        # Mock QSettings to avoid messing with real config.
        # Values are stored as strings, like an INI backend does.
        self.store = {}
        self.mock_settings = MagicMock()
        self.mock_settings.setValue.side_effect = lambda key, value: self.store.__setitem__(
            key, str(value)
        )
        self.mock_settings.value.side_effect = lambda key, defaultValue=None: self.store.get(
            key, defaultValue
        )
        with patch("preferences.QSettings", return_value=self.mock_settings):
            # Reset singleton
            preferences._global_preferences = None
            self.prefs = get_global_preferences()

    def tearDown(self):
        preferences._global_preferences = None

    def test_singleton(self):
        self.assertIs(get_global_preferences(), self.prefs)

    def test_default_snowflake_options(self):
        self.assertEqual(self.prefs.get_snowflake_options(), SnowflakeOptions())

    def test_set_snowflake_options(self):
        received = []
        self.prefs.snowflake_options_changed.connect(received.append)

        options = SnowflakeOptions(num_arms=8, arm_length=60.0, spacer=1.0)
        self.prefs.set_snowflake_options(options)
        self.mock_settings.setValue.assert_any_call("snowflake/num_arms", 8)
        self.mock_settings.setValue.assert_any_call("snowflake/arm_length", 60.0)

        restored = self.prefs.get_snowflake_options()
        self.assertEqual(restored, options)
        self.assertIsInstance(restored.num_arms, int)
        self.assertIsInstance(restored.arm_length, float)
        self.assertEqual(len(received), 1)

        # Same options, no new signal
        self.prefs.set_snowflake_options(SnowflakeOptions(num_arms=8, arm_length=60.0, spacer=1.0))
        self.assertEqual(len(received), 1)

    def test_set_invalid_snowflake_options(self):
        with self.assertRaises(InvalidConfigurationError):
            self.prefs.set_snowflake_options(SnowflakeOptions(num_arms=0))
        self.mock_settings.setValue.assert_not_called()

    def test_invalid_stored_options(self):
        self.store["snowflake/num_arms"] = "lots"
        with self.assertLogs("preferences", level="WARNING"):
            options = self.prefs.get_snowflake_options()
        self.assertEqual(options.num_arms, 6)

        self.store["snowflake/num_arms"] = "0"
        with self.assertLogs("preferences", level="WARNING"):
            options = self.prefs.get_snowflake_options()
        self.assertEqual(options, SnowflakeOptions())

    def test_colors(self):
        self.assertEqual(self.prefs.get_stroke_color_name(), "#000000")
        self.assertEqual(self.prefs.get_background_color_name(), "#ffffff")

        stroke_colors = []
        self.prefs.stroke_color_changed.connect(stroke_colors.append)
        self.prefs.set_stroke_color_name("#ff0000")
        self.prefs.set_stroke_color_name("#ff0000")
        self.assertEqual(self.prefs.get_stroke_color_name(), "#ff0000")
        self.assertEqual(stroke_colors, ["#ff0000"])

        background_colors = []
        self.prefs.background_color_changed.connect(background_colors.append)
        self.prefs.set_background_color_name("#202020")
        self.assertEqual(self.prefs.get_background_color_name(), "#202020")
        self.assertEqual(background_colors, ["#202020"])

    def test_default_colors_are_opaque(self):
        stroke = QColor(self.prefs.get_stroke_color_name())
        background = QColor(self.prefs.get_background_color_name())
        self.assertEqual(stroke.alpha(), 255)
        self.assertEqual(background.alpha(), 255)
        self.assertEqual(stroke, QColor("black"))
        self.assertEqual(background, QColor("white"))

    def test_render_with_default_colors(self):
        square = Path([Point(-20, -20), Point(20, -20), Point(20, 20), Point(-20, 20)])
        image = render_to_qimage(
            square,
            (64, 64),
            stroke_color=self.prefs.get_stroke_color_name(),
            background_color=self.prefs.get_background_color_name(),
            stroke_width=2.0,
        )
        white = QColor("#ffffff")
        self.assertEqual(image.pixelColor(32, 32), white)
        # The stroke is visible on the top edge
        self.assertNotEqual(image.pixelColor(32, 12), white)


if __name__ == "__main__":
    unittest.main()
