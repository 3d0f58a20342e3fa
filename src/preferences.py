# Paraflake
# Copyright 2025 - Ricardo Quesada
import logging
from dataclasses import fields

from PySide6.QtCore import QObject, QSettings, Signal

from options import InvalidConfigurationError, SnowflakeOptions

logger = logging.getLogger(__name__)


class Preferences(QObject):
    snowflake_options_changed = Signal(object)
    stroke_color_changed = Signal(str)
    background_color_changed = Signal(str)

    def __init__(self):
        super().__init__()
        self._settings = QSettings()

    def get_snowflake_options(self) -> SnowflakeOptions:
        defaults = SnowflakeOptions()
        values = {}
        for f in fields(SnowflakeOptions):
            value = self._settings.value(
                f"snowflake/{f.name}", defaultValue=getattr(defaults, f.name)
            )
            # QSettings might return strings when using INI files
            try:
                values[f.name] = int(value) if f.type is int else float(value)
            except (TypeError, ValueError):
                logger.warning(f"Invalid stored value for {f.name}: {value!r}")
                values[f.name] = getattr(defaults, f.name)
        options = SnowflakeOptions(**values)
        try:
            options.validate()
        except InvalidConfigurationError as e:
            logger.warning(f"Invalid stored snowflake options, using defaults: {e}")
            return defaults
        return options

    def set_snowflake_options(self, options: SnowflakeOptions) -> None:
        options.validate()
        current = self.get_snowflake_options()
        if current != options:
            for key, value in options.to_dict().items():
                self._settings.setValue(f"snowflake/{key}", value)
            self.snowflake_options_changed.emit(options)

    def get_stroke_color_name(self) -> str:
        return str(self._settings.value("render/stroke_color", defaultValue="#000000"))

    def set_stroke_color_name(self, color: str):
        current = self.get_stroke_color_name()
        if current != color:
            self._settings.setValue("render/stroke_color", color)
            self.stroke_color_changed.emit(color)

    def get_background_color_name(self) -> str:
        return str(self._settings.value("render/background_color", defaultValue="#ffffff"))

    def set_background_color_name(self, color: str):
        current = self.get_background_color_name()
        if current != color:
            self._settings.setValue("render/background_color", color)
            self.background_color_changed.emit(color)


_global_preferences = None


# Singleton
def get_global_preferences() -> Preferences:
    # Using a function to return the global instance so that we can delay
    # the creation of QSettings() after QApplication.setOrganizationName() is called
    global _global_preferences
    if _global_preferences is None:
        _global_preferences = Preferences()
    return _global_preferences


if __name__ == "__main__":
    preferences = get_global_preferences()

    print(f"Snowflake options: {preferences.get_snowflake_options()}")
    print(f"Stroke color: {preferences.get_stroke_color_name()}")
    print(f"Background color: {preferences.get_background_color_name()}")
