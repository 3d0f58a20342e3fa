# Paraflake
# Copyright 2025 - Ricardo Quesada

import logging
import math
from dataclasses import asdict, dataclass, fields
from typing import Self

import toml

logger = logging.getLogger(__name__)


class InvalidConfigurationError(ValueError):
    """Raised when the snowflake options can't produce a valid shape."""


# Keys used by the original parametric generator
_EXTERNAL_KEYS = {
    "numArms": "num_arms",
    "armLength": "arm_length",
    "armThickness": "arm_thickness",
    "numSpikes": "num_spikes",
    "spacer": "spacer",
}


@dataclass
class SnowflakeOptions:
    # Number of arms of the snowflake
    num_arms: int = 6
    # Length of each arm, measured from the center
    arm_length: float = 100.0
    # Thickness of each arm
    arm_thickness: float = 3.0
    # Number of spikes on each arm
    num_spikes: int = 4
    # Extra offset along the arm added before every spike
    spacer: float = 0.5

    @classmethod
    def from_dict(cls, d: dict) -> Self:
        """Creates options from a dict, using defaults for the missing keys.

        Accepts both the field names (num_arms) and the external camelCase
        names (numArms). If both spellings of an option are present, the
        field name wins. Unknown keys are ignored.
        """
        field_names = {f.name for f in fields(cls)}
        values = {}
        for key, value in d.items():
            if key in field_names:
                continue
            if key in _EXTERNAL_KEYS:
                name = _EXTERNAL_KEYS[key]
                if name in d:
                    logger.debug(f"Both {key} and {name} given, using {name}")
                    continue
                values[name] = value
            else:
                logger.debug(f"Ignoring unknown snowflake option: {key}")
        for name in field_names:
            if name in d:
                values[name] = d[name]
        options = cls(**values)
        options.validate()
        return options

    def to_dict(self) -> dict:
        return asdict(self)

    def validate(self) -> None:
        """Raises InvalidConfigurationError if any option is out of range."""
        _check_int("num_arms", self.num_arms, minimum=1)
        _check_int("num_spikes", self.num_spikes, minimum=0)
        _check_number("arm_length", self.arm_length, allow_zero=False)
        _check_number("arm_thickness", self.arm_thickness, allow_zero=False)
        _check_number("spacer", self.spacer, allow_zero=True)

    @property
    def gap_size(self) -> float:
        """Spacing unit between two consecutive spikes.

        Zero spikes means there is nothing to space, so the gap is 0.
        """
        if self.num_spikes == 0:
            return 0.0
        return self.arm_length / self.num_spikes / 2

    @classmethod
    def load_from_filename(cls, filename: str) -> Self | None:
        logger.info(f"Loading snowflake options from filename {filename}")
        try:
            with open(filename, "r", encoding="utf-8") as f:
                d = toml.load(f)
        except FileNotFoundError as e:
            logger.error(f"Could not load file from {filename}, error: {e}")
            return None
        if not d:
            logger.error(f"Failed to load snowflake options from {filename}")
            return None
        # Options may live at the top level or under a [snowflake] table
        if "snowflake" in d and isinstance(d["snowflake"], dict):
            d = d["snowflake"]
        return cls.from_dict(d)

    def save_to_filename(self, filename: str) -> None:
        logger.info(f"Saving snowflake options to filename {filename}")
        d = {"snowflake": self.to_dict()}
        try:
            with open(filename, "w", encoding="utf-8") as f:
                toml.dump(d, f)
        except FileNotFoundError as e:
            logger.error(f"Could not save file to {filename}, error: {e}")
        except Exception:
            logger.exception("An unexpected error occurred:")


def _check_int(name: str, value, minimum: int) -> None:
    # bool is a subclass of int, but True arms make no sense
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfigurationError(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise InvalidConfigurationError(f"{name} must be >= {minimum}, got {value}")


def _check_number(name: str, value, allow_zero: bool) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidConfigurationError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidConfigurationError(f"{name} must be finite, got {value}")
    if value < 0 or (value == 0 and not allow_zero):
        bound = ">= 0" if allow_zero else "> 0"
        raise InvalidConfigurationError(f"{name} must be {bound}, got {value}")
