# Paraflake
# Copyright 2025 - Ricardo Quesada

import logging
import math
import random
from typing import Self

from options import SnowflakeOptions
from preferences import Preferences, get_global_preferences
from shape import Path, Point

logger = logging.getLogger(__name__)

# Half angle of every spike
SPIKE_ANGLE = math.radians(30)


class Snowflake:
    """
    Generates the outline of a spiky snowflake.

    One arm is built along the positive X axis: a jagged top edge, a pointy
    tip and the mirrored top edge as the bottom edge. The arm is then rotated
    around the origin once per arm, and every rotated copy is appended to a
    single Path.

    The random source used for the spike lengths is passed on every call.
    Anything with a random() method returning a float in [0, 1) works,
    like random.Random or the random module itself.
    """

    def __init__(self, options: SnowflakeOptions | dict | None = None):
        """
        Args:
            options: The snowflake options. A dict is merged over the default
                options. Raises InvalidConfigurationError if invalid.
        """
        if options is None:
            options = SnowflakeOptions()
        elif isinstance(options, dict):
            options = SnowflakeOptions.from_dict(options)
        options.validate()
        self._options = options
        self._gap_size = options.gap_size

    @classmethod
    def from_preferences(cls, preferences: Preferences | None = None) -> Self:
        """Creates a Snowflake using the options stored in the preferences."""
        if preferences is None:
            preferences = get_global_preferences()
        return cls(preferences.get_snowflake_options())

    @property
    def options(self) -> SnowflakeOptions:
        return self._options

    @property
    def gap_size(self) -> float:
        return self._gap_size

    @property
    def points_per_arm(self) -> int:
        # top edge, tip, bottom edge
        return 2 * (2 + 3 * self._options.num_spikes) + 1

    def build_arm(self, rng=None) -> Path:
        """Returns the closed outline of a single arm, pointing to +X."""
        if rng is None:
            rng = random
        opts = self._options
        half_thickness = opts.arm_thickness / 2

        spiky_arm = Path()
        spiky_arm.append_point(Point(opts.arm_thickness, half_thickness))

        for n in range(opts.num_spikes):
            spike_length = rng.random() * (opts.arm_length / 2)
            x1 = opts.spacer + self._gap_size * (n * 2)
            y1 = half_thickness
            x2 = opts.spacer + x1 + spike_length * math.cos(SPIKE_ANGLE)
            y2 = spike_length * math.sin(SPIKE_ANGLE)
            x3 = opts.spacer + x1 + self._gap_size
            y3 = half_thickness
            spiky_arm.append_point(Point(x1, y1))
            spiky_arm.append_point(Point(x2, y2))
            spiky_arm.append_point(Point(x3, y3))

        spiky_arm.append_point(Point(opts.arm_length, half_thickness))

        # The bottom edge is the top edge upside down, walked back to the center
        other_half = spiky_arm.clone()
        other_half.mirror_across_x_axis()
        other_half.reverse()

        tip = Point(opts.arm_length + opts.arm_length / 10, 0.0)
        spiky_arm.append_point(tip)
        spiky_arm.extend(other_half)
        return spiky_arm

    def build(self, rng=None) -> Path:
        """Returns the complete snowflake outline as a single Path."""
        arm = self.build_arm(rng)
        angle = math.radians(-(360 / self._options.num_arms))

        # The same arm is rotated again on every iteration, so the offsets
        # accumulate: arm i ends up rotated by (i + 1) * angle.
        star = Path()
        for _ in range(self._options.num_arms):
            arm.rotate(angle)
            star.extend(arm)

        logger.debug(
            f"Snowflake built: {self._options.num_arms} arms, {len(star)} points"
        )
        return star

    def draw(self, renderer, rng=None) -> Path:
        """
        Builds a new snowflake and draws it.

        Args:
            renderer: The renderer.Renderer that receives the path.
            rng: Optional random source for the spike lengths.

        Returns:
            The Path that was drawn.
        """
        star = self.build(rng)
        star.draw(renderer)
        return star


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    snowflake = Snowflake.from_preferences()
    print(snowflake.build(), end="")
