"""Core mod generation components."""

from hoi4_radio.core.files import FileLayer
from hoi4_radio.core.generator import ModGenerator
from hoi4_radio.core.layout import ModPaths
from hoi4_radio.core.tracker import StepTracker

__all__ = ["FileLayer", "ModGenerator", "ModPaths", "StepTracker"]
