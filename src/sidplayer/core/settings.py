"""Typed settings record with compiled-in defaults."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

# Index order matters: a color's value is its position in this table
COLOR_NAMES: tuple[str, ...] = (
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
    "bright black",
    "bright red",
    "bright green",
    "bright yellow",
    "bright blue",
    "bright magenta",
    "bright cyan",
    "bright white",
)


class Color(IntEnum):
    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7
    BRIGHT_BLACK = 8
    BRIGHT_RED = 9
    BRIGHT_GREEN = 10
    BRIGHT_YELLOW = 11
    BRIGHT_BLUE = 12
    BRIGHT_MAGENTA = 13
    BRIGHT_CYAN = 14
    BRIGHT_WHITE = 15

    @property
    def label(self) -> str:
        return COLOR_NAMES[self.value]


class C64Model(Enum):
    PAL = "PAL"
    NTSC = "NTSC"
    OLD_NTSC = "OLD_NTSC"
    DREAN = "DREAN"


class CiaModel(Enum):
    MOS6526 = "MOS6526"
    MOS8521 = "MOS8521"


class SidModel(Enum):
    MOS6581 = "MOS6581"
    MOS8580 = "MOS8580"


class CombinedWaveforms(Enum):
    AVERAGE = "AVERAGE"
    WEAK = "WEAK"
    STRONG = "STRONG"


class SamplingMethod(Enum):
    INTERPOLATE = "INTERPOLATE"
    RESAMPLE_INTERPOLATE = "RESAMPLE_INTERPOLATE"


DEFAULT_SAMPLING_FREQ = 48000


@dataclass
class GeneralSettings:
    version: int = 1
    database: str = ""
    play_length: int = 0                          # ms, 0 = infinite
    record_length: int = (3 * 60 + 30) * 1000      # ms
    kernal_rom: str = ""
    basic_rom: str = ""
    chargen_rom: str = ""
    verbose_level: int = 0


@dataclass
class ConsoleSettings:
    ansi: bool = False
    top_left: str = "┌"
    top_right: str = "┐"
    bottom_left: str = "└"
    bottom_right: str = "┘"
    vertical: str = "│"
    horizontal: str = "─"
    junction_left: str = "┤"
    junction_right: str = "├"
    decorations: Color = Color.BRIGHT_WHITE
    title: Color = Color.WHITE
    label_core: Color = Color.BRIGHT_GREEN
    text_core: Color = Color.BRIGHT_YELLOW
    label_extra: Color = Color.BRIGHT_MAGENTA
    text_extra: Color = Color.BRIGHT_CYAN
    notes: Color = Color.BRIGHT_BLUE
    control_on: Color = Color.BRIGHT_GREEN
    control_off: Color = Color.BRIGHT_RED

    def use_ascii_borders(self) -> None:
        """Replace the box-drawing glyphs with plain ASCII."""
        self.top_left = self.top_right = "+"
        self.bottom_left = self.bottom_right = "+"
        self.junction_left = self.junction_right = "+"
        self.vertical = "|"
        self.horizontal = "-"


@dataclass
class AudioSettings:
    frequency: int = DEFAULT_SAMPLING_FREQ
    channels: int = 0
    precision: int = 16
    buffer_length: int = 250


@dataclass
class EmulationSettings:
    engine: str = ""
    model_default: C64Model = C64Model.PAL
    model_forced: bool = False
    digiboost: bool = False
    cia_model: CiaModel = CiaModel.MOS6526
    sid_model: SidModel = SidModel.MOS6581
    force_model: bool = False
    filter: bool = True
    bias: float = 0.5
    filter_curve_6581: float = 0.5
    filter_range_6581: float = 0.5
    filter_curve_8580: float = 0.5
    combined_waveforms: CombinedWaveforms = CombinedWaveforms.AVERAGE
    power_on_delay: int = -1                       # -1 = random
    sampling_method: SamplingMethod = SamplingMethod.RESAMPLE_INTERPOLATE
    fast_sampling: bool = False
