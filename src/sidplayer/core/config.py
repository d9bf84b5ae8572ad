"""core.config
Player settings loaded from sidplayfp.ini.

ConfigManager resets every setting to its compiled-in default, then reads
the four INI sections (SIDPlayfp, Console, Audio, Emulation) in that
order and overrides whatever the file supplies.

Behaviour:
- Creates the file (and the per-user config directories) on first run.
- Missing sections and keys are added with empty values, so after one run
  the file lists every supported option.
- A bad value is logged and the default kept; it never aborts the load.
- The file is written back only if something was added or removed.
- Defaults to the per-user config path (%APPDATA% on Windows,
  XDG_CONFIG_HOME or ~/.config elsewhere) unless an explicit path is given.
"""
from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from typing import Optional

from .ini import IniHandler
from .paths import (
    DIR_NAME,
    FILE_NAME,
    SONGLENGTH_FILE,
    ConfigPathError,
    PathResolutionError,
    PlatformPaths,
    create_dir,
    get_platform_paths,
)
from .readers import (
    read_bool,
    read_color,
    read_double,
    read_enum,
    read_int,
    read_string,
    read_time,
)
from .settings import (
    AudioSettings,
    C64Model,
    CiaModel,
    CombinedWaveforms,
    ConsoleSettings,
    EmulationSettings,
    GeneralSettings,
    SamplingMethod,
    SidModel,
)

logger = logging.getLogger(__name__)

_C64_MODELS = (
    ("PAL", C64Model.PAL),
    ("NTSC", C64Model.NTSC),
    ("OLD_NTSC", C64Model.OLD_NTSC),
    ("DREAN", C64Model.DREAN),
)
_CIA_MODELS = (
    ("MOS6526", CiaModel.MOS6526),
    ("MOS8521", CiaModel.MOS8521),
)
_SID_MODELS = (
    ("MOS6581", SidModel.MOS6581),
    ("MOS8580", SidModel.MOS8580),
)
_COMBINED_WAVEFORMS = (
    ("AVERAGE", CombinedWaveforms.AVERAGE),
    ("WEAK", CombinedWaveforms.WEAK),
    ("STRONG", CombinedWaveforms.STRONG),
)
_SAMPLING_METHODS = (
    ("INTERPOLATE", SamplingMethod.INTERPOLATE),
    ("RESAMPLE", SamplingMethod.RESAMPLE_INTERPOLATE),
)

# Renamed key: (old, new)
_FILTER_RANGE_KEYS = ("filterRange6581", "FilterRange6581")

_ALL_READ = stat.S_IRUSR | stat.S_IRGRP | stat.S_IROTH


class ConfigManager:
    """Typed player settings backed by an INI file."""

    def __init__(self, config_path: Optional[str] = None, paths: Optional[PlatformPaths] = None) -> None:
        self._explicit_path: Optional[Path] = Path(config_path) if config_path else None
        self.config_path: Optional[Path] = self._explicit_path
        self.paths = paths or get_platform_paths()

        self.general = GeneralSettings()
        self.console = ConsoleSettings()
        self.audio = AudioSettings()
        self.emulation = EmulationSettings()
        self.loaded = False
        self.load()

    def clear(self) -> None:
        """Reset every setting to its default."""
        self.general = GeneralSettings()
        self.console = ConsoleSettings()
        self.audio = AudioSettings()
        self.emulation = EmulationSettings()

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def load(self) -> bool:
        """Read the config file, creating it when needed.

        Returns False when the file could not be located, created or read;
        all settings then keep their defaults.
        """
        self.clear()
        self.loaded = False

        ini = IniHandler()
        try:
            if not self._open(ini):
                logger.error("Error reading config file!")
                return False
        except (PathResolutionError, ConfigPathError) as e:
            logger.error("%s", e)
            return False

        with ini:
            self._read_general(ini)
            self._read_console(ini)
            self._read_audio(ini)
            self._read_emulation(ini)
            self.config_path = ini.file_name
        self.loaded = True
        return True

    def _open(self, ini: IniHandler) -> bool:
        if self._explicit_path is not None:
            return ini.open(self._explicit_path)

        for candidate in self.paths.candidate_files(FILE_NAME):
            if ini.try_open(candidate):
                return True

        return ini.open(self._default_path())

    def _default_path(self) -> Path:
        """Return the per-user config file, creating its directories."""
        try:
            base = self.paths.config_path()
        except PathResolutionError:
            raise PathResolutionError("Cannot get config path!") from None
        logger.debug("Config path: %s", base)

        create_dir(base)
        app_dir = os.path.join(base, DIR_NAME)
        create_dir(app_dir)

        config_file = Path(app_dir, FILE_NAME)
        logger.debug("Config file: %s", config_file)
        return config_file

    def _default_database(self) -> str:
        """Return the song-length file in the data directory if it is world-readable."""
        try:
            base = self.paths.data_path()
        except PathResolutionError as e:
            logger.debug("No data path: %s", e)
            return ""

        candidate = os.path.join(base, DIR_NAME, SONGLENGTH_FILE)
        try:
            st = os.stat(candidate)
        except OSError:
            return ""
        if stat.S_ISREG(st.st_mode) and (st.st_mode & _ALL_READ) == _ALL_READ:
            return candidate
        return ""

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------
    def _read_general(self, ini: IniHandler) -> None:
        if not ini.set_section("SIDPlayfp"):
            ini.add_section("SIDPlayfp")
        s = self.general

        version = read_int(ini, "Version", s.version)
        if version > 0:
            s.version = version

        s.database = read_string(ini, "Songlength Database")
        if not s.database:
            s.database = self._default_database()

        play_length = read_time(ini, "Default Play Length")
        if play_length is not None:
            s.play_length = play_length
        record_length = read_time(ini, "Default Record Length")
        if record_length is not None:
            s.record_length = record_length

        s.kernal_rom = read_string(ini, "Kernal Rom")
        s.basic_rom = read_string(ini, "Basic Rom")
        s.chargen_rom = read_string(ini, "Chargen Rom")

        s.verbose_level = read_int(ini, "VerboseLevel", s.verbose_level)

    def _read_console(self, ini: IniHandler) -> None:
        if not ini.set_section("Console"):
            ini.add_section("Console")
        s = self.console

        if read_bool(ini, "ASCII", False):
            s.use_ascii_borders()

        s.ansi = read_bool(ini, "Ansi", s.ansi)

        s.decorations = read_color(ini, "Color Decorations", s.decorations)
        s.title = read_color(ini, "Color Title", s.title)
        s.label_core = read_color(ini, "Color Label Core", s.label_core)
        s.text_core = read_color(ini, "Color Text Core", s.text_core)
        s.label_extra = read_color(ini, "Color Label Extra", s.label_extra)
        s.text_extra = read_color(ini, "Color Text Extra", s.text_extra)
        s.notes = read_color(ini, "Color Notes", s.notes)
        s.control_on = read_color(ini, "Color Control On", s.control_on)
        s.control_off = read_color(ini, "Color Control Off", s.control_off)

    def _read_audio(self, ini: IniHandler) -> None:
        if not ini.set_section("Audio"):
            ini.add_section("Audio")
        s = self.audio

        s.frequency = read_int(ini, "Frequency", s.frequency)
        s.channels = read_int(ini, "Channels", s.channels)
        s.precision = read_int(ini, "BitsPerSample", s.precision)
        s.buffer_length = read_int(ini, "BufferLength", s.buffer_length)

    def _read_emulation(self, ini: IniHandler) -> None:
        if not ini.set_section("Emulation"):
            ini.add_section("Emulation")
        s = self.emulation

        s.engine = read_string(ini, "Engine")

        s.model_default = read_enum(ini, "C64Model", _C64_MODELS, s.model_default)
        s.model_forced = read_bool(ini, "ForceC64Model", s.model_forced)
        s.digiboost = read_bool(ini, "DigiBoost", s.digiboost)
        s.cia_model = read_enum(ini, "CiaModel", _CIA_MODELS, s.cia_model)
        s.sid_model = read_enum(ini, "SidModel", _SID_MODELS, s.sid_model)
        s.force_model = read_bool(ini, "ForceSidModel", s.force_model)

        s.filter = read_bool(ini, "UseFilter", s.filter)

        s.bias = read_double(ini, "FilterBias", s.bias)
        s.filter_curve_6581 = read_double(ini, "FilterCurve6581", s.filter_curve_6581)

        old_key, new_key = _FILTER_RANGE_KEYS
        legacy = ini.get_value(old_key)
        if legacy:
            ini.add_value(new_key, legacy)
            ini.remove_value(old_key)
        s.filter_range_6581 = read_double(ini, new_key, s.filter_range_6581)

        s.filter_curve_8580 = read_double(ini, "FilterCurve8580", s.filter_curve_8580)

        s.combined_waveforms = read_enum(ini, "CombinedWaveforms", _COMBINED_WAVEFORMS, s.combined_waveforms)

        s.power_on_delay = read_int(ini, "PowerOnDelay", s.power_on_delay)

        s.sampling_method = read_enum(ini, "Sampling", _SAMPLING_METHODS, s.sampling_method)
        s.fast_sampling = read_bool(ini, "ResidFastSampling", s.fast_sampling)
