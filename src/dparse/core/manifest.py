import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ConfigError
from .loader import SourceMode

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "dparse.toml"

OUTPUT_FORMATS = ("text", "json")


@dataclass
class ParseConfig:
    """How input files are read."""

    mode: SourceMode = SourceMode.FILE
    fail_fast: bool = True  # stop at the first failing file


@dataclass
class OutputConfig:
    """How results are printed."""

    format: str = "text"  # "text" | "json"


@dataclass
class DparseConfig:
    parse: ParseConfig = field(default_factory=ParseConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    path: Path | None = None


def load_config(path: Path) -> DparseConfig:
    """
    Load dparse.toml. A missing file yields the defaults.

    Raises:
        ConfigError: The file is not valid TOML or holds an unknown value
    """
    if not path.exists():
        logger.debug(f"No config at {path}, using defaults")
        return DparseConfig()

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    parse_data = data.get("parse", {})
    output_data = data.get("output", {})
    for section, value in (("parse", parse_data), ("output", output_data)):
        if not isinstance(value, dict):
            raise ConfigError(f"{path}: [{section}] must be a table, got {value!r}")

    mode = parse_data.get("mode", SourceMode.FILE.value)
    try:
        source_mode = SourceMode(mode)
    except ValueError:
        valid = ", ".join(m.value for m in SourceMode)
        raise ConfigError(f"{path}: parse.mode must be one of {valid}, got {mode!r}") from None

    fail_fast = parse_data.get("fail_fast", True)
    if not isinstance(fail_fast, bool):
        raise ConfigError(f"{path}: parse.fail_fast must be true or false, got {fail_fast!r}")

    fmt = output_data.get("format", "text")
    if fmt not in OUTPUT_FORMATS:
        raise ConfigError(
            f"{path}: output.format must be one of {', '.join(OUTPUT_FORMATS)}, got {fmt!r}"
        )

    logger.info(f"Loaded config from {path}")
    return DparseConfig(
        parse=ParseConfig(mode=source_mode, fail_fast=fail_fast),
        output=OutputConfig(format=fmt),
        path=path,
    )
