"""
Settings resolution for texfig.

Settings are resolved once per run, lowest precedence first:
dataclass defaults, an optional texfig.yaml in the working directory,
then TEXFIG_* environment variables (a .env file is honoured).
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from texfig.exceptions import ConfigurationError

CONFIG_FILE = "texfig.yaml"

# Settings field -> environment variable
ENV_OVERRIDES = {
    "latex": "TEXFIG_LATEX",
    "gnuplot": "TEXFIG_GNUPLOT",
    "pdfcrop": "TEXFIG_PDFCROP",
    "tmp_prefix": "TEXFIG_TMP_PREFIX",
    "font_size": "TEXFIG_FONT_SIZE",
}


@dataclass(frozen=True)
class Settings:
    """
    Commands and values used by every texfig run.

    Attributes:
        latex: Typesetter command template (may hold several words)
        gnuplot: Plotting engine command template
        pdfcrop: Cropping tool command template
        tmp_prefix: Name prefix of every temporary file texfig creates
        font_size: Font size class option passed to the standalone document class
    """

    latex: str = "pdflatex -interaction=nonstopmode -halt-on-error"
    gnuplot: str = "gnuplot"
    pdfcrop: str = "pdfcrop"
    tmp_prefix: str = "texfig-tmp-"
    font_size: str = "10pt"


def validate_settings(settings: Settings) -> Settings:
    """
    Reject settings that would make texfig unsafe or unusable.

    An empty prefix would let `clean` delete every file in the directory.

    Raises:
        ConfigurationError: If a setting is invalid
    """
    if not settings.tmp_prefix:
        raise ConfigurationError("Temporary file prefix must not be empty")
    if "/" in settings.tmp_prefix or os.sep in settings.tmp_prefix:
        raise ConfigurationError(
            f"Temporary file prefix must be a plain file name prefix, got '{settings.tmp_prefix}'"
        )

    for field_name in ("latex", "gnuplot", "pdfcrop", "font_size"):
        if not getattr(settings, field_name).strip():
            raise ConfigurationError(f"Setting '{field_name}' must not be empty")

    return settings


def load_settings(directory: Optional[Path] = None) -> Settings:
    """
    Resolve settings for a run in `directory` (default: current working directory).

    Returns:
        Validated, immutable Settings

    Raises:
        ConfigurationError: If texfig.yaml is malformed or a value is invalid
    """
    directory = Path.cwd() if directory is None else Path(directory)
    load_dotenv(directory / ".env")

    config = OmegaConf.structured(Settings)
    # Structured configs built from frozen dataclasses come back read-only
    OmegaConf.set_readonly(config, False)

    config_file = directory / CONFIG_FILE
    if config_file.exists():
        try:
            config = OmegaConf.merge(config, OmegaConf.load(config_file))
        except (OmegaConfBaseException, yaml.YAMLError) as e:
            raise ConfigurationError(f"Invalid {config_file}: {e}") from e

    overrides = {
        field_name: os.environ[env_name]
        for field_name, env_name in ENV_OVERRIDES.items()
        if env_name in os.environ
    }
    if overrides:
        config = OmegaConf.merge(config, overrides)

    return validate_settings(OmegaConf.to_object(config))
