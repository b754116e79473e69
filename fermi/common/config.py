"""Configuration management with OmegaConf."""

from omegaconf import OmegaConf, DictConfig
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

REQUIRED_SECTIONS = ("experiment_name", "galaxy", "survival", "logging")


def load_config(
    config_path: str,
    overrides: Optional[list] = None,
    required: Iterable[str] = REQUIRED_SECTIONS
) -> DictConfig:
    """Load calculator configuration from YAML with optional dotlist overrides."""
    config = OmegaConf.load(config_path)

    if overrides:
        override_config = OmegaConf.from_dotlist(overrides)
        config = OmegaConf.merge(config, override_config)

    missing = [key for key in required if key not in config]
    if missing:
        raise ValueError(f"Config {config_path} is missing sections: {', '.join(missing)}")

    return config


def require_keys(config: DictConfig, section: str, keys: Iterable[str]) -> None:
    """Raise ValueError naming any of ``keys`` that are unset under ``section``."""
    missing = [key for key in keys if OmegaConf.select(config, f"{section}.{key}") is None]
    if missing:
        raise ValueError(f"Config section '{section}' is missing keys: {', '.join(missing)}")


def save_config(config: DictConfig, output_path: str) -> None:
    """Save the resolved configuration next to the results."""
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    OmegaConf.save(config, output_path, resolve=True)


def section_to_dict(config: DictConfig, key: str) -> Dict[str, Any]:
    """Plain dict copy of one config section, empty if absent."""
    section = config.get(key)
    if section is None:
        return {}
    return OmegaConf.to_container(section, resolve=True)


def get_output_dir(config: DictConfig, create: bool = True) -> Path:
    """Get output directory from config, creating if needed."""
    output_dir = Path(config.logging.out_dir) / config.experiment_name
    if create:
        output_dir.mkdir(parents=True, exist_ok=True)
    return output_dir
