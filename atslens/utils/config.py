"""
Configuration loading for the packaged YAML tables.

Config files ship inside atslens/configs/. Each can be swapped for another
file through an environment variable (read from .env when present).
"""

import os
from pathlib import Path

from dotenv import load_dotenv
from omegaconf import DictConfig, OmegaConf

load_dotenv()

CONFIGS_PATH = Path(__file__).resolve().parent.parent / "configs"


def resolve_config_path(env_var: str, default_name: str) -> Path:
    """Return the path named by env_var, or the packaged default config."""
    override = os.getenv(env_var)
    if override:
        return Path(override)
    return CONFIGS_PATH / default_name


def load_config(env_var: str, default_name: str) -> DictConfig:
    """
    Load a YAML config with OmegaConf.

    Args:
        env_var: Environment variable that may point at an override file
        default_name: File name under atslens/configs/

    Returns:
        Read-only DictConfig

    Raises:
        FileNotFoundError: If the resolved path does not exist
    """
    path = resolve_config_path(env_var, default_name)
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path} (set {env_var} or restore the default)")

    config = OmegaConf.load(path)
    OmegaConf.set_readonly(config, True)
    return config
