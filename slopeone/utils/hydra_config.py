"""
Hydra-backed loader for Slope One pipeline configs.
"""

import os
from typing import Any, Dict, List, Optional

from hydra import compose, initialize_config_dir
from hydra.errors import HydraException
from omegaconf import DictConfig, OmegaConf

from slopeone.utils.validation import ExperimentConfig

_PATH_FIELDS = (("data_config", "dataset_path"), ("data_config", "test_path"),
                ("output_path",), ("path_log_folder",), ("path_logger_config",))


def load_config(config_path: str, overrides: Optional[List[str]] = None, job_name: str = "slopeone") -> Dict[str, Any]:
    """
    Load and resolve a configuration file using Hydra, with optional override strings.

    :param config_path: Absolute or relative path to the YAML configuration.
    :param overrides: Optional list of Hydra-style override strings.
    :param job_name: Hydra job name to use for isolation (no side effects on caller's Hydra stack).
    :return: A plain dictionary representation of the resolved config.
    """
    cfg = compose_config(config_path, overrides=overrides or [], job_name=job_name)
    return OmegaConf.to_container(cfg, resolve=True)


def compose_config(config_path: str, overrides: List[str], job_name: str) -> DictConfig:
    config_dir = os.path.abspath(os.path.dirname(config_path) or ".")
    config_name = os.path.splitext(os.path.basename(config_path))[0]

    try:
        with initialize_config_dir(
            version_base="1.3",
            config_dir=config_dir,
            job_name=job_name,
        ):
            return compose(config_name=config_name, overrides=overrides, return_hydra_config=False)
    except HydraException as e:
        raise ValueError(f"Unable to load configuration '{config_path}' via Hydra") from e


def load_experiment_config(config_path: str, overrides: Optional[List[str]] = None) -> ExperimentConfig:
    """
    Load, validate and anchor a pipeline configuration.

    Relative paths in the file are resolved against the folder holding the configuration.

    :param config_path: Path to the YAML configuration.
    :param overrides: Optional list of Hydra-style override strings.
    :return: The validated configuration.
    """
    raw = load_config(config_path, overrides)
    base_dir = os.path.abspath(os.path.dirname(config_path) or ".")
    for field_path in _PATH_FIELDS:
        _anchor_path(raw, field_path, base_dir)
    return ExperimentConfig(**raw)


def _anchor_path(raw: Dict[str, Any], field_path, base_dir: str):
    node = raw
    for key in field_path[:-1]:
        node = node.get(key)
        if not isinstance(node, dict):
            return
    value = node.get(field_path[-1])
    if isinstance(value, str) and not os.path.isabs(value):
        node[field_path[-1]] = os.path.abspath(os.path.join(base_dir, value))
