"""
Configuration loading for the hand solver
"""
import json
from pathlib import Path

from ..core.config import (
    CM_IN_PIXELS, MAX_HAND_VELOCITY, CAMERA_FPS,
    HISTORY_SIZE, FACE_COVERAGE_THRESHOLD, SOLVER_CONFIG_FILE
)
from ..core.logger import get_logger

logger = get_logger(__name__)

DEFAULT_SOLVER_PARAMS = {
    'cm_in_pixels': CM_IN_PIXELS,
    'max_velocity': MAX_HAND_VELOCITY,
    'fps': CAMERA_FPS,
    'history_size': HISTORY_SIZE,
    'face_coverage_threshold': FACE_COVERAGE_THRESHOLD,
}


def default_config_path():
    return Path(__file__).parent.parent.parent / SOLVER_CONFIG_FILE


def load_solver_params(config_path=None):
    """
    Load solver scale parameters from a JSON config or use defaults

    Unknown keys in the file are ignored; missing keys keep their defaults.

    Args:
        config_path: Path to the JSON file (default: hand_solver_config.json
            in the project root)

    Returns:
        Dict with cm_in_pixels, max_velocity, fps, history_size and
        face_coverage_threshold
    """
    params = dict(DEFAULT_SOLVER_PARAMS)
    config_path = Path(config_path) if config_path else default_config_path()

    if not config_path.exists():
        return params

    try:
        with open(config_path, 'r') as f:
            config = json.load(f)
        if not isinstance(config, dict):
            raise ValueError("top level must be an object")
        for key in DEFAULT_SOLVER_PARAMS:
            if key in config:
                params[key] = type(DEFAULT_SOLVER_PARAMS[key])(config[key])
    except (OSError, ValueError, TypeError) as e:
        logger.warning(f"Failed to load solver config {config_path}: {e}")
        return dict(DEFAULT_SOLVER_PARAMS)

    logger.debug(f"Loaded solver config from {config_path}")
    return params
