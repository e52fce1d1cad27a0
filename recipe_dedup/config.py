"""Config file support for recipe-dedup.

Loads default CLI arguments from:
  1. ~/.recipe-dedup.yaml  (user-level)
  2. ./recipe-dedup.yaml   (project-level, overrides user-level)

Example config file:

    # ~/.recipe-dedup.yaml
    format: markdown
    title_threshold: 0.85
    ingredient-threshold: 0.75
    quiet: true
"""
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from recipe_dedup.models import DEFAULT_THRESHOLDS, SimilarityThresholds

logger = logging.getLogger(__name__)

ENV_PREFIX = "RECIPE_DEDUP_"

_BOOL_FIELDS = {"verbose", "quiet", "stats"}
_FLOAT_FIELDS = {"title_threshold", "ingredient_threshold", "instruction_threshold"}
_STR_FIELDS = {"format"}


def load_config() -> Dict[str, Any]:
    """Load config from YAML files, merging user + project level."""
    config: Dict[str, Any] = {}

    paths = [
        Path.home() / ".recipe-dedup.yaml",
        Path.home() / ".recipe-dedup.yml",
        Path("recipe-dedup.yaml"),
        Path("recipe-dedup.yml"),
    ]

    for p in paths:
        if p.is_file():
            try:
                with open(p, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f) or {}
                if isinstance(data, dict):
                    # Normalize keys: dashes → underscores
                    normalized = {str(k).replace("-", "_"): v for k, v in data.items()}
                    config.update(normalized)
                    logger.debug(f"[Config] Loaded {p}")
            except (OSError, yaml.YAMLError) as e:
                logger.warning(f"[Config] Failed to load {p}: {e}")

    return config


def load_env_config() -> Dict[str, Any]:
    """Load config from RECIPE_DEDUP_* environment variables.

    Maps RECIPE_DEDUP_TITLE_THRESHOLD=0.9 → title_threshold=0.9, etc.
    Boolean vars: RECIPE_DEDUP_QUIET=1, RECIPE_DEDUP_STATS=true, etc.
    """
    config: Dict[str, Any] = {}
    for key, value in os.environ.items():
        if not key.startswith(ENV_PREFIX):
            continue
        field = key[len(ENV_PREFIX):].lower()
        if field in _BOOL_FIELDS:
            config[field] = value.lower() in ("1", "true", "yes", "on")
        elif field in _FLOAT_FIELDS:
            try:
                config[field] = float(value)
            except ValueError:
                logger.warning(f"[Config] Ignoring {key}={value!r}: not a number")
        elif field in _STR_FIELDS:
            config[field] = value
    return config


def load_merged_config() -> Dict[str, Any]:
    """File config with env vars layered on top."""
    config = load_config()
    config.update(load_env_config())
    return config


def load_thresholds(config: Optional[Dict[str, Any]] = None) -> SimilarityThresholds:
    """Build SimilarityThresholds from config (files + env when not given)."""
    if config is None:
        config = load_merged_config()
    return DEFAULT_THRESHOLDS.replace(
        title_similarity=_opt_float(config, "title_threshold"),
        ingredient_similarity=_opt_float(config, "ingredient_threshold"),
        instruction_similarity=_opt_float(config, "instruction_threshold"),
    )


def _opt_float(config, key):
    value = config.get(key)
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.warning(f"[Config] Ignoring {key}={value!r}: not a number")
        return None


def _choices(parser, key):
    for action in parser._actions:
        if action.dest == key:
            return action.choices
    return None


def apply_config_defaults(parser, args):
    """Apply config file defaults to unset CLI args (CLI always wins).

    Priority: CLI flags > env vars (RECIPE_DEDUP_*) > config files > parser defaults.
    Values that don't parse, or aren't one of the option's choices, are skipped
    with a warning.
    """
    config = load_merged_config()
    if not config:
        return args

    for key, value in config.items():
        # Only apply if the CLI arg wasn't explicitly provided
        if not hasattr(args, key):
            continue
        current = getattr(args, key)
        default = parser.get_default(key)
        if current != default:
            continue  # User explicitly set it, don't override

        if key in _BOOL_FIELDS:
            setattr(args, key, bool(value))
        elif key in _FLOAT_FIELDS:
            try:
                setattr(args, key, float(value))
            except (TypeError, ValueError):
                logger.warning(f"[Config] Ignoring {key}={value!r}: not a number")
        elif key in _STR_FIELDS:
            choices = _choices(parser, key)
            if choices and str(value) not in choices:
                logger.warning(f"[Config] Ignoring {key}={value!r}: expected one of {', '.join(choices)}")
                continue
            setattr(args, key, str(value))

    return args


_STARTER_CONFIG = """\
# recipe-dedup configuration — customize your defaults here.
# CLI flags always override these values.

# Output format: console, json, markdown
# format: console

# Title similarity at or above which two recipes are duplicates (0.0-1.0)
# title_threshold: 0.8

# Share of ingredients that must match (0.0-1.0)
# ingredient_threshold: 0.7

# Instruction text similarity; applies together with ingredient_threshold (0.0-1.0)
# instruction_threshold: 0.6

# Suppress status messages
# quiet: false

# Print statistics instead of the recipe list
# stats: false
"""


def generate_starter_config() -> Path:
    """Write a starter config file to ~/.recipe-dedup.yaml (won't overwrite existing)."""
    path = Path.home() / ".recipe-dedup.yaml"
    if path.exists():
        path = Path.home() / ".recipe-dedup.yaml.new"
    path.write_text(_STARTER_CONFIG, encoding="utf-8")
    return path
