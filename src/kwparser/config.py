"""
Configuration management for kwparser.

Handles loading prefix settings and product lists from YAML files and
environment variables.
"""

import os
import yaml
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Any, Optional, Mapping

from .classify import Prefixes


ENV_POSITIVE_PREFIX = "KWP_POSITIVE_PREFIX"
ENV_NEGATIVE_PREFIX = "KWP_NEGATIVE_PREFIX"
ENV_RETAIN_PREFIX = "KWP_RETAIN_PREFIX"

TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """Resolved parser settings."""
    prefixes: Prefixes = field(default_factory=Prefixes)
    retain_prefix: bool = False
    products: List[str] = field(default_factory=list)


def load_config(path: str) -> Dict[str, Any]:
    """
    Load parser configuration from YAML file.

    Recognized keys (all optional):
    - prefixes: mapping with positive and/or negative strings
    - retain_prefix: bool
    - products: list of product names

    Args:
        path: Path to YAML config file

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML parsing fails
        ValueError: If the file is empty or keys have the wrong type
    """
    config_path = Path(path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not data:
        raise ValueError(f"Configuration file is empty: {path}")

    if not isinstance(data, dict):
        raise ValueError("Configuration must be a mapping")

    prefixes = data.get("prefixes", {})
    if not isinstance(prefixes, dict):
        raise ValueError("'prefixes' must be a mapping")

    for key in ("positive", "negative"):
        if key in prefixes and not isinstance(prefixes[key], str):
            raise ValueError(f"Prefix '{key}' must be a string")

    if "retain_prefix" in data and not isinstance(data["retain_prefix"], bool):
        raise ValueError("'retain_prefix' must be true or false")

    if "products" in data:
        _validate_products(data["products"], path)

    return data


def load_products(path: str) -> List[str]:
    """
    Load product names from file.

    YAML files (.yaml/.yml) may hold a bare list or a mapping with a
    `products` key. Any other file is read as plain text, one product
    per non-blank line.

    Args:
        path: Path to product list

    Returns:
        List of product names in file order

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If the YAML content is not a list of strings
    """
    products_path = Path(path)

    if not products_path.exists():
        raise FileNotFoundError(f"Product file not found: {path}")

    with open(products_path, "r", encoding="utf-8") as f:
        if products_path.suffix.lower() in (".yaml", ".yml"):
            data = yaml.safe_load(f)
        else:
            return [line.strip() for line in f if line.strip()]

    if isinstance(data, dict):
        data = data.get("products")

    return _validate_products(data, path)


def _validate_products(products: Any, path: str) -> List[str]:
    if not isinstance(products, list):
        raise ValueError(f"'products' must be a list: {path}")

    for idx, product in enumerate(products):
        if not isinstance(product, str):
            raise ValueError(f"Product at index {idx} is not a string: {path}")

    return products


def prefixes_from_env(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """
    Read prefix settings from environment variables.

    Args:
        environ: Environment mapping (default: os.environ)

    Returns:
        Dict with any of positive, negative, retain_prefix that were set
    """
    if environ is None:
        environ = os.environ

    settings = {}

    if ENV_POSITIVE_PREFIX in environ:
        settings["positive"] = environ[ENV_POSITIVE_PREFIX]

    if ENV_NEGATIVE_PREFIX in environ:
        settings["negative"] = environ[ENV_NEGATIVE_PREFIX]

    if ENV_RETAIN_PREFIX in environ:
        settings["retain_prefix"] = environ[ENV_RETAIN_PREFIX].strip().lower() in TRUTHY

    return settings


def resolve_settings(
    config: Optional[Dict[str, Any]] = None,
    env: Optional[Dict[str, Any]] = None,
    positive: Optional[str] = None,
    negative: Optional[str] = None,
    retain_prefix: Optional[bool] = None,
    products: Optional[List[str]] = None,
) -> Settings:
    """
    Merge settings from all sources.

    Precedence: explicit arguments > environment > config file > defaults.

    Args:
        config: Dictionary from load_config()
        env: Dictionary from prefixes_from_env()
        positive: Positive prefix override
        negative: Negative prefix override
        retain_prefix: Retain-prefix override
        products: Product list override

    Returns:
        Settings
    """
    config = config or {}
    env = env or {}
    defaults = Prefixes()
    config_prefixes = config.get("prefixes", {})

    def pick(explicit, key, file_settings, fallback):
        if explicit is not None:
            return explicit
        if key in env:
            return env[key]
        return file_settings.get(key, fallback)

    return Settings(
        prefixes=Prefixes(
            positive=pick(positive, "positive", config_prefixes, defaults.positive),
            negative=pick(negative, "negative", config_prefixes, defaults.negative),
        ),
        retain_prefix=pick(retain_prefix, "retain_prefix", config, False),
        products=list(products) if products is not None else list(config.get("products", [])),
    )
