from .loader import ConfigError, config_from_mapping, load_config, load_default_config, parse_config

# Config exports are intentionally small.
__all__ = ["ConfigError", "config_from_mapping", "load_config", "load_default_config", "parse_config"]
