import configparser
import toml
import os
from .cli_logger import logger

CONFIG_FILE = ".deployment.toml"
LEGACY_CONFIG_FILE = ".deployment"

DEFAULT_MSBUILD = "msbuild"

def _load_legacy_config(config_path):
    parser = configparser.ConfigParser()
    try:
        parser.read(config_path, encoding="utf-8")
    except configparser.Error as e:
        logger.error(f"Error parsing {config_path}: {e}")
        return {}
    return {section: dict(parser.items(section)) for section in parser.sections()}

def load_config(path="."):
    config_path = os.path.join(path, CONFIG_FILE)
    if os.path.exists(config_path):
        logger.info(f"Loading configuration from {config_path}")
        try:
            with open(config_path, "r") as f:
                return toml.load(f)
        except toml.TomlDecodeError as e:
            logger.error(f"Error decoding TOML file at {config_path}: {e}")
            logger.info("Please check the file's format for syntax errors.")
        except IOError as e:
            logger.error(f"Error reading configuration file at {config_path}: {e}")
            logger.info("Please check file permissions.")
        return {}

    legacy_path = os.path.join(path, LEGACY_CONFIG_FILE)
    if os.path.isfile(legacy_path):
        logger.info(f"Loading configuration from {legacy_path}")
        return _load_legacy_config(legacy_path)
    return {}

def save_config(config, path="."):
    config_path = os.path.join(path, CONFIG_FILE)
    logger.info(f"Saving configuration to {config_path}")
    try:
        with open(config_path, "w") as f:
            toml.dump(config, f)
        return True
    except IOError as e:
        logger.error(f"Error saving configuration to {config_path}: {e}")
        logger.info("Please check file permissions and ensure the directory is writable.")
        return False

def get_value(config, key, default=None):
    """Look up a dotted key such as 'config.project'."""
    value = config
    for k in key.split('.'):
        if not isinstance(value, dict) or k not in value:
            return default
        value = value[k]
    return value

def get_project_override(config):
    project = get_value(config, "config.project")
    if isinstance(project, str) and project.strip():
        return project.strip()
    return None

def get_msbuild(config):
    return get_value(config, "build.msbuild") or DEFAULT_MSBUILD

def get_build_properties(config, overrides=None):
    """
    Collect the build properties handed to compiled builds.

    Values come from the [build.properties] table and are overridden by the
    given key/value pairs. They are passed to the build tool as they are.
    """
    properties = {}
    table = get_value(config, "build.properties", {})
    if isinstance(table, dict):
        properties.update({str(k): str(v) for k, v in table.items()})
    if overrides:
        properties.update({str(k): str(v) for k, v in overrides.items()})
    return properties
