"""Configuration loader for Linear Metrics."""

import logging
import os.path

import yaml

from ..loader import DEFAULT_COLUMNS
from .exceptions import ConfigError
from .type_utils import expand_key, force_bool, force_list, force_str
from .yaml_utils import ordered_load

logger = logging.getLogger(__name__)

DATA_FILENAME_KEYS = [
    "metrics_data",
    "summary_data",
    "contributors_data",
    "monthly_stats_data",
    "assignee_stats_data",
]


def default_options():
    """Create default options dictionary."""
    return {
        "settings": {
            "csv": None,
            "columns": {},
            "database": None,
            "save": False,
            "metrics_data": None,
            "summary_data": None,
            "contributors_data": None,
            "monthly_stats_data": None,
            "assignee_stats_data": None,
        },
    }


def _resolve_path(path, cwd):
    if cwd is None or os.path.isabs(path):
        return path
    return os.path.normpath(os.path.join(cwd, path.replace("/", os.path.sep)))


def _section(config, name):
    """The mapping under section `name`, or None if the section is absent."""
    if name not in config or config[name] is None:
        return None
    if not hasattr(config[name], "items"):
        raise ConfigError(f"`{name.title()}` section must contain key: value pairs")
    return config[name]


def _parse_input_config(config, options, cwd):
    """Parse the `Input` section."""
    input_config = _section(config, "input")
    if input_config is None:
        return

    if "csv" in input_config:
        options["settings"]["csv"] = _resolve_path(
            force_str("csv", input_config["csv"]), cwd
        )


def _parse_columns_config(config, options):
    """Parse the `Columns` section, mapping ticket fields to CSV headers."""
    columns_config = _section(config, "columns")
    if columns_config is None:
        return

    for name, header in columns_config.items():
        field = str(name).strip().lower()
        if field not in DEFAULT_COLUMNS:
            raise ConfigError(
                f"Unknown column `{name}` in `Columns`. "
                f"Known columns: {', '.join(DEFAULT_COLUMNS)}"
            )
        options["settings"]["columns"][field] = force_str(name, header)


def _parse_output_config(config, options):
    """Parse the `Output` section."""
    output_config = _section(config, "output")
    if output_config is None:
        return

    settings = options["settings"]

    if expand_key("output_directory") in output_config:
        options["output_directory"] = force_str(
            "output_directory", output_config[expand_key("output_directory")]
        )

    if "database" in output_config:
        settings["database"] = force_str("database", output_config["database"])
        settings["save"] = True

    if "save" in output_config:
        settings["save"] = force_bool("save", output_config["save"])

    for key in DATA_FILENAME_KEYS:
        if expand_key(key) in output_config:
            settings[key] = [
                os.path.basename(force_str(key, value))
                for value in force_list(output_config[expand_key(key)])
            ]


def config_to_options(data, cwd=None, _visited_files=None):
    """
    Parse YAML config data and return options dict.
    """
    if _visited_files is None:
        _visited_files = set()

    try:
        config = ordered_load(data, yaml.SafeLoader)
    except yaml.YAMLError as e:
        raise ConfigError("Unable to parse YAML configuration file.") from e

    if config is None:
        raise ConfigError("Configuration file is empty") from None

    if not hasattr(config, "items"):
        raise ConfigError("Configuration file must contain a mapping of sections") from None

    options = default_options()

    if "extends" in config:
        if cwd is None:
            raise ConfigError("`extends` is not supported here.")

        extends_filename = os.path.abspath(
            os.path.normpath(os.path.join(cwd, config["extends"].replace("/", os.path.sep)))
        )

        if not os.path.exists(extends_filename):
            raise ConfigError(
                f"File `{extends_filename}` referenced in `extends` not found."
            ) from None

        if extends_filename in _visited_files:
            raise ConfigError(
                f"Circular extends reference detected: {extends_filename}"
            ) from None

        _visited_files.add(extends_filename)

        logger.debug("Extending file %s", extends_filename)
        with open(extends_filename, encoding="utf-8") as extends_file:
            options = config_to_options(
                extends_file.read(),
                cwd=os.path.dirname(extends_filename),
                _visited_files=_visited_files,
            )

    _parse_input_config(config, options, cwd)
    _parse_columns_config(config, options)
    _parse_output_config(config, options)

    return options
