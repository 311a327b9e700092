"""Configuration Management with Pydantic.

This module implements configuration models using Pydantic for parsing and
validation of YAML configuration files with environment variable overrides.
"""

import os
import threading
from pathlib import Path
from typing import Literal

import structlog
import yaml
from pydantic import BaseModel, Field

logger = structlog.get_logger(__name__)

ENV_PREFIX = "ADJGRAPH"


class GraphSourceConfig(BaseModel):
    """Where the graph comes from.

    Attributes:
        path: Path to the edge-list file
        symmetric: Whether the graph is meant to be undirected, in which case
            validation reports edges without a reverse edge as errors
    """

    path: Path | None = Field(
        default=None,
        description="Path to the edge-list file",
    )
    symmetric: bool = Field(
        default=False,
        description="Require every edge to have its reverse edge",
    )


class AnalysisConfig(BaseModel):
    """Defaults for the analysis commands.

    Attributes:
        source: Default source vertex for traversals, distances and search
        target: Default target vertex for reachability search
        traversal: Default traversal strategy
        show_matrix: Whether ``show`` also prints the adjacency matrix
    """

    source: int = Field(
        default=0,
        ge=0,
        description="Default source vertex",
    )
    target: int | None = Field(
        default=None,
        ge=0,
        description="Default target vertex",
    )
    traversal: Literal["dfs-rec", "dfs", "bfs"] = Field(
        default="bfs",
        description="Default traversal strategy",
    )
    show_matrix: bool = Field(
        default=False,
        description="Print the adjacency matrix with the adjacency list",
    )


class AppConfig(BaseModel):
    """Top-level configuration combining all settings.

    Attributes:
        graph: Graph source configuration
        analysis: Analysis defaults
        logging_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Render logs as JSON instead of console text
    """

    graph: GraphSourceConfig = Field(default_factory=GraphSourceConfig)
    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)
    logging_level: str = Field(
        default="INFO",
        description="Logging level",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    json_logs: bool = Field(
        default=False,
        description="Render logs as JSON",
    )

    @classmethod
    def from_yaml(cls, path: str | Path) -> "AppConfig":
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file

        Returns:
            Parsed and validated AppConfig instance

        Raises:
            FileNotFoundError: If configuration file doesn't exist
            ValueError: If configuration is empty, not valid YAML, or fails validation
        """
        config_path = Path(path)

        if not config_path.exists():
            msg = f"Configuration file not found: {config_path}"
            raise FileNotFoundError(msg)

        logger.info("loading_configuration", path=str(config_path))

        try:
            with config_path.open() as f:
                config_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.exception("yaml_parse_error", error=str(e), path=str(config_path))
            msg = f"Invalid YAML in configuration file: {e}"
            raise ValueError(msg) from e

        if not config_data:
            msg = "Configuration file is empty"
            raise ValueError(msg)

        if not isinstance(config_data, dict):
            msg = "Configuration file must contain a mapping"
            raise ValueError(msg)

        config_data = cls._apply_env_overrides(config_data)

        # pydantic.ValidationError is a ValueError subclass
        config = cls(**config_data)

        logger.info(
            "configuration_loaded",
            graph_path=str(config.graph.path) if config.graph.path else None,
            logging_level=config.logging_level,
        )
        return config

    @classmethod
    def _apply_env_overrides(cls, config_data: dict) -> dict:
        """Apply environment variable overrides to configuration.

        Environment variables follow the pattern: ADJGRAPH_<SECTION>_<KEY>
        Example: ADJGRAPH_GRAPH_PATH, ADJGRAPH_ANALYSIS_SOURCE

        Args:
            config_data: Base configuration dictionary from file

        Returns:
            Configuration dictionary with environment overrides applied
        """
        env_overrides = {
            ("graph", "path"): f"{ENV_PREFIX}_GRAPH_PATH",
            ("graph", "symmetric"): f"{ENV_PREFIX}_GRAPH_SYMMETRIC",
            ("analysis", "source"): f"{ENV_PREFIX}_ANALYSIS_SOURCE",
            ("analysis", "target"): f"{ENV_PREFIX}_ANALYSIS_TARGET",
            ("analysis", "traversal"): f"{ENV_PREFIX}_ANALYSIS_TRAVERSAL",
            ("analysis", "show_matrix"): f"{ENV_PREFIX}_ANALYSIS_SHOW_MATRIX",
            ("logging_level",): f"{ENV_PREFIX}_LOGGING_LEVEL",
            ("json_logs",): f"{ENV_PREFIX}_JSON_LOGS",
        }

        for path, env_var in env_overrides.items():
            value = os.environ.get(env_var)
            if value is None:
                continue

            current = config_data
            for key in path[:-1]:
                if not isinstance(current.get(key), dict):
                    current[key] = {}
                current = current[key]

            if env_var.endswith(("_SOURCE", "_TARGET")):
                value = int(value)
            elif env_var.endswith(("_SYMMETRIC", "_SHOW_MATRIX", "_JSON_LOGS")):
                value = value.lower() in ("true", "1", "yes")

            current[path[-1]] = value
            logger.debug(
                "env_override_applied",
                env_var=env_var,
                config_path=".".join(path),
            )

        return config_data


class ConfigManager:
    """Configuration manager using singleton pattern."""

    _instance: AppConfig | None = None
    _init_lock: threading.Lock = threading.Lock()

    @classmethod
    def load_config(cls, config_path: str | Path | None = None) -> AppConfig:
        """Load configuration from file.

        Args:
            config_path: Path to configuration file. If None, looks for
                adjgraph.yaml or adjgraph.yml in the current directory and
                falls back to defaults when neither exists.

        Returns:
            Loaded AppConfig instance

        Raises:
            FileNotFoundError: If an explicit config file is not found
            ValueError: If the config file is invalid
        """
        if config_path is None:
            for default_name in ("adjgraph.yaml", "adjgraph.yml"):
                if Path(default_name).exists():
                    config_path = default_name
                    break
            else:
                logger.debug("no_configuration_file_using_defaults")
                return AppConfig(**_defaults_with_env_overrides())

        return AppConfig.from_yaml(config_path)

    @classmethod
    def get_config(
        cls,
        config_path: str | Path | None = None,
        reload: bool = False,
    ) -> AppConfig:
        """Get configuration instance (singleton pattern).

        Args:
            config_path: Path to configuration file. Only used on first call or when reload=True.
            reload: If True, force reload configuration from file.
        """
        if cls._instance is not None and not reload:
            return cls._instance

        with cls._init_lock:
            if cls._instance is None or reload:
                cls._instance = cls.load_config(config_path)

            return cls._instance

    @classmethod
    def reset_config(cls) -> None:
        """Reset the configuration instance."""
        cls._instance = None


def _defaults_with_env_overrides() -> dict:
    """Return an empty configuration dictionary with environment overrides applied."""
    return AppConfig._apply_env_overrides({})


def load_config(config_path: str | Path | None = None) -> AppConfig:
    """Load configuration from file."""
    return ConfigManager.load_config(config_path)


def get_config(config_path: str | Path | None = None, reload: bool = False) -> AppConfig:
    """Get configuration instance (singleton pattern)."""
    return ConfigManager.get_config(config_path, reload)


def reset_config() -> None:
    """Reset the configuration instance."""
    ConfigManager.reset_config()


__all__ = [
    "AnalysisConfig",
    "AppConfig",
    "GraphSourceConfig",
    "get_config",
    "load_config",
    "reset_config",
]
