"""
Config-based Query Pipeline.
"""

from catena.pipeline.runner import run_pipeline, QueryRunner, QueryOutcome
from catena.pipeline.config_parser import load_config, RunConfig, QueryEntry

__all__ = [
    "run_pipeline",
    "QueryRunner",
    "QueryOutcome",
    "load_config",
    "RunConfig",
    "QueryEntry",
]
