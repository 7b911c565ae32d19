from .config import DEFAULT_DISPLAY_CFG, DEFAULT_SUMMARY_CFG, DisplayConfig, SummaryConfig
from .logging_utils import setup_logger
from .paths import get_data_dir, get_dataset_path
from .plotting_config import DEFAULT_PLOT_CFG, PlottingConfig


__all__ = [
    "DEFAULT_DISPLAY_CFG",
    "DEFAULT_PLOT_CFG",
    "DEFAULT_SUMMARY_CFG",
    "DisplayConfig",
    "PlottingConfig",
    "SummaryConfig",
    "get_data_dir",
    "get_dataset_path",
    "setup_logger",
]
