"""Shared configuration for summaries and their text rendering."""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd


@dataclass(frozen=True)
class SummaryConfig:
    """Defaults for the descriptive summary engine.

    Attributes:
        peek_rows: Rows returned by ``peek()`` when no count is given (R's ``head`` default).
        skewness_type: Skewness convention, see :class:`~descstats.analysis.moments.SkewnessAnalyzer`.
        top_n_pairs: Number of strongest feature pairs kept in a correlation result.
    """

    peek_rows: int = 6
    skewness_type: int = 3
    top_n_pairs: int = 20

    def __post_init__(self) -> None:
        if self.peek_rows < 0:
            raise ValueError(f"peek_rows must be >= 0, got {self.peek_rows}")
        if self.skewness_type not in (1, 2, 3):
            raise ValueError(f"skewness_type must be 1, 2 or 3, got {self.skewness_type}")
        if self.top_n_pairs < 0:
            raise ValueError(f"top_n_pairs must be >= 0, got {self.top_n_pairs}")


@dataclass(frozen=True)
class DisplayConfig:
    """Text rendering options for summary results.

    Four decimals keep values that differ at the 1e-4 level distinguishable.
    """

    precision: int = 4
    na_rep: str = "NA"

    def format_frame(self, frame: pd.DataFrame | pd.Series) -> str:
        """Render a frame or series with fixed float precision."""
        return frame.to_string(float_format=lambda v: f"{v:.{self.precision}f}", na_rep=self.na_rep)


DEFAULT_SUMMARY_CFG = SummaryConfig()
DEFAULT_DISPLAY_CFG = DisplayConfig()


__all__ = ["DEFAULT_DISPLAY_CFG", "DEFAULT_SUMMARY_CFG", "DisplayConfig", "SummaryConfig"]
