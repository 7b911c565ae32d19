"""Tests for configuration, paths and logging helpers."""

import logging
from pathlib import Path

import pandas as pd
import pytest

from descstats.utils.config import DisplayConfig, SummaryConfig
from descstats.utils.logging_utils import setup_logger
from descstats.utils.paths import get_data_dir, get_dataset_path


class TestSummaryConfig:
    def test_defaults(self) -> None:
        cfg = SummaryConfig()
        assert (cfg.peek_rows, cfg.skewness_type, cfg.top_n_pairs) == (6, 3, 20)

    @pytest.mark.parametrize(
        "kwargs",
        [{"peek_rows": -1}, {"skewness_type": 0}, {"top_n_pairs": -5}],
    )
    def test_invalid_values(self, kwargs: dict[str, int]) -> None:
        with pytest.raises(ValueError):
            SummaryConfig(**kwargs)


def test_display_precision() -> None:
    text = DisplayConfig(precision=4).format_frame(pd.Series({"r": 0.123456789}))
    assert "0.1235" in text
    assert "0.12346" not in text


def test_display_missing() -> None:
    assert "NA" in DisplayConfig().format_frame(pd.Series({"r": float("nan")}))


class TestPaths:
    def test_env_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "pima-indians-diabetes.csv").write_text("a\n1\n")
        monkeypatch.setenv("DESCSTATS_DATA_DIR", str(tmp_path))
        assert get_data_dir() == tmp_path.resolve()
        assert get_dataset_path("pima").name == "pima-indians-diabetes.csv"

    def test_unknown_key_is_a_filename(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "iris").write_text("a\n1\n")
        monkeypatch.setenv("DESCSTATS_DATA_DIR", str(tmp_path))
        assert get_dataset_path("iris") == tmp_path.resolve() / "iris"

    def test_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DESCSTATS_DATA_DIR", str(tmp_path))
        with pytest.raises(FileNotFoundError, match="pima"):
            get_dataset_path("pima")

    def test_missing_dir(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DESCSTATS_DATA_DIR", str(tmp_path / "nope"))
        with pytest.raises(FileNotFoundError, match="Data directory"):
            get_data_dir()


def test_setup_logger_writes_file(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "run.log"
    logger = setup_logger("descstats.test", log_file=log_file, level="DEBUG", colorize=False)
    logger.debug("hello")
    for handler in logger.handlers:
        handler.flush()
    assert logger.level == logging.DEBUG
    assert "hello" in log_file.read_text()
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []
