"""Descriptive summary engine: the eight summary views of a dataset behind one facade."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from descstats.analysis.class_distribution import ClassDistributionResult
from descstats.analysis.correlation_analyzer import CorrelationResult
from descstats.analysis.moments import SkewnessResult, StdDevResult
from descstats.analysis.structure import PeekResult, ShapeResult, TypeMapResult, peek, shape, type_map
from descstats.analysis.summary_table import SummaryTableResult
from descstats.data.dataset import Dataset
from descstats.errors import SummaryError
from descstats.utils.config import DEFAULT_DISPLAY_CFG, DEFAULT_SUMMARY_CFG, DisplayConfig, SummaryConfig


logger = logging.getLogger(__name__)


SummaryResult = (
    PeekResult
    | ShapeResult
    | TypeMapResult
    | ClassDistributionResult
    | SummaryTableResult
    | StdDevResult
    | SkewnessResult
    | CorrelationResult
)
"""Any of the eight summary kinds."""

OPERATIONS: tuple[str, ...] = (
    "peek",
    "shape",
    "type_map",
    "class_distribution",
    "summary_table",
    "std_dev",
    "skewness",
    "correlation",
)


@dataclass(frozen=True)
class DescriptiveReport:
    """Outcome of running every summary on one dataset.

    Attributes:
        results: Successful summaries keyed by operation name, in run order.
        errors: Summaries that failed with a :class:`SummaryError`, keyed by operation name.
        skipped: Operations not run, with the reason.
    """

    results: dict[str, SummaryResult] = field(default_factory=dict)
    errors: dict[str, SummaryError] = field(default_factory=dict)
    skipped: dict[str, str] = field(default_factory=dict)

    def __getitem__(self, operation: str) -> SummaryResult:
        return self.results[operation]

    def to_string(self, config: DisplayConfig = DEFAULT_DISPLAY_CFG) -> str:
        sections = [f"== {name} ==\n{result.to_string(config)}" for name, result in self.results.items()]
        sections += [f"== {name} ==\nerror: {exc}" for name, exc in self.errors.items()]
        sections += [f"== {name} ==\nskipped: {reason}" for name, reason in self.skipped.items()]
        return "\n\n".join(sections)


class DescriptiveSummaryEngine:
    """Compute descriptive summaries of one immutable dataset.

    Every operation is a pure read of the dataset and returns a fresh result, so a single
    engine can be shared between callers.

    Example:
        >>> from descstats import DescriptiveSummaryEngine
        >>> from descstats.data import IrisColumn, load_iris
        >>> engine = DescriptiveSummaryEngine(load_iris())
        >>> engine.shape().as_tuple()
        (150, 5)
        >>> engine.class_distribution(IrisColumn.LABEL).as_dict()["virginica"][0]
        50
        >>> print(engine.describe(label_col=IrisColumn.LABEL).to_string())
    """

    def __init__(self, dataset: Dataset, config: SummaryConfig = DEFAULT_SUMMARY_CFG) -> None:
        self.dataset = dataset
        self.config = config

    def peek(self, n: int | None = None) -> PeekResult:
        """First ``n`` rows (``config.peek_rows`` by default), like R's ``head``."""
        n = self.config.peek_rows if n is None else n
        logger.debug("peek n=%d", n)
        return peek(self.dataset.view(), n)

    def shape(self) -> ShapeResult:
        """Row and column count, like R's ``dim``."""
        logger.debug("shape")
        return shape(self.dataset.view())

    def type_map(self) -> TypeMapResult:
        """Declared kind per attribute, like ``sapply(df, class)``."""
        logger.debug("type_map")
        return type_map(self.dataset.view())

    def class_distribution(self, label_col: str) -> ClassDistributionResult:
        """Counts and percentages of a categorical label, like ``table`` / ``prop.table``.

        Raises:
            SchemaMismatchError: If ``label_col`` is unknown.
            TypeMismatchError: If ``label_col`` is numeric.
        """
        logger.debug("class_distribution label_col=%s", label_col)
        return self.dataset.make_class_distribution_analyzer(str(label_col)).fit().result()

    def summary_table(self, columns: Iterable[str] | None = None) -> SummaryTableResult:
        """Per-attribute summary, like R's ``summary``."""
        logger.debug("summary_table columns=%s", columns)
        return self.dataset.make_summary_table_analyzer(columns).fit().result()

    def std_dev(self, columns: Iterable[str] | None = None) -> StdDevResult:
        """Sample standard deviation of numeric attributes, like ``sapply(df, sd)``.

        Raises:
            TypeMismatchError: If a column is categorical.
            InsufficientDataError: If a column has fewer than two non-missing values.
        """
        logger.debug("std_dev columns=%s", columns)
        return self.dataset.make_std_dev_analyzer(columns).fit().result()

    def skewness(self, columns: Iterable[str] | None = None, skew_type: int | None = None) -> SkewnessResult:
        """Skewness of numeric attributes, like ``apply(df, 2, e1071::skewness)``.

        Raises:
            TypeMismatchError: If a column is categorical.
            InsufficientDataError: If a column has no non-missing values.
        """
        skew_type = self.config.skewness_type if skew_type is None else skew_type
        logger.debug("skewness columns=%s type=%d", columns, skew_type)
        return self.dataset.make_skewness_analyzer(columns, skew_type=skew_type).fit().result()

    def correlation(self, columns: Iterable[str] | None = None) -> CorrelationResult:
        """Pairwise-complete Pearson correlation matrix, like R's ``cor``.

        Raises:
            TypeMismatchError: If a column is categorical.
        """
        logger.debug("correlation columns=%s", columns)
        analyzer = self.dataset.make_correlation_analyzer(columns).fit()
        return analyzer.result(top_n_pairs=self.config.top_n_pairs)

    def run(self, operation: str, **kwargs: object) -> SummaryResult:
        """Run one operation by name.

        Raises:
            ValueError: If ``operation`` is not one of :data:`OPERATIONS`.
        """
        if operation not in OPERATIONS:
            raise ValueError(f"Unknown operation '{operation}'. Use one of {list(OPERATIONS)}.")
        return getattr(self, operation)(**kwargs)

    def _default_label(self) -> str | None:
        categorical = self.dataset.schema.categorical_names
        return categorical[0] if len(categorical) == 1 else None

    def describe(self, label_col: str | None = None) -> DescriptiveReport:
        """Run all eight summaries, recording failures instead of stopping at the first one.

        Args:
            label_col: Categorical attribute for the class distribution. Defaults to the only
                categorical attribute when there is exactly one; otherwise that summary is skipped.
        """
        label_col = label_col if label_col is not None else self._default_label()
        report = DescriptiveReport()
        for operation in OPERATIONS:
            kwargs: dict[str, object] = {}
            if operation == "class_distribution":
                if label_col is None:
                    report.skipped[operation] = "no label column given"
                    logger.info("Skipping class_distribution: no label column given")
                    continue
                kwargs["label_col"] = label_col
            try:
                report.results[operation] = self.run(operation, **kwargs)
            except SummaryError as exc:
                logger.warning("Skipping %s: %s", operation, exc)
                report.errors[operation] = exc
        return report
