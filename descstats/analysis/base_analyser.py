"""Base analyzer class for all summary components."""

from abc import ABC, abstractmethod
from typing import Any


class BaseAnalyser(ABC):
    """Abstract base class for the statistic analyzers.

    All analyzers must:
    1. Accept a DatasetView in their constructor
    2. Implement fit() to perform the computation and return self for chaining
    3. Implement result() to return a frozen dataclass with results

    Analyzers never mutate their view; a view can be shared by several analyzers.


    ---


    ### Adding a New Analyzer

    **1. Create analyzer class** (in `analysis/my_analyzer.py`):

    ```python
    from dataclasses import dataclass
    from descstats.data.views import DatasetView

    @dataclass(frozen=True)
    class MyResult:
        '''Results package for MyAnalyzer.'''
        values: pd.Series

    class MyAnalyzer(BaseAnalyser):
        def __init__(self, view: DatasetView):
            self._view = view
            self._values: pd.Series | None = None

        def fit(self) -> "MyAnalyzer":
            self._values = self._view.features.median()
            return self

        def result(self) -> MyResult:
            if self._values is None:
                raise ValueError("Must call fit() before result()")
            return MyResult(values=self._values)
    ```

    **2. Add factory method** to `Dataset`:

    ```python
    def make_my_analyzer(self, columns: Iterable[str] | None = None) -> "MyAnalyzer":
        from descstats.analysis.my_analyzer import MyAnalyzer
        return MyAnalyzer(self.numeric_view(columns))
    ```

    **3. Expose it** as a method on `DescriptiveSummaryEngine` so `describe()` can run it.

    **Key principles:**

    - Results carry `pretty_by_col` so reports and plots need no access to the dataset
    - Input errors are raised as `descstats.errors.SummaryError` subclasses from `fit()`
    - Results provide `to_frame()` and `to_string()` for presentation
    """

    @abstractmethod
    def fit(self) -> "BaseAnalyser":
        """Fit the analyzer to the data.

        Returns:
            Self for method chaining.
        """
        ...

    @abstractmethod
    def result(self) -> Any:
        """Return analysis results as a frozen dataclass instance.

        Raises:
            ValueError: If fit() has not been called yet.
        """
        ...
