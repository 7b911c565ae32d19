"""Column definitions for the Pima Indians diabetes dataset."""

from .base_columns import AttributeKind, BaseColumn, ColumnMetadata


class PimaColumn(BaseColumn):
    """Columns of the [Pima Indians Diabetes dataset](https://www.kaggle.com/datasets/uciml/pima-indians-diabetes-database).

    Cleaned names follow the ``mlbench`` R package; original names are the Kaggle CSV headers.

    Columns:
    - ``pregnant``: float - Number of times pregnant
    - ``glucose``: float - Plasma glucose concentration at 2 hours in an oral glucose tolerance test
    - ``pressure``: float - Diastolic blood pressure (mm Hg)
    - ``triceps``: float - Triceps skin fold thickness (mm)
    - ``insulin``: float - 2-hour serum insulin (mu U/ml)
    - ``mass``: float - Body mass index (weight in kg / (height in m)^2)
    - ``pedigree``: float - Diabetes pedigree function
    - ``age``: float - Age in years
    - ``diabetes``: category - Class label (pos/neg or 1/0)
    """

    PREGNANT = "pregnant"
    GLUCOSE = "glucose"
    PRESSURE = "pressure"
    TRICEPS = "triceps"
    INSULIN = "insulin"
    MASS = "mass"
    PEDIGREE = "pedigree"
    AGE = "age"
    DIABETES = "diabetes"

    LABEL = DIABETES

    def metadata(self) -> ColumnMetadata:
        return _METADATA[self]


_METADATA: dict[PimaColumn, ColumnMetadata] = {
    PimaColumn.PREGNANT: ColumnMetadata("Pregnancies", AttributeKind.NUMERIC, "Pregnancies"),
    PimaColumn.GLUCOSE: ColumnMetadata("Glucose", AttributeKind.NUMERIC, "Plasma Glucose"),
    PimaColumn.PRESSURE: ColumnMetadata("BloodPressure", AttributeKind.NUMERIC, "Diastolic Blood Pressure"),
    PimaColumn.TRICEPS: ColumnMetadata("SkinThickness", AttributeKind.NUMERIC, "Triceps Skin Fold"),
    PimaColumn.INSULIN: ColumnMetadata("Insulin", AttributeKind.NUMERIC, "Serum Insulin"),
    PimaColumn.MASS: ColumnMetadata("BMI", AttributeKind.NUMERIC, "BMI"),
    PimaColumn.PEDIGREE: ColumnMetadata("DiabetesPedigreeFunction", AttributeKind.NUMERIC, "Diabetes Pedigree"),
    PimaColumn.AGE: ColumnMetadata("Age", AttributeKind.NUMERIC, "Age"),
    PimaColumn.DIABETES: ColumnMetadata("Outcome", AttributeKind.CATEGORICAL, "Diabetes"),
}
