"""Column definitions for Fisher's iris dataset."""

from .base_columns import AttributeKind, BaseColumn, ColumnMetadata


class IrisColumn(BaseColumn):
    """Columns of the [iris dataset](https://archive.ics.uci.edu/dataset/53/iris), in file order.

    Columns:
    - ``sepal_length``: float - Sepal length in cm
    - ``sepal_width``: float - Sepal width in cm
    - ``petal_length``: float - Petal length in cm
    - ``petal_width``: float - Petal width in cm
    - ``species``: category - Iris species (setosa, versicolor, virginica)
    """

    SEPAL_LENGTH = "sepal_length"
    SEPAL_WIDTH = "sepal_width"
    PETAL_LENGTH = "petal_length"
    PETAL_WIDTH = "petal_width"
    SPECIES = "species"

    LABEL = SPECIES

    def metadata(self) -> ColumnMetadata:
        return _METADATA[self]


_METADATA: dict[IrisColumn, ColumnMetadata] = {
    IrisColumn.SEPAL_LENGTH: ColumnMetadata("sepal length (cm)", AttributeKind.NUMERIC, "Sepal Length (cm)"),
    IrisColumn.SEPAL_WIDTH: ColumnMetadata("sepal width (cm)", AttributeKind.NUMERIC, "Sepal Width (cm)"),
    IrisColumn.PETAL_LENGTH: ColumnMetadata("petal length (cm)", AttributeKind.NUMERIC, "Petal Length (cm)"),
    IrisColumn.PETAL_WIDTH: ColumnMetadata("petal width (cm)", AttributeKind.NUMERIC, "Petal Width (cm)"),
    IrisColumn.SPECIES: ColumnMetadata("species", AttributeKind.CATEGORICAL, "Species"),
}
