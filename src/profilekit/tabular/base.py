"""In-memory tabular container used for bulk profile import and export.

A DataSet holds named tables; each table has named, typed columns and rows
of values positionally aligned with those columns.
"""

from typing import Any, Iterator, Sequence

from pydantic import BaseModel, Field, model_validator


class DataColumn(BaseModel):
    """A named, typed column of a table."""

    name: str = Field(..., description="Column name")
    data_type: type = Field(default=object, description="Python type of the column's values")

    def accepts(self, value: Any) -> bool:
        """Check whether a value can be stored in this column."""
        return value is None or isinstance(value, self.data_type)


class DataTable(BaseModel):
    """A named table with typed columns and positional rows."""

    name: str = Field(..., description="Table name")
    columns: list[DataColumn] = Field(default_factory=list, description="Column definitions")
    rows: list[tuple[Any, ...]] = Field(default_factory=list, description="Row values")

    @model_validator(mode="after")
    def check_row_lengths(self) -> "DataTable":
        for index, row in enumerate(self.rows):
            if len(row) != len(self.columns):
                raise ValueError(
                    f"Row {index} of table '{self.name}' has {len(row)} values, "
                    f"expected {len(self.columns)}"
                )
        return self

    @property
    def column_names(self) -> list[str]:
        return [column.name for column in self.columns]

    def get_column(self, name: str) -> DataColumn | None:
        """Get a column by name."""
        for column in self.columns:
            if column.name == name:
                return column
        return None

    def add_column(self, name: str, data_type: type = object) -> DataColumn:
        """Add a typed column.

        Args:
            name: Column name, unique within the table
            data_type: Python type of the values

        Returns:
            The created column

        Raises:
            ValueError: If a column with the same name already exists
        """
        return self._append_column(DataColumn(name=name, data_type=data_type))

    def add_columns(self, columns: Sequence[DataColumn]) -> None:
        for column in columns:
            self._append_column(column)

    def _append_column(self, column: DataColumn) -> DataColumn:
        if self.get_column(column.name) is not None:
            raise ValueError(f"Column '{column.name}' already exists in table '{self.name}'")
        if self.rows:
            raise ValueError(f"Cannot add column '{column.name}' to non-empty table '{self.name}'")
        self.columns.append(column)
        return column

    def add_row(self, values: Sequence[Any]) -> tuple[Any, ...]:
        """Append one row of values aligned with the columns.

        Raises:
            ValueError: If the value count or a value type does not match the columns
        """
        if len(values) != len(self.columns):
            raise ValueError(
                f"Table '{self.name}' has {len(self.columns)} columns, got {len(values)} values"
            )
        for column, value in zip(self.columns, values):
            if not column.accepts(value):
                raise ValueError(
                    f"Column '{column.name}' expects {column.data_type.__name__}, "
                    f"got {type(value).__name__}"
                )
        row = tuple(values)
        self.rows.append(row)
        return row

    def get(self, row: int, column: str) -> Any:
        """Get the value of a column in a row.

        Raises:
            KeyError: If the column does not exist
            IndexError: If the row does not exist
        """
        names = self.column_names
        if column not in names:
            raise KeyError(column)
        return self.rows[row][names.index(column)]

    def __len__(self) -> int:
        return len(self.rows)


class DataSet(BaseModel):
    """A named collection of tables."""

    name: str = Field(default="", description="Data set name")
    tables: list[DataTable] = Field(default_factory=list, description="Tables in insertion order")

    def add_table(self, name: str) -> DataTable:
        """Create and append an empty table.

        Raises:
            ValueError: If a table with the same name already exists
        """
        if self.get_table(name) is not None:
            raise ValueError(f"Table '{name}' already exists in data set '{self.name}'")
        table = DataTable(name=name)
        self.tables.append(table)
        return table

    def get_table(self, name: str) -> DataTable | None:
        """Get a table by name."""
        for table in self.tables:
            if table.name == name:
                return table
        return None

    @property
    def table_names(self) -> list[str]:
        return [table.name for table in self.tables]

    def __iter__(self) -> Iterator[DataTable]:
        return iter(self.tables)

    def __len__(self) -> int:
        return len(self.tables)
