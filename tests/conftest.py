import matplotlib

matplotlib.use("Agg")

import pytest

from models.table_model import Table


@pytest.fixture
def sales_table():
    return Table(
        columns=["month", "revenue", "units"],
        rows=[
            {"month": "Jan", "revenue": "100", "units": "3"},
            {"month": "Feb", "revenue": "250.5", "units": "n/a"},
            {"month": "Mar", "revenue": "175", "units": "7"},
            {"month": "Apr", "revenue": "", "units": "2"},
        ],
    )


@pytest.fixture
def clean_table():
    return Table(
        columns=["x", "y"],
        rows=[{"x": str(i), "y": str(i * 2)} for i in range(1, 6)],
    )
