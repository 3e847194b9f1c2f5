import pytest

import sqlgen


@pytest.fixture(autouse=True)
def _postgres_by_default():
    sqlgen.use("postgres")
    yield
    sqlgen.use("postgres")
