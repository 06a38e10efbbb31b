from collections.abc import Generator

import pytest

from sqlbuild.sql.template_engine import clear_template_cache


@pytest.fixture(autouse=True)
def template_cache() -> Generator[None, None, None]:
    clear_template_cache()
    yield
    clear_template_cache()
