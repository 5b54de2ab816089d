import pytest

import dfascan

from .generators.example_tables import COMMENTS_DESCRIPTION, WORDS_DESCRIPTION


@pytest.fixture
def words_table():
    return dfascan.build(WORDS_DESCRIPTION)


@pytest.fixture
def comments_table():
    return dfascan.build(COMMENTS_DESCRIPTION)
