import doctest

import pytest

import _dfascan.parser
import _dfascan.reading
import _dfascan.scanner
import _dfascan.table


@pytest.mark.parametrize(
    "module",
    [_dfascan.parser, _dfascan.reading, _dfascan.scanner, _dfascan.table],
)
def test_docstring_examples(module):
    failed, attempted = doctest.testmod(module)
    assert attempted > 0
    assert failed == 0
