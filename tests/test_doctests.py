import doctest

import pytest

import bitsha1.compare
import bitsha1.hashing._compress
import bitsha1.hashing._sha1
import bitsha1.utils


@pytest.mark.parametrize('module', [
    bitsha1.compare,
    bitsha1.hashing._compress,
    bitsha1.hashing._sha1,
    bitsha1.utils,
])
def test_doctests(module):
    failures, tests = doctest.testmod(module)
    assert tests > 0
    assert failures == 0
