"""
pytest side of the harness, registered through the pytest11
entry point

pytest's unittest collector reads a TestCase's names straight
off the class, so registration is finalized here first.
"""

import inspect

import pytest

from ViewCase.testcase import ScreenTestCase


@pytest.hookimpl(tryfirst=True)
def pytest_pycollect_makeitem(collector, name, obj):
    if (
        inspect.isclass(obj)
        and issubclass(obj, ScreenTestCase)
        and not inspect.isabstract(obj)
    ):
        obj.finalize_registration()
    # let the unittest plugin build the collector
    return None
