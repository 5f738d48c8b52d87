#!/usr/bin/python
# -*- coding:utf-8 -*-
"""
unittest side of the harness

unittest lists a TestCase's methods before it builds any instance,
so EntryLoader finalizes each screen suite's registration before
asking for names.
"""

import inspect
import logging
import sys
import unittest
from typing import Optional, TextIO

from ViewCase import logconf
from ViewCase.config import Config, get_config
from ViewCase.testcase import ScreenTestCase

logger = logging.getLogger("ViewCase.Runner")


class EntryLoader(unittest.TestLoader):
    def getTestCaseNames(self, testCaseClass):
        if issubclass(testCaseClass, ScreenTestCase):
            testCaseClass.finalize_registration()
        return super().getTestCaseNames(testCaseClass)

    def loadTestsFromTestCase(self, testCaseClass):
        # abstract suites can't be built, and have no entries anyway
        if inspect.isabstract(testCaseClass):
            return self.suiteClass([])
        return super().loadTestsFromTestCase(testCaseClass)


def load_suite(*suite_classes: type) -> unittest.TestSuite:
    loader = EntryLoader()
    suite = unittest.TestSuite()
    for suite_class in suite_classes:
        suite.addTests(loader.loadTestsFromTestCase(suite_class))
    return suite


def run_suites(
    *suite_classes: type,
    config: Optional[Config] = None,
    stream: Optional[TextIO] = None,
) -> unittest.TestResult:
    """
    Load and run the given suites with a TextTestRunner,
    returning the result
    """
    if config is None:
        config = get_config()
    logconf.apply_config(config.get_option("log_conf"))

    suite = load_suite(*suite_classes)
    logger.info(
        "Running %d entries from %d suites", suite.countTestCases(), len(suite_classes)
    )
    runner = unittest.TextTestRunner(
        stream=stream if stream is not None else sys.stderr,
        verbosity=config.get_option("runner_verbosity", 2),
        failfast=config.get_option("runner_failfast", False),
    )
    return runner.run(suite)
