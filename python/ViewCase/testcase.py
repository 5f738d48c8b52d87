#!/usr/bin/python
# -*- coding:utf-8 -*-
"""
This module contains the base ScreenTestCase class

Subclass it, return the screen class you're testing from
subject_type_under_test(), and the suite gets setUp / tearDown
that build and release one screen per test, plus three generated
entries named after the screen:

    class LoginScreenTests(ScreenTestCase):
        @classmethod
        def subject_type_under_test(cls):
            return LoginScreen

    -> testLoginScreenCreation
       testLoginScreenBecameVisible
       testLoginScreenVisibilityReleased

Add any further test methods for the screen as usual.
"""

import abc
import inspect
import logging
import threading
import unittest
from typing import Any, List, Optional

from ViewCase.assertions import fail_if_absent, fail_if_false
from ViewCase.config import get_config
from ViewCase.errors import SubjectTypeNotDeclared, ThreadAffinityError
from ViewCase.registry import registry

logger = logging.getLogger("ViewCase.TestCase")


def declares_subject_type(suite_class: type) -> bool:
    """
    True if suite_class (or a parent below the base)
    overrides subject_type_under_test
    """
    accessor = inspect.getattr_static(suite_class, "subject_type_under_test", None)
    return accessor is not None and not getattr(
        accessor, "__isabstractmethod__", False
    )


class ScreenTestCase(unittest.TestCase, metaclass=abc.ABCMeta):
    # Neither pytest nor unittest should try to collect the base
    __test__ = False

    subject: Optional[Any] = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        concrete = declares_subject_type(cls)
        if "__test__" not in vars(cls):
            cls.__test__ = concrete
        if not concrete:
            return
        try:
            cls.finalize_registration()
        except NameError as e:
            # subject class not defined yet, the adapters and
            # __init__ finalize again once it is
            logger.debug("Deferring registration of %s: %s", cls.__name__, e)

    def __init__(self, methodName: str = "runTest"):
        # entries must exist before TestCase looks methodName up
        type(self).finalize_registration()
        super().__init__(methodName)

    @classmethod
    @abc.abstractmethod
    def subject_type_under_test(cls) -> type:
        """
        Override this method with the screen class you want to test.
        """
        raise SubjectTypeNotDeclared(
            f"{cls.__name__} must return the screen class under test "
            "from subject_type_under_test()"
        )

    @classmethod
    def finalize_registration(cls) -> List[str]:
        """
        Attach the generated entries to this suite class.
        Safe to call any number of times.
        """
        if cls is ScreenTestCase or not declares_subject_type(cls):
            return []
        # parent suites first, so their entries can be hidden here
        for base in reversed(cls.__mro__[1:]):
            if issubclass(base, ScreenTestCase) and base is not ScreenTestCase:
                base.finalize_registration()
        descriptors = registry.register(cls, cls.subject_type_under_test())
        return [d.name for d in descriptors]

    @classmethod
    def list_entries(cls) -> List[str]:
        return cls.finalize_registration()

    # View based tests are all UI tests
    def runs_on_primary_thread(self) -> bool:
        return True

    def setUp(self):
        super().setUp()
        config = get_config()
        if self.runs_on_primary_thread() and config.get_option(
            "primary_thread_only", True
        ):
            if threading.current_thread() is not threading.main_thread():
                raise ThreadAffinityError(
                    f"{type(self).__name__} must run on the main thread, "
                    f"not {threading.current_thread().name}"
                )

        subject_type = self.subject_type_under_test()
        self.subject = subject_type()
        logger.debug("%s: created %r", self.id(), self.subject)

        if config.get_option("log_entries_on_setup", False):
            for name in self.list_entries():
                logger.debug("%s", name)

    def tearDown(self):
        super().tearDown()
        self.subject = None
        logger.debug("%s: released subject", self.id())

    # Canonical checks, reached through the generated entries
    def validate_subject_created(self):
        fail_if_absent(self.subject, "Screen not created successfully")
        subject_type = self.subject_type_under_test()
        fail_if_false(
            isinstance(self.subject, subject_type),
            f"Screen is a {type(self.subject).__name__}, not a {subject_type.__name__}",
        )

    def validate_became_visible(self):
        fail_if_absent(self.subject, "No screen to load a view for")
        fail_if_absent(self.subject.view, "Screen's view didn't load correctly")

    def validate_visibility_released(self):
        fail_if_absent(self.subject, "No screen to unload a view for")
        self.subject.view_did_unload()
