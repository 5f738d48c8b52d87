"""
Exceptions raised by the screen test harness
"""


class ViewCaseError(Exception):
    pass


class SubjectTypeNotDeclared(ViewCaseError, NotImplementedError):
    """
    A suite was wired up without declaring the screen
    class it tests.  This is a programming mistake in the
    suite and is never recovered from.
    """


class ThreadAffinityError(ViewCaseError):
    pass


class CheckFailure(AssertionError):
    """
    A lifecycle check did not hold.  Subclasses AssertionError
    so unittest and pytest report it as a failure, not an error
    """
