"""
Fail-with-message primitives used by the lifecycle checks
"""

from typing import Any

from ViewCase.errors import CheckFailure


def fail_if_absent(value: Any, message: str) -> None:
    if value is None:
        raise CheckFailure(message)


def fail_if_false(condition: Any, message: str) -> None:
    if not condition:
        raise CheckFailure(message)
