#!/usr/bin/python
# -*- coding:utf-8 -*-
"""
This module holds the registry of generated test entries

Every concrete screen suite gets one entry per CheckKind, named
after the screen it tests (e.g. testLoginScreenCreation).  The
entry is attached to the suite class so unittest / pytest discover
it by the usual `test` prefix, and points at the shared check
method on the suite.
"""

import logging
import weakref
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, MutableMapping, Optional

logger = logging.getLogger("ViewCase.Registry")


class CheckKind(Enum):
    """
    The canonical lifecycle checks, in the order
    their entries are registered
    """

    CREATION = ("Creation", "validate_subject_created")
    BECAME_VISIBLE = ("BecameVisible", "validate_became_visible")
    VISIBILITY_RELEASED = ("VisibilityReleased", "validate_visibility_released")

    def __init__(self, suffix: str, check_name: str):
        self.suffix = suffix
        self.check_name = check_name


@dataclass(frozen=True)
class EntryDescriptor:
    name: str
    kind: CheckKind
    check: Callable[..., None]


def entry_name(subject_type: type, kind: CheckKind) -> str:
    return f"test{subject_type.__name__}{kind.suffix}"


class EntryRegistry:
    """
    Maps suite class -> entry name -> EntryDescriptor

    A suite class is registered once; later calls return the
    recorded entries untouched.  Classes are held weakly, so
    suites that go away drop out of the registry with them.

    Suites are assumed to be built serially, so there is no
    locking here.  A host running suite construction in
    parallel would need it around register().
    """

    def __init__(self):
        self._entries: MutableMapping[type, Dict[str, EntryDescriptor]] = (
            weakref.WeakKeyDictionary()
        )

    def is_registered(self, suite_class: type) -> bool:
        return suite_class in self._entries

    def register(self, suite_class: type, subject_type: type) -> List[EntryDescriptor]:
        existing = self._entries.get(suite_class)
        if existing is not None:
            logger.debug("%s already registered", suite_class.__name__)
            return list(existing.values())

        entries: Dict[str, EntryDescriptor] = {}
        for kind in CheckKind:
            name = entry_name(subject_type, kind)
            # resolved on the suite so a subclass override of the check wins
            check = getattr(suite_class, kind.check_name)
            if name in vars(suite_class):
                logger.debug(
                    "%s.%s already defined, leaving it in place",
                    suite_class.__name__,
                    name,
                )
            else:
                setattr(suite_class, name, check)
                logger.debug("Registered %s.%s", suite_class.__name__, name)
            entries[name] = EntryDescriptor(name, kind, check)

        self._hide_inherited_entries(suite_class, entries)
        self._entries[suite_class] = entries
        return list(entries.values())

    def _hide_inherited_entries(
        self, suite_class: type, entries: Dict[str, EntryDescriptor]
    ) -> None:
        # entries generated for a parent suite name the parent's screen,
        # a None attribute keeps them from being collected here
        for base in suite_class.__mro__[1:]:
            for name, descriptor in self._entries.get(base, {}).items():
                if name in entries or name in vars(suite_class):
                    continue
                if vars(base).get(name) is not descriptor.check:
                    continue
                setattr(suite_class, name, None)
                logger.debug(
                    "Hid %s.%s from %s", base.__name__, name, suite_class.__name__
                )

    def entries_for(self, suite_class: type) -> List[EntryDescriptor]:
        return list(self._entries.get(suite_class, {}).values())

    def lookup(self, suite_class: type, kind: CheckKind) -> Optional[EntryDescriptor]:
        for descriptor in self._entries.get(suite_class, {}).values():
            if descriptor.kind is kind:
                return descriptor
        return None


registry = EntryRegistry()
