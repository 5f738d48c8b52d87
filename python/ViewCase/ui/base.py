#!/usr/bin/python
# -*- coding:utf-8 -*-
"""
This module contains the base Screen class

A Screen is the unit ScreenTestCase validates.  It can be
built with no arguments, builds its view lazily the first
time `view` is read, and drops the view again in
view_did_unload().
"""

import logging
from typing import Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

logger = logging.getLogger("ViewCase.Screen")


def red(level: int) -> Tuple[int, int, int]:
    """
    Screens draw in shades of red only
    """
    return (max(0, min(255, level)), 0, 0)


class Screen:
    __title__ = "BASE"
    __resolution__: Tuple[int, int] = (128, 128)
    __mode__ = "RGB"
    titlebar_height = 17

    def __init__(self):
        self.title = self.__title__
        self._view: Optional[Image.Image] = None
        self.draw: Optional[ImageDraw.ImageDraw] = None
        self.font = ImageFont.load_default()
        self.is_active = False

    def __repr__(self):
        return f"<{type(self).__name__} {self.title!r} loaded={self.is_view_loaded()}>"

    @property
    def view(self) -> Optional[Image.Image]:
        """
        The screen buffer, loaded on first access
        """
        if self._view is None:
            self.load_view()
            if self._view is not None:
                self.view_did_load()
        return self._view

    def is_view_loaded(self) -> bool:
        return self._view is not None

    def load_view(self):
        """
        Creates the screen buffer.  Subclasses that
        build their own view should set self._view
        """
        self._view = Image.new(self.__mode__, self.__resolution__)
        self.draw = ImageDraw.Draw(self._view, mode="RGBA")

    def view_did_load(self):
        """
        Called once the view exists, override
        to lay the screen out
        """
        self.clear_screen()

    def view_did_unload(self):
        """
        Releases the view.  Fine to call whether
        or not it was ever loaded
        """
        if self._view is not None:
            logger.debug("%s unloading view", self.title)
        self._view = None
        self.draw = None

    def active(self):
        """
        Called when a screen becomes active
        i.e. foreground controlling display
        """
        self.is_active = True

    def inactive(self):
        """
        Called when a screen becomes inactive
        i.e. leaving a UI screen
        """
        self.is_active = False

    def clear_screen(self):
        """
        Clears the screen (draws rectangle in black)
        """
        if self.draw is None:
            return
        res_x, res_y = self.__resolution__
        self.draw.rectangle([0, 0, res_x, res_y], fill=red(0))

    def update(self, force=False) -> None:
        """
        Called to trigger UI Updates
        to be overloaded by subclases and shoud
        end up calling self.screen_update to
        to the actual screen draw
        """
        self.screen_update()

    def screen_update(self, title_bar=True) -> None:
        """
        Adds the title bar to the view, loading
        it if needed
        """
        if self.view is None or self.draw is None:
            return

        if title_bar:
            self.draw.rectangle(
                [0, 0, self.__resolution__[0], self.titlebar_height],
                fill=red(64),
            )
            self.draw.text((6, 1), self.title, font=self.font, fill=red(0))
