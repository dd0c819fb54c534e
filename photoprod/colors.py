"""Colour palette indices used when drawing plots."""

from __future__ import annotations

from enum import IntEnum


class JpacColor(IntEnum):
    """Named colours of the plotting palette, keyed by their colour index."""

    BLUE = 2001
    RED = 2002
    GREEN = 2003
    ORANGE = 2004
    PURPLE = 2005
    BROWN = 2006
    PINK = 2007
    GOLD = 2008
    AQUA = 2009
    GREY = 2010
    DARK_GREY = 2011

    @classmethod
    def nth(cls, i: int) -> "JpacColor":
        """Return the i-th colour of the palette, cycling past the end."""
        return JPAC_COLORS[i % len(JPAC_COLORS)]


JPAC_COLORS: tuple[JpacColor, ...] = tuple(JpacColor)