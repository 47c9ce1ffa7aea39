"""Seat-map backend for flight seat selection.

The package assembles a presentation-ready seat map for a flight from the
flight, aircraft, cabin, row, seat, price and passenger records exposed by
its gateways, and serves it over HTTP.
"""

from __future__ import annotations

__all__ = ["__version__"]
__version__ = "0.1.0"
