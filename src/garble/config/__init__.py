"""Configuration constants module."""

from .constants import PROBABILITY, NUMERIC, UNICODE, DEFAULTS

__all__ = ['PROBABILITY', 'NUMERIC', 'UNICODE', 'DEFAULTS']
