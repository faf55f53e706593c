"""Utility modules for the garble package.

``config_loader`` is not re-exported here because it depends on the garbler
package, which itself imports these utilities.
"""

from .logger import get_logger, Logger

format_value = Logger.format_value
format_field_plan = Logger.format_field_plan

__all__ = [
    'get_logger',
    'Logger',
    'format_value',
    'format_field_plan',
]
