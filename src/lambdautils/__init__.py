"""Lambda-style utilities over lists and maps."""

from lambdautils.core.option import Option
from lambdautils.functional.collections import dup, fill, group, opt_filter

__all__ = [
    "Option",
    "dup",
    "opt_filter",
    "group",
    "fill",
]

__version__ = "0.1.0"
