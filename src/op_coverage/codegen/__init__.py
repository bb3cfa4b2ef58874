"""Source emission for capability classes"""

from .spec_map import SpecMapping
from .cc_printer import CCPrinter, generate_cc_code

__all__ = ['SpecMapping', 'CCPrinter', 'generate_cc_code']
