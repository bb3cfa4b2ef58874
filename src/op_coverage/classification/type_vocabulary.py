"""
Type Vocabulary - Short type codes to the descriptions used in constraint text
"""

from types import MappingProxyType


class UnknownTypeCode(KeyError):
    """Raised when a type code is missing from the vocabulary."""

    def __init__(self, code: str):
        super().__init__(code)
        self.code = code

    def __str__(self) -> str:
        return f"Unknown type code: '{self.code}'"


# Descriptions match the wording of the runtime type descriptions attached
# to operator arguments, so they can be searched for as substrings.
TYPE_VOCABULARY = MappingProxyType({
    'F32': '32-bit float',
    'I32': '32-bit signless integer',
    'I64': '64-bit signless integer',
    'QI16': 'QI16 type',
    'I8': '8-bit signless integer',
    'UI8': '8-bit unsigned integer',
    'QI8': 'QI8 type',
    'QUI8': 'QUI8 type',
    'TFL_Quint8': 'TFLite quint8 type',
})


def lookup(code: str) -> str:
    """
    Get the canonical description for a type code.

    Args:
        code: Short type code (e.g. 'F32', 'QI8')

    Returns:
        The description string

    Raises:
        UnknownTypeCode: If the code is not in the vocabulary
    """
    try:
        return TYPE_VOCABULARY[code]
    except KeyError:
        raise UnknownTypeCode(code) from None
