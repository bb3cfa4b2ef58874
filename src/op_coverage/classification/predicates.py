"""
Predicates - Single-condition tests evaluated against one operator

All functions here are stateless. They read the operator and never modify it.
"""

import re
from typing import Iterable

from ..ir.operator import Argument, CatalogContractError, OperatorDef, TypeConstraint


# Marker function in the extra class declaration of ops whose kernels
# support dynamic-range quantization.
KERNEL_SUPPORT_MARKER = "bool GetDynamicRangeQuantKernelSupport() { return true; }"

# A dimension of -1 means per-channel quantization is unsupported, so only
# a literal digit string counts as a match. The wildcards stop at line
# terminators (\r, U+2028, U+2029) and digits are ASCII only.
PER_AXIS_DIM_PATTERN = re.compile(
    r"([^\n\r\u2028\u2029]*)(int GetQuantizationDimIndex\(\) \{ return (\d*); \})([^\n\r\u2028\u2029]*)",
    re.ASCII
)

INPUT_ARG_NAME = "input"


def flatten_declaration(op: OperatorDef) -> str:
    """Replace every newline in the op's extra declaration with a single space."""
    return op.extra_class_declaration.replace("\n", " ")


def trait_present(op: OperatorDef, trait: str) -> bool:
    """
    Check if the operator declares a trait.

    Exact, case-sensitive match on the trait identifier.
    """
    return op.has_trait(trait)


def declaration_contains(op: OperatorDef, literal: str) -> bool:
    """
    Check if the flattened extra declaration contains a literal substring.

    Args:
        op: Operator to test
        literal: Text to search for

    Returns:
        True if the literal occurs in the flattened declaration
    """
    return literal in flatten_declaration(op)


def declaration_matches_pattern(op: OperatorDef, pattern=PER_AXIS_DIM_PATTERN) -> bool:
    """
    Check if the whole flattened extra declaration matches a regex.

    Args:
        op: Operator to test
        pattern: Compiled regex or pattern string, matched against the full text

    Returns:
        True on a full match
    """
    return re.fullmatch(pattern, flatten_declaration(op)) is not None


def locate_input_argument(op: OperatorDef) -> int:
    """
    Find the index of the operator's activation input.

    Arguments are scanned in order and the last one named 'input' wins.
    When no argument carries that name the first argument is assumed.

    Args:
        op: Operator to inspect

    Returns:
        Argument index
    """
    input_idx = 0
    for i, arg in enumerate(op.arguments):
        if arg.name == INPUT_ARG_NAME:
            input_idx = i
    return input_idx


def resolve_type_constraint(op: OperatorDef, arg_index: int):
    """
    Get the type constraint of the argument at arg_index.

    Returns:
        The TypeConstraint, or None when the argument is unconstrained

    Raises:
        CatalogContractError: If the argument does not exist or is malformed
    """
    if not 0 <= arg_index < len(op.arguments):
        raise CatalogContractError(
            f"Operator '{op.name}' has no argument at index {arg_index} "
            f"({len(op.arguments)} declared)"
        )

    arg = op.arguments[arg_index]
    if not isinstance(arg, Argument):
        raise CatalogContractError(
            f"Operator '{op.name}' argument {arg_index} is not an Argument: {arg!r}"
        )

    constraint = arg.type_constraint
    if constraint is None:
        return None
    if (not isinstance(constraint, TypeConstraint) or
            not isinstance(constraint.runtime_type_description, str)):
        raise CatalogContractError(
            f"Argument '{arg.name}' of '{op.name}' has a malformed type constraint: "
            f"{constraint!r}"
        )
    return constraint


def required_types_supported(
    op: OperatorDef,
    arg_index: int,
    required_types: Iterable[str],
    per_axis: bool
) -> bool:
    """
    Check if an argument's constraint lists all the required types.

    An argument without a constraint accepts any tensor, which only counts
    as a pass for per-tensor checks.

    Args:
        op: Operator to test
        arg_index: Index of the argument to check
        required_types: Type descriptions that must all appear as substrings
        per_axis: Whether the check is for per-axis quantization

    Returns:
        True if every required type is supported
    """
    constraint = resolve_type_constraint(op, arg_index)
    if constraint is None:
        return not per_axis

    supported_types = constraint.runtime_type_description
    for required in required_types:
        if required not in supported_types:
            return False
    return True
