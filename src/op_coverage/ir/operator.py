"""
OperatorDef - Read-only view of one operator record in the catalog
"""

from typing import Any, Dict, Iterable, Optional, Tuple


class CatalogContractError(ValueError):
    """Raised when the operator catalog does not have the expected shape."""
    pass


class TypeConstraint:
    """
    Type constraint attached to an operator argument.

    The runtime type description is the free-form text listing the tensor
    types the runtime kernel accepts, e.g.
    "tensor of 32-bit float or QI8 type or QUI8 type values".
    """

    def __init__(
        self,
        runtime_type_description: str,
        runtime_type_predicate: Optional[str] = None
    ):
        """
        Initialize a type constraint.

        Args:
            runtime_type_description: Human-readable list of supported types
            runtime_type_predicate: Optional predicate expression (informational)
        """
        self.runtime_type_description = runtime_type_description
        self.runtime_type_predicate = runtime_type_predicate

    @classmethod
    def from_dict(cls, record: Dict[str, Any]) -> 'TypeConstraint':
        """Build a constraint from a plain dictionary."""
        if not isinstance(record, dict):
            raise CatalogContractError(
                f"Type constraint must be a mapping, got {type(record).__name__}"
            )
        return cls(
            runtime_type_description=record.get('runtime_type_description'),
            runtime_type_predicate=record.get('runtime_type_predicate')
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, TypeConstraint):
            return NotImplemented
        return (self.runtime_type_description == other.runtime_type_description and
                self.runtime_type_predicate == other.runtime_type_predicate)

    def __hash__(self) -> int:
        return hash((self.runtime_type_description, self.runtime_type_predicate))

    def __repr__(self) -> str:
        return f"TypeConstraint('{self.runtime_type_description}')"


class Argument:
    """One named entry of an operator's argument dag."""

    def __init__(self, name: str, type_constraint: Optional[TypeConstraint] = None):
        """
        Initialize an argument.

        Args:
            name: Argument name as declared on the operator (e.g. 'input')
            type_constraint: Constraint on the argument, None when unconstrained
        """
        self.name = name
        self.type_constraint = type_constraint

    @classmethod
    def from_dict(cls, record: Dict[str, Any]) -> 'Argument':
        """Build an argument (and its constraint) from a plain dictionary."""
        if not isinstance(record, dict):
            raise CatalogContractError(
                f"Argument must be a mapping, got {type(record).__name__}"
            )
        constraint = record.get('type_constraint')
        return cls(
            name=record.get('name', ''),
            type_constraint=TypeConstraint.from_dict(constraint) if constraint is not None else None
        )

    def __repr__(self) -> str:
        return f"Argument(name='{self.name}', type_constraint={self.type_constraint!r})"


class OperatorDef:
    """
    Represents a single operator definition from the compiler's op catalog.

    The classifier only reads these objects. Traits, the extra class
    declaration text and the argument list are taken as they come from the
    upstream record store.
    """

    def __init__(
        self,
        name: str,
        traits: Iterable[str] = (),
        extra_class_declaration: str = "",
        arguments: Iterable[Argument] = (),
        base_classes: Iterable[str] = ()
    ):
        """
        Initialize an operator definition.

        Args:
            name: Unique operator name (e.g. 'AddOp')
            traits: Declared trait identifiers
            extra_class_declaration: Free-form declaration text, may span lines
            arguments: Ordered argument list
            base_classes: Record classes this operator derives from
        """
        self.name = name
        self.traits: frozenset = _name_set(name, "traits", traits)
        self.extra_class_declaration = "" if extra_class_declaration is None else extra_class_declaration
        self.arguments: Tuple[Argument, ...] = tuple(arguments)
        self.base_classes: frozenset = _name_set(name, "base_classes", base_classes)

    @classmethod
    def from_dict(cls, record: Dict[str, Any]) -> 'OperatorDef':
        """
        Build an operator from a plain dictionary.

        Expected keys: 'name', and optionally 'traits', 'extra_class_declaration',
        'arguments' (list of argument mappings) and 'base_classes'.
        """
        if not isinstance(record, dict) or 'name' not in record:
            raise CatalogContractError(f"Operator record must be a mapping with a 'name': {record!r}")
        return cls(
            name=record['name'],
            traits=record.get('traits', ()),
            extra_class_declaration=record.get('extra_class_declaration', ""),
            arguments=[Argument.from_dict(arg) for arg in record.get('arguments', ())],
            base_classes=record.get('base_classes', ())
        )

    def has_trait(self, trait: str) -> bool:
        """Check whether the operator declares the given trait."""
        return trait in self.traits

    def __repr__(self) -> str:
        return (f"OperatorDef(name='{self.name}', traits={sorted(self.traits)}, "
                f"arguments={[arg.name for arg in self.arguments]})")

    def __str__(self) -> str:
        args_str = ", ".join(arg.name for arg in self.arguments)
        return f"{self.name}({args_str})"


def _name_set(op_name: str, field: str, values: Iterable[str]) -> frozenset:
    """
    Convert a collection of identifiers to a frozenset.

    Raises:
        CatalogContractError: If values is a bare string or holds non-strings
    """
    if isinstance(values, (str, bytes)):
        raise CatalogContractError(
            f"Operator '{op_name}' {field} must be a list of names, got the string {values!r}"
        )
    try:
        names = frozenset(values)
    except TypeError:
        raise CatalogContractError(
            f"Operator '{op_name}' {field} must be a list of names, got {values!r}"
        ) from None
    for value in names:
        if not isinstance(value, str):
            raise CatalogContractError(
                f"Operator '{op_name}' {field} contains non-string entry {value!r}"
            )
    return names
