"""
Catalog - Immutable snapshot of the operator definitions to classify
"""

import json
from typing import Any, Dict, Iterable, Iterator, List, Optional

from .operator import Argument, CatalogContractError, OperatorDef, TypeConstraint


class Catalog:
    """
    Represents the complete set of operator definitions in one run.

    Maintains:
    - Operators in their input order
    - Name lookup (operator names are unique)
    """

    def __init__(self, ops: Iterable[OperatorDef] = ()):
        """
        Initialize a catalog.

        Args:
            ops: Operator definitions, in any order
        """
        self._ops: tuple = tuple(ops)
        self._op_map: Dict[str, OperatorDef] = {}
        for op in self._ops:
            if isinstance(op, OperatorDef):
                self._op_map.setdefault(op.name, op)

    @classmethod
    def from_records(cls, records: Iterable[Dict[str, Any]]) -> 'Catalog':
        """
        Build a catalog from plain dictionaries.

        Args:
            records: Iterable of operator mappings (see OperatorDef.from_dict)

        Returns:
            The catalog
        """
        return cls(OperatorDef.from_dict(record) for record in records)

    def get_op_by_name(self, name: str) -> Optional[OperatorDef]:
        """
        Retrieve an operator by its name.

        Returns:
            The OperatorDef if found, None otherwise
        """
        return self._op_map.get(name)

    def sorted_ops(self) -> List[OperatorDef]:
        """
        Return the operators sorted lexicographically by name.

        The catalog itself is left untouched; callers get a fresh list.
        """
        return sorted(self._ops, key=lambda op: op.name)

    def derived_from(self, base_class: str) -> 'Catalog':
        """
        Restrict the catalog to operators deriving from a record class.

        Args:
            base_class: Record class name (e.g. 'TFL_Op')

        Returns:
            A new catalog with only the matching operators
        """
        return Catalog(op for op in self._ops if base_class in op.base_classes)

    def validate(self) -> bool:
        """
        Validate the catalog structure.

        Returns:
            True if valid, raises CatalogContractError otherwise
        """
        seen = set()
        for op in self._ops:
            if not isinstance(op, OperatorDef):
                raise CatalogContractError(
                    f"Catalog entry {op!r} is not an OperatorDef"
                )
            if not isinstance(op.name, str) or not op.name:
                raise CatalogContractError(f"Operator name must be a non-empty string: {op.name!r}")
            if op.name in seen:
                raise CatalogContractError(f"Operator '{op.name}' appears more than once in the catalog")
            seen.add(op.name)
            if not isinstance(op.extra_class_declaration, str):
                raise CatalogContractError(
                    f"Operator '{op.name}' extra class declaration must be a string, "
                    f"got {type(op.extra_class_declaration).__name__}"
                )

            for arg in op.arguments:
                if not isinstance(arg, Argument):
                    raise CatalogContractError(
                        f"Operator '{op.name}' has argument {arg!r} which is not an Argument"
                    )
                constraint = arg.type_constraint
                if constraint is not None and not isinstance(constraint, TypeConstraint):
                    raise CatalogContractError(
                        f"Argument '{arg.name}' of '{op.name}' has a malformed type constraint"
                    )

        return True

    def __len__(self) -> int:
        return len(self._ops)

    def __iter__(self) -> Iterator[OperatorDef]:
        return iter(self._ops)

    def __contains__(self, name: str) -> bool:
        return name in self._op_map

    def __repr__(self) -> str:
        return f"Catalog(ops={len(self._ops)})"

    def print_catalog(self) -> str:
        """
        Generate a human-readable representation of the catalog.

        Returns:
            String listing every operator with its traits and arguments
        """
        lines = ["Catalog:"]
        for op in self.sorted_ops():
            lines.append(f"  {op.name}")
            lines.append(f"    traits: {sorted(op.traits)}")
            lines.append(f"    arguments: [{', '.join(arg.name for arg in op.arguments)}]")
        return "\n".join(lines)


def load_catalog(path: str) -> Catalog:
    """
    Load a catalog from a JSON file holding a list of operator records.

    Args:
        path: Path to the JSON file

    Returns:
        The catalog
    """
    with open(path, 'r') as f:
        records = json.load(f)

    if not isinstance(records, list):
        raise CatalogContractError(f"Catalog file '{path}' must contain a list of operator records")

    return Catalog.from_records(records)
