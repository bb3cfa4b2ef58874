"""
ClassificationResult - Ordered capability classes and their member operators
"""

from typing import Iterable, Iterator, List, Tuple


class ClassificationResult:
    """
    Ordered sequence of (class name, sorted operator names) pairs.

    Built once by the driver and never modified afterwards.
    """

    def __init__(self, classes: Iterable[Tuple[str, Iterable[str]]]):
        """
        Initialize a result.

        Args:
            classes: (class name, member names) pairs in emission order
        """
        self._classes: Tuple[Tuple[str, Tuple[str, ...]], ...] = tuple(
            (class_name, tuple(members)) for class_name, members in classes
        )
        self._class_map = dict(self._classes)

    def get_class(self, class_name: str) -> Tuple[str, ...]:
        """
        Get the member operators of a class.

        Args:
            class_name: Class name (e.g. 'ExportSparsitySpec')

        Returns:
            Sorted tuple of operator names

        Raises:
            ValueError: If the class is not part of this result
        """
        if class_name not in self._class_map:
            raise ValueError(f"Unknown capability class: {class_name}")
        return self._class_map[class_name]

    def __getitem__(self, class_name: str) -> Tuple[str, ...]:
        return self.get_class(class_name)

    def class_names(self) -> List[str]:
        """Class names in emission order."""
        return [class_name for class_name, _ in self._classes]

    def items(self) -> List[Tuple[str, Tuple[str, ...]]]:
        """(class name, members) pairs in emission order."""
        return list(self._classes)

    def membership(self, op_name: str) -> List[str]:
        """Names of every class the operator belongs to, in emission order."""
        return [class_name for class_name, members in self._classes if op_name in members]

    def __iter__(self) -> Iterator[Tuple[str, Tuple[str, ...]]]:
        return iter(self._classes)

    def __len__(self) -> int:
        return len(self._classes)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ClassificationResult):
            return NotImplemented
        return self._classes == other._classes

    def __repr__(self) -> str:
        counts = ", ".join(f"{name}={len(members)}" for name, members in self._classes)
        return f"ClassificationResult({counts})"
