"""
C++ code generator - renders capability classes as spec getter functions

Each class becomes a function returning a lazily built static
std::set<std::string> with the member operator names.
"""

import os
from typing import List

from ..classification.result import ClassificationResult
from .spec_map import SpecMapping


class CCPrinter:
    """
    Generates the C++ spec getters from a classification result.

    Output:
    - One `const std::set<std::string> &Export*Spec()` function per class,
      in the result's order
    """

    def __init__(self, result: ClassificationResult):
        """
        Initialize the C++ code generator.

        Args:
            result: The classification result to render
        """
        self.result = result

    def generate_getter(self, class_name: str, members) -> str:
        """
        Generate a single getter function.

        Args:
            class_name: Capability class (also the function name)
            members: Sorted operator names

        Returns:
            The C++ code as a string
        """
        lines = []
        lines.append(f"// {SpecMapping.get_description(class_name)}")
        lines.append(f"{SpecMapping.get_signature(class_name)} {{")
        lines.append("  static const std::set<std::string> * result =")
        lines.append("    new std::set<std::string>({")
        for op_name in members:
            lines.append(f"      \"{op_name}\",")
        lines.append("    });")
        lines.append("  return *result;")
        lines.append("}")
        return "\n".join(lines)

    def generate_source(self) -> str:
        """
        Generate the full source fragment.

        Returns:
            The C++ code as a string
        """
        lines: List[str] = []
        lines.append("// Auto-generated op coverage spec getters")
        lines.append("// DO NOT EDIT")
        lines.append("")

        for class_name, members in self.result.items():
            lines.append(self.generate_getter(class_name, members))
            lines.append("")

        return "\n".join(lines)

    def write(self, output_path: str) -> None:
        """
        Write the generated source to a file, creating parent directories.

        Args:
            output_path: Destination file path
        """
        output_dir = os.path.dirname(os.path.abspath(output_path))
        os.makedirs(output_dir, exist_ok=True)

        source = self.generate_source()
        with open(output_path, 'w') as f:
            f.write(source)


def generate_cc_code(result: ClassificationResult, output_path: str) -> None:
    """
    Convenience function to write the spec getters for a result.

    Args:
        result: The classification result
        output_path: Destination file path
    """
    printer = CCPrinter(result)
    printer.write(output_path)
