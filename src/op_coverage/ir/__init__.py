"""Operator catalog data model"""

from .operator import OperatorDef, Argument, TypeConstraint, CatalogContractError
from .catalog import Catalog, load_catalog

__all__ = [
    'OperatorDef',
    'Argument',
    'TypeConstraint',
    'CatalogContractError',
    'Catalog',
    'load_catalog',
]
