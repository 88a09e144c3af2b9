"""Factory pattern implementations for swappable products."""

from creational.factories.factory_method import (
    Product,
    Creator,
    CreatorFactory,
)
from creational.factories.abstract_factory import (
    AbstractProductA,
    AbstractProductB,
    AbstractFactory,
    FamilyFactory,
)
from creational.factories.pooled_factory import PooledCreator, ProductLease

__all__ = [
    'Product',
    'Creator',
    'CreatorFactory',
    'AbstractProductA',
    'AbstractProductB',
    'AbstractFactory',
    'FamilyFactory',
    'PooledCreator',
    'ProductLease',
]
