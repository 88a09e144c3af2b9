"""Factory method and abstract factory, with the client code that uses them."""

from creational.client import client_code, creator_client_code, run_all
from creational.factories import (
    Product,
    Creator,
    CreatorFactory,
    AbstractProductA,
    AbstractProductB,
    AbstractFactory,
    FamilyFactory,
    PooledCreator,
    ProductLease,
)

__all__ = [
    "client_code",
    "creator_client_code",
    "run_all",
    "Product",
    "Creator",
    "CreatorFactory",
    "AbstractProductA",
    "AbstractProductB",
    "AbstractFactory",
    "FamilyFactory",
    "PooledCreator",
    "ProductLease",
]
