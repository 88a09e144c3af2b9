"""
Factory Method - a creator that defers the choice of product to subclasses.

Provides:
- Product: the contract every created object satisfies
- Creator: declares create() and builds shared behaviour on top of it
- ConcreteCreator1 / ConcreteCreator2: each bound to one product type
- CreatorFactory: picks a concrete creator by name

The Creator's main job is not creating products. some_operation() holds
logic that works with whatever create() returns; subclasses change that
logic only by returning a different product.
"""

from abc import ABC, abstractmethod
from typing import List, Type, TypeVar
import logging

from ..shared.errors import ConstructionFailure, UnknownVariantError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def construct(product_class: Type[T], **kwargs) -> T:
    """
    Instantiate a product, reporting any failure as ConstructionFailure.

    Args:
        product_class: Concrete product type to build
        **kwargs: Constructor arguments

    Returns:
        A new product instance, owned by the caller

    Raises:
        ConstructionFailure: If the constructor raised
    """
    try:
        product = product_class(**kwargs)
    except Exception as e:
        logger.error(f"Construction of {product_class.__name__} failed: {e}")
        raise ConstructionFailure(product_class.__name__, str(e)) from e

    logger.debug(f"Constructed {product_class.__name__}")
    return product


class Product(ABC):
    """Abstract base class for factory-method products."""

    @abstractmethod
    def operation(self) -> str:
        """Describe which concrete product did the work."""
        pass


class ConcreteProduct1(Product):
    def operation(self) -> str:
        return "{Result of the ConcreteProduct1}"


class ConcreteProduct2(Product):
    def operation(self) -> str:
        return "{Result of the ConcreteProduct2}"


class Creator(ABC):
    """
    Abstract base class for creators.

    Subclasses implement create(); everything else is shared.
    """

    @abstractmethod
    def create(self) -> Product:
        """
        Build a new product.

        Returns:
            A new Product; the caller owns it

        Raises:
            ConstructionFailure: If the product could not be built
        """
        pass

    def some_operation(self) -> str:
        """
        Run the creator's own logic against a freshly created product.

        Returns:
            The product's description wrapped in the creator's text
        """
        product = self.create()
        return f"Creator: The same creator's code has just worked with {product.operation()}"


class ConcreteCreator1(Creator):
    """Creator bound to ConcreteProduct1."""

    def create(self) -> Product:
        return construct(ConcreteProduct1)


class ConcreteCreator2(Creator):
    """Creator bound to ConcreteProduct2."""

    def create(self) -> Product:
        return construct(ConcreteProduct2)


class CreatorFactory:
    """
    Factory for picking a creator by name.

    Usage:
        creator = CreatorFactory.create_creator("1")
        print(creator.some_operation())
    """

    _creators = {
        "1": ConcreteCreator1,
        "creator1": ConcreteCreator1,
        "2": ConcreteCreator2,
        "creator2": ConcreteCreator2,
    }

    @classmethod
    def create_creator(cls, name: str) -> Creator:
        """
        Create a creator.

        Args:
            name: One of "1", "2" (or "creator1", "creator2")

        Returns:
            Creator instance

        Raises:
            UnknownVariantError: If name not recognized
        """
        name = str(name).strip().lower()

        if name not in cls._creators:
            available = ", ".join(cls._creators.keys())
            raise UnknownVariantError(
                f"Unknown creator: {name}. "
                f"Available creators: {available}"
            )

        creator_class = cls._creators[name]
        logger.info(f"Selected creator {creator_class.__name__}")
        return creator_class()

    @classmethod
    def list_creators(cls) -> List[str]:
        """List available creator names."""
        return list(cls._creators.keys())


def demo_factory_method():
    """Run the same client code against each creator."""
    from ..client import creator_client_code

    for name in ["1", "2"]:
        print(f"App: Launched with the ConcreteCreator{name}.")
        creator = CreatorFactory.create_creator(name)
        print("Client: I'm not aware of the creator's class, but it still works.")
        print(creator_client_code(creator))
        print()


if __name__ == "__main__":
    # Configure logging
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    demo_factory_method()
