"""
Abstract Factory - one factory per variant, one creation method per product kind.

Product family:
- AbstractProductA: does its own thing
- AbstractProductB: does its own thing and can work with any product A

Variants:
- "1": ConcreteFactory1 -> ConcreteProductA1, ConcreteProductB1
- "2": ConcreteFactory2 -> ConcreteProductA2, ConcreteProductB2

A factory only ever returns products of its own variant, so callers that
take both products from the same factory always get a matching pair.
Product B still accepts a product A of any variant and says in its result
which one it got. Passing strict=True to a factory makes its B products
refuse collaborators of another variant instead.
"""

from abc import ABC, abstractmethod
from typing import List
import logging

from .factory_method import construct
from ..shared.errors import UnknownVariantError, VariantMismatchError

logger = logging.getLogger(__name__)


class AbstractProductA(ABC):
    """Abstract base class for the first product kind."""

    variant: str = ""

    @abstractmethod
    def operation(self) -> str:
        """Describe which concrete product did the work."""
        pass


class ConcreteProductA1(AbstractProductA):
    variant = "1"

    def operation(self) -> str:
        return "The result of the product A1."


class ConcreteProductA2(AbstractProductA):
    variant = "2"

    def operation(self) -> str:
        return "The result of the product A2."


class AbstractProductB(ABC):
    """
    Abstract base class for the second product kind.

    Products of one variant are meant to work with product A of the same
    variant, but any AbstractProductA is accepted unless the product was
    built in strict mode.
    """

    variant: str = ""

    def __init__(self, strict: bool = False):
        self.strict = strict

    @abstractmethod
    def operation(self) -> str:
        """Describe which concrete product did the work."""
        pass

    @abstractmethod
    def collaborate_with(self, collaborator: AbstractProductA) -> str:
        """
        Work together with a product A.

        Args:
            collaborator: Any product A

        Returns:
            Description naming this product and the collaborator's result

        Raises:
            VariantMismatchError: In strict mode, if variants differ
        """
        pass

    def check_collaborator(self, collaborator: AbstractProductA):
        """Reject a collaborator of another variant when strict."""
        if self.strict and collaborator.variant != self.variant:
            raise VariantMismatchError(self.variant, collaborator.variant)


class ConcreteProductB1(AbstractProductB):
    variant = "1"

    def operation(self) -> str:
        return "The result of the product B1."

    def collaborate_with(self, collaborator: AbstractProductA) -> str:
        self.check_collaborator(collaborator)
        result = collaborator.operation()
        return f"The result of the B1 collaborating with ( {result} )"


class ConcreteProductB2(AbstractProductB):
    variant = "2"

    def operation(self) -> str:
        return "The result of the product B2."

    def collaborate_with(self, collaborator: AbstractProductA) -> str:
        self.check_collaborator(collaborator)
        result = collaborator.operation()
        return f"The result of the B2 collaborating with ( {result} )"


class AbstractFactory(ABC):
    """
    Abstract base class for product-family factories.

    Each creation method returns a new product owned by the caller. Take
    both products from the same factory instance to get a matching pair.
    """

    def __init__(self, strict: bool = False):
        self.strict = strict

    @property
    @abstractmethod
    def variant(self) -> str:
        """Variant tag shared by every product this factory returns."""
        pass

    @abstractmethod
    def create_product_a(self) -> AbstractProductA:
        """Build a new product A of this factory's variant."""
        pass

    @abstractmethod
    def create_product_b(self) -> AbstractProductB:
        """Build a new product B of this factory's variant."""
        pass


class ConcreteFactory1(AbstractFactory):
    """Factory for variant "1"."""

    @property
    def variant(self) -> str:
        return "1"

    def create_product_a(self) -> AbstractProductA:
        return construct(ConcreteProductA1)

    def create_product_b(self) -> AbstractProductB:
        return construct(ConcreteProductB1, strict=self.strict)


class ConcreteFactory2(AbstractFactory):
    """Factory for variant "2"."""

    @property
    def variant(self) -> str:
        return "2"

    def create_product_a(self) -> AbstractProductA:
        return construct(ConcreteProductA2)

    def create_product_b(self) -> AbstractProductB:
        return construct(ConcreteProductB2, strict=self.strict)


class FamilyFactory:
    """
    Factory for picking a product-family factory by variant.

    Usage:
        factory = FamilyFactory.create_factory("2")
        report = client_code(factory)
    """

    _factories = {
        "1": ConcreteFactory1,
        "variant1": ConcreteFactory1,
        "2": ConcreteFactory2,
        "variant2": ConcreteFactory2,
    }

    @classmethod
    def create_factory(cls, variant: str, strict: bool = False) -> AbstractFactory:
        """
        Create a product-family factory.

        Args:
            variant: One of "1", "2" (or "variant1", "variant2")
            strict: Make product B reject collaborators of another variant

        Returns:
            AbstractFactory instance

        Raises:
            UnknownVariantError: If variant not recognized
        """
        variant = str(variant).strip().lower()

        if variant not in cls._factories:
            available = ", ".join(cls._factories.keys())
            raise UnknownVariantError(
                f"Unknown variant: {variant}. "
                f"Available variants: {available}"
            )

        factory_class = cls._factories[variant]
        logger.info(f"Selected {factory_class.__name__} (strict={strict})")
        return factory_class(strict=strict)

    @classmethod
    def list_variants(cls) -> List[str]:
        """List available variant names."""
        return list(cls._factories.keys())


def demo_abstract_factory():
    """Run the same client code against both factories."""
    from ..client import client_code

    print("Client: Testing client code with the first factory type:")
    for line in client_code(FamilyFactory.create_factory("1")).lines():
        print(line)
    print()

    print("Client: Testing the same client code with the second factory type:")
    for line in client_code(FamilyFactory.create_factory("2")).lines():
        print(line)


if __name__ == "__main__":
    # Configure logging
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    demo_abstract_factory()
