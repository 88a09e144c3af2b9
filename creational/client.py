"""
Client code that works only through the abstract interfaces.

Nothing here names a concrete product, creator or factory, and nothing
branches on the type of what it was given. Any factory or creator can be
passed in without changing this module.
"""

from typing import Iterable
import logging

from creational.factories.abstract_factory import AbstractFactory
from creational.factories.factory_method import Creator
from creational.shared.models import ClientReport, ClientRun

logger = logging.getLogger(__name__)


def client_code(factory: AbstractFactory) -> ClientReport:
    """
    Build a product pair from one factory and let them work together.

    Args:
        factory: Any product-family factory

    Returns:
        ClientReport with product B's own result and its collaboration result

    Raises:
        ConstructionFailure: If either product could not be built
    """
    # Both products must come from the same factory instance
    product_a = factory.create_product_a()
    product_b = factory.create_product_b()

    report = ClientReport(
        variant=factory.variant,
        product_result=product_b.operation(),
        collaboration_result=product_b.collaborate_with(product_a),
    )
    logger.debug(f"Client finished with variant {report.variant}")
    return report


def creator_client_code(creator: Creator) -> str:
    """Return the creator's own operation result."""
    return creator.some_operation()


def run_all(factories: Iterable[AbstractFactory]) -> ClientRun:
    """
    Run the same client code against several factories.

    Args:
        factories: Factories to run, in order

    Returns:
        ClientRun holding one report per factory
    """
    run = ClientRun()
    for factory in factories:
        run.reports.append(client_code(factory))
    return run
