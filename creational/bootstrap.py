"""
Build the configured factory, creator or pool from config.settings.

This is the one place that turns a configuration value into a concrete
choice. Everything it returns is typed by its abstract interface and is
meant to be passed explicitly into the client routines.
"""

import logging
from typing import Optional

from config import settings
from creational.factories.abstract_factory import AbstractFactory, FamilyFactory
from creational.factories.factory_method import Creator, CreatorFactory
from creational.factories.pooled_factory import PooledCreator

logger = logging.getLogger(__name__)


def factory_from_settings(
    variant: Optional[str] = None,
    strict: Optional[bool] = None
) -> AbstractFactory:
    """
    Create the product-family factory named by the settings.

    Args:
        variant: Overrides FACTORY_VARIANT when given
        strict: Overrides STRICT_VARIANTS when given

    Returns:
        AbstractFactory instance
    """
    if variant is None:
        variant = settings.FACTORY_VARIANT
    if strict is None:
        strict = settings.STRICT_VARIANTS

    return FamilyFactory.create_factory(variant, strict=strict)


def creator_from_settings(name: Optional[str] = None) -> Creator:
    """Create the creator named by CREATOR_NAME (or by name, if given)."""
    if name is None:
        name = settings.CREATOR_NAME
    return CreatorFactory.create_creator(name)


def pool_from_settings(
    name: Optional[str] = None,
    max_size: Optional[int] = None
) -> PooledCreator:
    """
    Create a pooled creator in front of the configured creator.

    Args:
        name: Overrides CREATOR_NAME when given
        max_size: Overrides POOL_MAX_SIZE when given

    Returns:
        PooledCreator instance
    """
    if max_size is None:
        max_size = settings.POOL_MAX_SIZE

    logger.info(f"Pooling creator with max_size={max_size}")
    return PooledCreator(creator_from_settings(name), max_size=max_size)


def configure_logging(level: Optional[str] = None):
    """Configure root logging at LOG_LEVEL."""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
