"""
Tests for the client routines and the settings-driven bootstrap.
"""

import inspect
import logging

import pytest
from pydantic import ValidationError

from config import settings
from creational import client
from creational.bootstrap import (
    configure_logging,
    creator_from_settings,
    factory_from_settings,
    pool_from_settings,
)
from creational.factories import abstract_factory, factory_method
from creational.factories.abstract_factory import AbstractFactory, FamilyFactory
from creational.factories.factory_method import CreatorFactory
from creational.shared.errors import ConstructionFailure
from creational.shared.models import ClientReport


CONCRETE_NAMES = [
    name
    for module in (abstract_factory, factory_method)
    for name, obj in vars(module).items()
    if inspect.isclass(obj) and name.startswith("Concrete")
]


class FailingFactory(AbstractFactory):
    @property
    def variant(self) -> str:
        return "x"

    def create_product_a(self):
        raise ConstructionFailure("ProductAX", "no memory")

    def create_product_b(self):
        raise AssertionError("should not be reached")


def test_client_variant1():
    report = client.client_code(FamilyFactory.create_factory("1"))

    assert report.variant == "1"
    assert report.product_result == "The result of the product B1."
    assert report.collaboration_result == (
        "The result of the B1 collaborating with ( The result of the product A1. )"
    )


@pytest.mark.parametrize("variant", FamilyFactory.list_variants())
def test_client_runs_against_every_factory(variant):
    report = client.client_code(FamilyFactory.create_factory(variant))

    assert f"B{report.variant}" in report.product_result
    assert f"A{report.variant}" in report.collaboration_result


def test_client_never_names_concrete_types():
    source = inspect.getsource(client)

    assert CONCRETE_NAMES
    for name in CONCRETE_NAMES:
        assert name not in source
    assert "isinstance" not in source
    assert "type(" not in source


def test_client_propagates_construction_failure():
    with pytest.raises(ConstructionFailure):
        client.client_code(FailingFactory())


def test_run_all_keeps_order():
    run = client.run_all(
        FamilyFactory.create_factory(v) for v in ["2", "1", "2"]
    )

    assert run.variants() == ["2", "1", "2"]
    assert len(run.get_reports_by_variant("2")) == 2


def test_creator_client_code():
    result = client.creator_client_code(CreatorFactory.create_creator("1"))
    assert result.endswith("{Result of the ConcreteProduct1}")


def test_report_rejects_empty_description():
    with pytest.raises(ValidationError):
        ClientReport(variant="1", product_result=" ", collaboration_result="x")


def test_factory_from_settings(monkeypatch):
    monkeypatch.setattr(settings, "FACTORY_VARIANT", "2")
    monkeypatch.setattr(settings, "STRICT_VARIANTS", True)

    factory = factory_from_settings()

    assert factory.variant == "2"
    assert factory.strict is True
    assert factory_from_settings(variant="1", strict=False).variant == "1"


def test_creator_and_pool_from_settings(monkeypatch):
    monkeypatch.setattr(settings, "CREATOR_NAME", "2")
    monkeypatch.setattr(settings, "POOL_MAX_SIZE", 3)

    assert "ConcreteProduct2" in creator_from_settings().some_operation()

    pool = pool_from_settings()
    assert pool.max_size == 3
    with pool.acquire() as lease:
        assert lease.product.operation() == "{Result of the ConcreteProduct2}"


def test_configure_logging_uses_level_name():
    root = logging.getLogger()
    saved = root.handlers[:], root.level
    root.handlers = []
    try:
        configure_logging("debug")
        assert root.level == logging.DEBUG
    finally:
        root.handlers, level = saved
        root.setLevel(level)
