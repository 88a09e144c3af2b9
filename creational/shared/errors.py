"""
Exception hierarchy for object creation.

Only ConstructionFailure can come out of a normal creation call. The other
errors belong to the opt-in strict mode, the registries and the pooled
creator.
"""


class CreationalError(Exception):
    """Base class for all errors raised by this package."""


class ConstructionFailure(CreationalError):
    """A creation operation could not build its product."""

    def __init__(self, product_name: str, reason: str):
        self.product_name = product_name
        self.reason = reason
        super().__init__(f"Could not construct {product_name}: {reason}")


class VariantMismatchError(CreationalError):
    """A strict product was given a collaborator from another variant."""

    def __init__(self, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Collaborator belongs to variant {actual}, expected variant {expected}"
        )


class UnknownVariantError(CreationalError, ValueError):
    """No factory or creator is registered under the requested name."""


class OwnershipError(CreationalError):
    """A lease was released twice or used after release."""


class PoolExhaustedError(CreationalError):
    """Every pooled product is currently leased."""
