"""
Pydantic data models for client results.

The client routines never hand concrete product objects back to their
callers; they surface what the products reported, wrapped in these models.
"""

from typing import List
from pydantic import BaseModel, Field, field_validator


class ClientReport(BaseModel):
    """
    Descriptions collected by one run of the abstract-factory client.

    Attributes:
        variant: Variant tag of the factory the client was given
        product_result: What product B reported about itself
        collaboration_result: What product B reported after working with product A
    """
    variant: str
    product_result: str
    collaboration_result: str

    @field_validator('variant', 'product_result', 'collaboration_result')
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError('descriptions cannot be empty')
        return v

    def lines(self) -> List[str]:
        """Return the two descriptions in the order they were produced."""
        return [self.product_result, self.collaboration_result]


class ClientRun(BaseModel):
    """
    Reports from running the same client code against several factories.

    Attributes:
        reports: One ClientReport per factory, in the order given
    """
    reports: List[ClientReport] = Field(default_factory=list)

    def get_reports_by_variant(self, variant: str) -> List[ClientReport]:
        """Filter reports by variant."""
        return [r for r in self.reports if r.variant == variant]

    def variants(self) -> List[str]:
        """Variants exercised, in run order."""
        return [r.variant for r in self.reports]
