"""
Pooled creator - reuse products instead of building one per call.

Wraps any Creator. acquire() hands out an idle product when there is one
and only calls create() when there isn't. Each product handed out is
wrapped in a ProductLease that must be released exactly once; releasing
returns the product to the pool for the next caller.

The find-or-create step runs under a lock so two threads never lease the
same product.
"""

from typing import List, Optional
import logging
import threading

from .factory_method import Creator, Product
from ..shared.errors import OwnershipError, PoolExhaustedError

logger = logging.getLogger(__name__)


class ProductLease:
    """
    Exclusive handle on a pooled product.

    Usage:
        with pool.acquire() as lease:
            lease.product.operation()
    """

    def __init__(self, pool: "PooledCreator", product: Product):
        self._pool = pool
        self._product: Optional[Product] = product
        self.released = False

    @property
    def product(self) -> Product:
        """The leased product. Raises OwnershipError once released."""
        if self.released:
            raise OwnershipError("Lease has already been released")
        return self._product

    def release(self):
        """
        Give the product back to the pool.

        Raises:
            OwnershipError: If the lease was already released
        """
        if self.released:
            raise OwnershipError("Lease has already been released")

        product = self._product
        self.released = True
        self._product = None
        self._pool._return(product)

    def __enter__(self) -> "ProductLease":
        return self

    def __exit__(self, exc_type, exc, tb):
        if not self.released:
            self.release()
        return False


class PooledCreator:
    """
    Find-or-create pool in front of a creator.

    Args:
        creator: Creator used when no idle product is available
        max_size: Most products the pool will ever build
    """

    def __init__(self, creator: Creator, max_size: int = 4):
        if max_size < 1:
            raise ValueError("max_size must be at least 1")

        self.creator = creator
        self.max_size = max_size
        self._idle: List[Product] = []
        self._leased: List[Product] = []
        self._lock = threading.Lock()

    def acquire(self) -> ProductLease:
        """
        Lease a product.

        Returns:
            ProductLease owned by the caller

        Raises:
            PoolExhaustedError: If every pooled product is leased
            ConstructionFailure: If a new product could not be built
        """
        with self._lock:
            if self._idle:
                product = self._idle.pop()
                logger.debug(f"Reusing pooled {type(product).__name__}")
            elif self.size < self.max_size:
                product = self.creator.create()
                logger.debug(f"Pool grew to {self.size + 1} products")
            else:
                raise PoolExhaustedError(
                    f"All {self.max_size} pooled products are leased"
                )
            self._leased.append(product)

        return ProductLease(self, product)

    def _return(self, product: Product):
        with self._lock:
            # identity, not equality
            for i, leased in enumerate(self._leased):
                if leased is product:
                    del self._leased[i]
                    break
            else:
                raise OwnershipError("Product was not leased from this pool")
            self._idle.append(product)

    @property
    def size(self) -> int:
        """Number of products built so far."""
        return len(self._idle) + len(self._leased)

    @property
    def idle_count(self) -> int:
        return len(self._idle)

    @property
    def leased_count(self) -> int:
        return len(self._leased)
