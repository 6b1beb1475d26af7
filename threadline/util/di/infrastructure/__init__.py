"""Infrastructure providers."""

# Import bases
from .persistence import PersistenceProvider
from .revalidation import RevalidationProvider

# Import implementations (needed for __subclasses__())
from .persistence import ProdPersistenceProvider  # noqa: F401
from .revalidation import ProdRevalidationProvider  # noqa: F401

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
    "ProdRevalidationProvider",
    "RevalidationProvider",
]
