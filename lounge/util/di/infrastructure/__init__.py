"""Infrastructure providers.

The production persistence provider is imported here so that
``PersistenceProvider.__subclasses__()`` finds it.
"""

from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = ["PersistenceProvider", "ProdPersistenceProvider"]
