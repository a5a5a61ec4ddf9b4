"""On-premise NorthWind product source.

In a real side-by-side extension these calls go through the connectivity proxy
to the on-premise OData service. Here they return fixed records.
"""

from typing import List, Optional
import logging

from domain.schemas import RemoteProduct

logger = logging.getLogger("northwind.remote")

_destination: Optional[str] = None


# ------------------ Connection ------------------
def connect(destination: str):
    """Remember the destination name; no connection is opened by the stand-in."""
    global _destination
    _destination = destination
    logger.info(
        "Remote product source bound to destination %s (stubbed, fixed records)",
        destination,
    )


def close():
    global _destination
    if _destination is not None:
        logger.info("Remote product source released destination %s", _destination)
    _destination = None


def destination() -> Optional[str]:
    return _destination


# ------------------ Reads ------------------
def get_product() -> RemoteProduct:
    """Fetch a single product."""
    product = RemoteProduct(id=1, name="name1", description="description1")
    logger.debug("Fetched remote product %s", product.id)
    return product


def list_products() -> List[RemoteProduct]:
    """Fetch the product list (bulk read)."""
    products = [
        RemoteProduct(id=1, name="name1"),
        RemoteProduct(id=2, name="name2"),
    ]
    logger.debug("Fetched %d remote products", len(products))
    return products
