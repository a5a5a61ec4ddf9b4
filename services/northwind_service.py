"""
NorthWindService read handlers.

Each handler blends products from the on-premise source with books from the
local store. Handlers are registered by entity set in ``HANDLERS`` and invoked
through ``NorthwindService.dispatch``.
"""

from typing import Callable, Dict, List
import logging

from sqlalchemy.exc import MultipleResultsFound, NoResultFound
from sqlalchemy.orm import Session

from adapters import northwind_adapter
from app.exceptions import NonUniqueResultError, NotFoundError
from domain.enums import EntitySet
from domain.schemas import CustomProduct, MixinProduct, Product, ReadContext
from repositories import BookRepository

logger = logging.getLogger("northwind.service")


class NorthwindService:
    @staticmethod
    def read_products(db: Session, context: ReadContext) -> List[Product]:
        """Return the on-premise product as a single Products record."""
        remote = northwind_adapter.get_product()
        return [Product.from_remote(remote)]

    @staticmethod
    def read_mixin_products(db: Session, context: ReadContext) -> List[MixinProduct]:
        """
        Return the on-premise product enriched with the title of the book that
        has the same ID.

        Raises:
            NotFoundError: If no book has the product's ID
            NonUniqueResultError: If more than one book matches
        """
        remote = northwind_adapter.get_product()

        book_repo = BookRepository(db)
        try:
            book = book_repo.get_single_by_id(remote.id)
        except NoResultFound:
            logger.warning("No book found for product %s", remote.id)
            raise NotFoundError(
                f"Book not found for product {remote.id}",
                details={"product_id": remote.id},
            )
        except MultipleResultsFound:
            logger.warning("Several books found for product %s", remote.id)
            raise NonUniqueResultError(
                f"More than one book found for product {remote.id}",
                details={"product_id": remote.id},
            )

        return [MixinProduct.from_remote(remote, book.title)]

    @staticmethod
    def read_custom_products(db: Session, context: ReadContext) -> List[CustomProduct]:
        """
        Return every on-premise product, each with the title of its book when
        one exists (left outer join on ID).

        Books are fetched with one query for all product IDs and indexed by ID
        for the merge. Output order follows the on-premise product list.
        """
        remotes = northwind_adapter.list_products()

        book_repo = BookRepository(db)
        books = book_repo.get_titles_by_ids(p.id for p in remotes)
        books_by_id = {book.ID: book for book in books}

        return [CustomProduct.from_remote(p, books_by_id.get(p.id)) for p in remotes]

    @staticmethod
    def dispatch(db: Session, context: ReadContext) -> list:
        """Invoke the handler registered for ``context.entity_set``."""
        handler = HANDLERS.get(context.entity_set)
        if handler is None:
            raise NotFoundError(
                f"Entity set not found: {context.entity_set}",
                details={"available": sorted(HANDLERS)},
            )
        records = handler(db, context)
        logger.info(
            "Read %s returned %d record(s)",
            context.entity_set,
            len(records),
            extra={"request_id": context.request_id},
        )
        return records


HANDLERS: Dict[str, Callable[[Session, ReadContext], list]] = {
    EntitySet.PRODUCTS.value: NorthwindService.read_products,
    EntitySet.MIXIN_PRODUCTS.value: NorthwindService.read_mixin_products,
    EntitySet.CUSTOM_PRODUCTS.value: NorthwindService.read_custom_products,
}
