"""
Local record store models.
"""

from sqlalchemy import Column, Integer, Text, CheckConstraint

from domain.models.database import Base


class Book(Base):
    """Books kept in the cloud-side persistence (my.bookshop.Books)"""

    __tablename__ = "books"

    ID = Column(Integer, primary_key=True, autoincrement=False)
    title = Column(Text, nullable=False)
    stock = Column(Integer, nullable=False, default=0)
    version = Column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    __table_args__ = (CheckConstraint("stock >= 0", name="ck_books_stock_nonneg"),)

    @property
    def etag(self) -> str:
        return f'W/"{self.version}"'

    def __repr__(self) -> str:
        return f"<Book ID={self.ID} title={self.title!r}>"
