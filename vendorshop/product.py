"""Products a vendor can list: plain products, media and goods."""

from __future__ import annotations

import copy as _copy
import sys
from dataclasses import dataclass
from typing import TextIO

from vendorshop.console import InputReader


def _stream(out: TextIO | None) -> TextIO:
    return sys.stdout if out is None else out


@dataclass(eq=False)
class Product:
    """A product with a name, description, rating and count of units sold.

    Two products are equal when their names are equal.
    """

    name: str = ""
    description: str = ""
    rating: int = 0
    sold_count: int = 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return self.name == other.name

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return (
            f"Name: {self.name}\nDescription: {self.description}"
            f"\nRating: {self.rating}\nSold Count: {self.sold_count}\n"
        )

    def display(self, out: TextIO | None = None) -> None:
        """Write the common product fields."""
        _stream(out).write(Product.__str__(self))

    def modify(self, reader: InputReader, out: TextIO | None = None) -> bool:
        """Ask for a new name and description."""
        out = _stream(out)
        out.write("Enter a new name for this product: ")
        self.name = reader.word()
        out.write("Enter a new description for this product: ")
        reader.ignore()
        self.description = reader.line()
        return True

    def sell(self, quantity: int, out: TextIO | None = None) -> bool:
        """A plain product cannot be sold."""
        return False

    def prompt(self, reader: InputReader, out: TextIO | None = None) -> None:
        """Ask for name, description, rating and sold count."""
        out = _stream(out)
        out.write("Enter product name: ")
        self.name = reader.word()
        out.write("Enter product description: ")
        reader.ignore()
        self.description = reader.line()
        out.write("Enter product rating: ")
        self.rating = reader.integer()
        out.write("Enter sold count: ")
        self.sold_count = reader.integer()

    def copy(self) -> Product:
        """Return an independent copy of the same kind of product."""
        return _copy.copy(self)


@dataclass(eq=False)
class Media(Product):
    """A digital product sold by handing out access codes."""

    media_type: str = ""
    target_audience: str = ""

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return (
            f"Name: {self.name}\nDescription: {self.description}"
            f"\nRating: {self.rating}\nSold Count: {self.sold_count}"
            f"\nTarget Audience:{self.target_audience}\nType: {self.media_type}"
        )

    def sell(self, quantity: int, out: TextIO | None = None) -> bool:
        """Record the sale and write an access code; always succeeds."""
        self.sold_count += quantity
        _stream(out).write(f"One time access code: {id(self):#x}")
        return True

    def prompt(self, reader: InputReader, out: TextIO | None = None) -> None:
        """Ask for name, description, media type and target audience.

        One character is skipped before each of the last three lines.
        """
        out = _stream(out)
        out.write("Enter product name: ")
        self.name = reader.word()
        out.write("Enter product description: ")
        reader.ignore()
        self.description = reader.line()
        out.write("Enter product media type: ")
        reader.ignore()
        self.media_type = reader.line()
        out.write("Enter product target audience: ")
        reader.ignore()
        self.target_audience = reader.line()


@dataclass(eq=False)
class Goods(Product):
    """A physical product with a stock quantity and an expiration date."""

    expiration_date: str = ""
    quantity: int = 0

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return (
            f"Name: {self.name}\nDescription: {self.description}"
            f"\nRating: {self.rating}\nSold Count: {self.sold_count}"
            f"\nQuantity:{self.quantity}\nExpiration Date: {self.expiration_date}"
        )

    def sell(self, quantity: int, out: TextIO | None = None) -> bool:
        """Take ``quantity`` units from stock if there are enough."""
        if self.quantity >= quantity:
            self.quantity -= quantity
            self.sold_count += quantity
            return True
        _stream(out).write("This product is out of stock.\n")
        return False

    def prompt(self, reader: InputReader, out: TextIO | None = None) -> None:
        """Ask for name, description, expiration date and quantity."""
        out = _stream(out)
        out.write("Enter product name: ")
        self.name = reader.word()
        out.write("Enter product description: ")
        reader.ignore()
        self.description = reader.line()
        out.write("Enter product expiration date:")
        self.expiration_date = reader.word()
        out.write("Enter product quantity: ")
        self.quantity = reader.integer()