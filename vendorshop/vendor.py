"""A vendor's profile and the products they list."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

from vendorshop.console import InputReader
from vendorshop.linked_bag import LinkedBag
from vendorshop.product import Product


def _stream(out: TextIO | None) -> TextIO:
    return sys.stdout if out is None else out


class _Entry:
    """Holds a product in the bag; entries compare by identity."""

    __slots__ = ("product",)

    def __init__(self, product: Product) -> None:
        self.product = product


@dataclass(eq=False)
class Vendor:
    """A vendor profile with a bag of products.

    Product indexes start at 0 with the earliest-added product. Products are
    shared between a vendor and its copies.
    """

    username: str = ""
    email: str = ""
    password: str = field(default="", repr=False)
    bio: str = ""
    profile_picture: str = ""
    _products: LinkedBag[_Entry] = field(
        default_factory=LinkedBag, init=False, repr=False
    )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vendor):
            return NotImplemented
        return self.username == other.username and self.email == other.email

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return (
            f"Username: {self.username}\nEmail: {self.email}"
            f"\nBio: {self.bio}\nProfile Pic: {self.profile_picture}\n"
        )

    @property
    def products(self) -> tuple[Product, ...]:
        """The products in index order."""
        size = len(self._products)
        return tuple(
            self._products.reverse_find_kth(index).product for index in range(size)
        )

    def copy(self) -> Vendor:
        """Return a vendor with the same profile and the same products."""
        duplicate = Vendor(
            self.username, self.email, self.password, self.bio, self.profile_picture
        )
        duplicate._products = self._products.copy()
        return duplicate

    def display_profile(self, out: TextIO | None = None) -> None:
        """Write username, email, bio and picture link, one per line."""
        _stream(out).write(
            f"{self.username}\n{self.email}\n{self.bio}\n{self.profile_picture}\n"
        )

    def modify_password(self, password: str, out: TextIO | None = None) -> bool:
        """Echo ``password``; the stored password is left as it is."""
        _stream(out).write(f"{password}\n")
        return True

    def prompt_password(self, reader: InputReader, out: TextIO | None = None) -> None:
        """Ask for and store a new password."""
        _stream(out).write("\nEnter new password: ")
        self.password = reader.word()

    def create_product(self, product: Product) -> bool:
        """Add ``product`` to this vendor's products."""
        return self._products.append_k(_Entry(product), 0)

    def _find(self, index: int, out: TextIO) -> Product | None:
        size = len(self._products)
        if index >= size:
            out.write(
                "Error: product index out of range, there are only "
                f"{size} products available\n"
            )
            return None
        return self._products.reverse_find_kth(index).product

    def display_product(self, index: int, out: TextIO | None = None) -> None:
        """Write the product at ``index``, or an error if there is none."""
        out = _stream(out)
        product = self._find(index, out)
        if product is not None:
            product.display(out)

    def display_all_products(self, out: TextIO | None = None) -> None:
        """Write every product, each followed by a newline."""
        out = _stream(out)
        for index in range(len(self._products)):
            self.display_product(index, out)
            out.write("\n")

    def modify_product(
        self, index: int, reader: InputReader, out: TextIO | None = None
    ) -> bool:
        """Re-enter the common fields of the product at ``index``."""
        out = _stream(out)
        product = self._find(index, out)
        if product is None:
            return False
        Product.prompt(product, reader, out)
        return True

    def sell_product(self, index: int, quantity: int, out: TextIO | None = None) -> bool:
        """Sell ``quantity`` of the product at ``index``.

        Returns False only when there is no such product.
        """
        out = _stream(out)
        product = self._find(index, out)
        if product is None:
            return False
        product.sell(quantity, out)
        return True

    def delete_product(self, index: int, out: TextIO | None = None) -> bool:
        """Remove the product at ``index``."""
        out = _stream(out)
        product = self._find(index, out)
        if product is None:
            return False
        entry = self._products.reverse_find_kth(index)
        out.write(f"Removing Product: {product.name}")
        self._products.remove(entry)
        return True