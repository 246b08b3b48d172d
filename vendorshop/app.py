"""The shop application: a single vendor profile and its interactive menu."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from vendorshop.console import InputReader
from vendorshop.product import Goods, Media, Product
from vendorshop.vendor import Vendor

_MENU = (
    "1. Display Profile\n"
    "2. Modify Password\n"
    "3. Create Product\n"
    "4. Display All Products\n"
    "5. Display Kth Product\n"
    "6. Modify Product\n"
    "7. Sell Product\n"
    "8. Delete Product\n"
    "0. Logout\n"
    "Choice: "
)

_PRODUCT_KINDS: dict[str, type[Product]] = {"media": Media, "goods": Goods}


def _stream(out: TextIO | None) -> TextIO:
    return sys.stdout if out is None else out


class Amazon340:
    """The application, which holds exactly one vendor."""

    def __init__(self) -> None:
        self._vendor = Vendor()

    def __str__(self) -> str:
        return "Welcome to Amazon340!\n"

    @property
    def vendor(self) -> Vendor:
        """A copy of the vendor; products are shared with the original."""
        return self._vendor.copy()

    def create_vendor(
        self,
        username: str,
        email: str,
        password: str,
        bio: str,
        profile_picture: str,
    ) -> None:
        """Replace the vendor with a new one built from the given profile."""
        self._vendor = Vendor(username, email, password, bio, profile_picture)

    def prompt(self, reader: InputReader, out: TextIO | None = None) -> None:
        """Ask for a profile and create the vendor from it."""
        out = _stream(out)
        out.write("To create a new profile, enter your username: ")
        username = reader.word()
        out.write("Enter your email: ")
        email = reader.word()
        out.write("Enter your password: ")
        password = reader.word()
        out.write("Enter your bio: ")
        reader.ignore()
        bio = reader.line()
        out.write("Enter a link to your profile picture: ")
        profile_picture = reader.word()
        self.create_vendor(username, email, password, bio, profile_picture)

    def copy(self) -> Amazon340:
        """Return an application holding a copy of the same vendor."""
        duplicate = Amazon340()
        duplicate._vendor = self._vendor.copy()
        return duplicate


def _create_product(vendor: Vendor, reader: InputReader, out: TextIO) -> None:
    out.write("\nEnter product type in lowercase: ")
    kind = _PRODUCT_KINDS.get(reader.word())
    if kind is None:
        out.write("Accepted product types are 'media' and 'goods'.\n")
        return
    product = kind()
    product.prompt(reader, out)
    vendor.create_product(product)


def _read_index(reader: InputReader, out: TextIO) -> int:
    out.write("\nEnter product index: ")
    return reader.integer()


def display_vendor_menu(
    vendor: Vendor, reader: InputReader, out: TextIO | None = None
) -> None:
    """Run the vendor menu until the vendor chooses to log out."""
    out = _stream(out)
    while True:
        out.write(f"\nHi, {vendor.username}, what would you like to do:\n{_MENU}")
        choice = reader.integer()
        if choice == 1:
            out.write(str(vendor))
        elif choice == 2:
            vendor.prompt_password(reader, out)
        elif choice == 3:
            _create_product(vendor, reader, out)
        elif choice == 4:
            vendor.display_all_products(out)
        elif choice == 5:
            vendor.display_product(_read_index(reader, out), out)
        elif choice == 6:
            vendor.modify_product(_read_index(reader, out), reader, out)
        elif choice == 7:
            index = _read_index(reader, out)
            out.write("Enter amount to sell: ")
            quantity = reader.integer()
            vendor.sell_product(index, quantity, out)
        elif choice == 8:
            vendor.delete_product(_read_index(reader, out), out)
        elif choice == 0:
            out.write("Logging you out.\n")
            return
        else:
            out.write("Invalid choice. Please try again.\n")


def main(argv: list[str] | None = None) -> int:
    """Create a vendor profile from standard input and run the menu."""
    parser = argparse.ArgumentParser(
        prog="vendorshop",
        description="Interactive shop for a single vendor.",
    )
    parser.parse_args(argv)
    out = sys.stdout
    reader = InputReader(sys.stdin)
    amazon = Amazon340()
    out.write(str(amazon))
    try:
        amazon.prompt(reader, out)
        display_vendor_menu(amazon.vendor, reader, out)
    except EOFError:
        out.write("\n")
    return 0