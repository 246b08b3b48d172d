# vendorshop

A small interactive storefront for one vendor. You set up a vendor profile, then
manage a catalogue of products from a text menu. There are two kinds of product:
media (with a type and a target audience) and goods (with an expiration date and
a stock quantity).

## Installation

```
pip install .
```

## Running

```
vendorshop
```

The program prints `Welcome to Amazon340!`, asks for a username, email,
password, bio and a link to a profile picture, and then shows the vendor menu:

```
1. Display Profile
2. Modify Password
3. Create Product
4. Display All Products
5. Display Kth Product
6. Modify Product
7. Sell Product
8. Delete Product
0. Logout
```

Input is read word by word from standard input; the bio and product
descriptions are read as whole lines. The program ends when you choose `0` or
when input runs out.

- **Create Product**: type `media` or `goods` in lowercase, then answer the
  prompts for that kind of product. Any other word prints the accepted types.
- **Products by index**: products are addressed by index, starting at 0 for the
  first product you created. An index past the end of the catalogue prints an
  error giving the number of products available. Deleting a product moves the
  most recently created product into the deleted one's place, so indexes can
  change after a deletion.
- **Modify Product**: asks again for the product's name, description, rating
  and sold count.
- **Sell Product**: selling goods reduces the stock and raises the sold count;
  if there is not enough stock, the sale is refused with an "out of stock"
  message. Selling media always succeeds, raises the sold count and prints a
  one-time access code.

## Using it as a library

```python
import io
from vendorshop.vendor import Vendor
from vendorshop.product import Goods, Media

password = "password"
vendor = Vendor("ana", "ana@example.com", password, "Hello", "pic.png")
vendor.create_product(Goods("Tea", "Green tea", 5, 0, "2030-01-01", 10))
vendor.create_product(Media("Film", "A movie", 4, 0, "video", "adults"))

out = io.StringIO()
vendor.sell_product(0, 3, out)
vendor.display_all_products(out)
print(out.getvalue())
```

Modules:

- `vendorshop.product`: `Product`, `Media` and `Goods`. Products compare equal
  when their names are equal; `str()` gives the display text.
- `vendorshop.vendor`: `Vendor`, holding the profile and the products, with
  `create_product`, `display_product`, `display_all_products`,
  `modify_product`, `sell_product`, `delete_product` and `prompt_password`.
  Every method that writes takes an optional output stream (standard output by
  default). `Vendor.products` gives the products in index order.
- `vendorshop.linked_bag`: `LinkedBag`, the unordered collection that stores a
  vendor's products.
- `vendorshop.console`: `InputReader`, which reads words, lines and integers
  from a text stream.
- `vendorshop.app`: `Amazon340`, which holds the single vendor,
  `display_vendor_menu`, which runs the menu loop over any `InputReader` and
  output stream, and `main`, the `vendorshop` command.

## What it does not do

- Nothing is saved: the profile and the catalogue exist only while the program
  runs.
- There is one vendor per run, and no login or password check.
- Input that is not a number where a number is expected, or a negative product
  index, stops the program with an error.

## Tests

```
pip install .[test]
pytest
```