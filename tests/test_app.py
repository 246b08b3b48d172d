import io

import pytest

from vendorshop.app import Amazon340, display_vendor_menu, main
from vendorshop.console import InputReader
from vendorshop.product import Goods, Media
from vendorshop.vendor import Vendor


def _reader(text):
    return InputReader(io.StringIO(text))


def _vendor():
    password = "password"
    return Vendor("alice", "alice@example.com", password, "I sell things", "pic.png")


def _run_menu(vendor, text):
    out = io.StringIO()
    display_vendor_menu(vendor, _reader(text), out)
    return out.getvalue()


def test_welcome_message():
    assert str(Amazon340()) == "Welcome to Amazon340!\n"


def test_create_vendor_sets_profile():
    app = Amazon340()
    password = "password"
    app.create_vendor("alice", "alice@example.com", password, "bio", "pic.png")
    vendor = app.vendor
    assert vendor.username == "alice"
    assert vendor.email == "alice@example.com"
    assert vendor.password == "password"
    assert vendor.bio == "bio"
    assert vendor.profile_picture == "pic.png"


def test_vendor_property_returns_copy():
    app = Amazon340()
    password = "password"
    app.create_vendor("alice", "alice@example.com", password, "bio", "pic.png")
    vendor = app.vendor
    vendor.bio = "changed"
    assert app.vendor.bio == "bio"


def test_prompt_reads_profile():
    app = Amazon340()
    out = io.StringIO()
    app.prompt(
        _reader("alice alice@example.com password\nI sell books\npic.png\n"), out
    )
    vendor = app.vendor
    assert vendor.username == "alice"
    assert vendor.email == "alice@example.com"
    assert vendor.password == "password"
    assert vendor.bio == "I sell books"
    assert vendor.profile_picture == "pic.png"
    assert out.getvalue().startswith("To create a new profile, enter your username: ")


def test_copy_is_independent():
    app = Amazon340()
    password = "password"
    app.create_vendor("alice", "alice@example.com", password, "bio", "pic.png")
    duplicate = app.copy()
    app.create_vendor("bob", "bob@example.com", password, "other", "b.png")
    assert duplicate.vendor.username == "alice"
    assert app.vendor.username == "bob"


def test_menu_display_profile_and_logout():
    vendor = _vendor()
    output = _run_menu(vendor, "1\n0\n")
    assert str(vendor) in output
    assert "Hi, alice, what would you like to do:" in output
    assert output.endswith("Logging you out.\n")


def test_menu_modify_password():
    vendor = _vendor()
    _run_menu(vendor, "2\nsecret\n0\n")
    assert vendor.password == "secret"


def test_menu_create_goods():
    vendor = _vendor()
    _run_menu(vendor, "3\ngoods\napple\nfresh fruit\n2025-01-01\n5\n0\n")
    products = vendor.products
    assert len(products) == 1
    goods = products[0]
    assert isinstance(goods, Goods)
    assert goods.name == "apple"
    assert goods.description == "fresh fruit"
    assert goods.expiration_date == "2025-01-01"
    assert goods.quantity == 5


def test_menu_create_media():
    vendor = _vendor()
    _run_menu(vendor, "3\nmedia\nsong\nnice tune\n\nmusic\n\nadults\n0\n")
    media = vendor.products[0]
    assert isinstance(media, Media)
    assert media.name == "song"
    assert media.description == "nice tune"
    assert media.media_type == "music"
    assert media.target_audience == "adults"


def test_menu_rejects_unknown_product_type():
    vendor = _vendor()
    output = _run_menu(vendor, "3\nbooks\n0\n")
    assert "Accepted product types are 'media' and 'goods'.\n" in output
    assert vendor.products == ()


def test_menu_invalid_choice():
    output = _run_menu(_vendor(), "9\n0\n")
    assert "Invalid choice. Please try again.\n" in output


def test_menu_sell_goods():
    vendor = _vendor()
    vendor.create_product(Goods("apple", "fruit", 4, 0, "2025-01-01", 5))
    _run_menu(vendor, "7\n0\n2\n0\n")
    goods = vendor.products[0]
    assert goods.quantity == 3
    assert goods.sold_count == 2


def test_menu_delete_product():
    vendor = _vendor()
    vendor.create_product(Goods("apple", "fruit", 4, 0, "2025-01-01", 5))
    output = _run_menu(vendor, "8\n0\n0\n")
    assert vendor.products == ()
    assert "Removing Product: apple" in output


def test_menu_index_out_of_range():
    output = _run_menu(_vendor(), "5\n3\n0\n")
    assert (
        "Error: product index out of range, there are only 0 products available\n"
        in output
    )


def test_menu_modify_product():
    vendor = _vendor()
    vendor.create_product(Goods("apple", "fruit", 4, 0, "2025-01-01", 5))
    _run_menu(vendor, "6\n0\nbanana\nyellow fruit\n3\n1\n0\n")
    product = vendor.products[0]
    assert product.name == "banana"
    assert product.description == "yellow fruit"
    assert product.rating == 3
    assert product.sold_count == 1


def test_menu_non_integer_choice_raises():
    with pytest.raises(ValueError):
        _run_menu(_vendor(), "abc\n")


def test_main_runs_session(monkeypatch, capsys):
    monkeypatch.setattr(
        "sys.stdin",
        io.StringIO("alice alice@example.com password\nbio text\npic.png\n1\n0\n"),
    )
    assert main([]) == 0
    output = capsys.readouterr().out
    assert output.startswith("Welcome to Amazon340!\n")
    assert "Username: alice\n" in output
    assert output.endswith("Logging you out.\n")


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr(
        "sys.stdin", io.StringIO("alice alice@example.com password\nbio\npic.png\n")
    )
    assert main([]) == 0
    output = capsys.readouterr().out
    assert "Hi, alice, what would you like to do:" in output
    assert "Logging you out." not in output