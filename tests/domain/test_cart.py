"""Unit tests for the Cart aggregate."""

import random
import threading

import pytest

from bakery.domain.exceptions import ValidationError
from bakery.domain.model.cart import Cart, StrictCartInputPolicy


class TestCartAdd:

    def test_add_creates_line(self):
        cart = Cart()
        cart.add("1", 2)
        assert dict(cart.snapshot()) == {"1": 2}

    def test_add_accumulates(self):
        cart = Cart()
        cart.add("1", 2)
        cart.add("1", 3)
        assert cart.quantity_of("1") == 5

    def test_new_lines_go_to_the_end(self):
        cart = Cart()
        cart.add("2", 1)
        cart.add("1", 1)
        cart.add("2", 4)
        assert list(cart.snapshot()) == ["2", "1"]

    @pytest.mark.parametrize("qty", [0, -1])
    def test_non_positive_quantity_is_ignored(self, qty):
        cart = Cart()
        cart.add("1", 2)
        cart.add("1", qty)
        assert cart.quantity_of("1") == 2

    @pytest.mark.parametrize("product_id", [None, "", "   "])
    def test_missing_product_is_ignored(self, product_id):
        cart = Cart()
        cart.add(product_id, 1)
        assert cart.is_empty()


class TestCartSet:

    def test_set_overwrites(self):
        cart = Cart()
        cart.set("1", 4)
        cart.set("1", 2)
        assert cart.quantity_of("1") == 2

    @pytest.mark.parametrize("qty", [0, -3])
    def test_set_non_positive_removes_line(self, qty):
        cart = Cart()
        cart.add("1", 2)
        cart.set("1", qty)
        assert "1" not in cart
        assert cart.is_empty()

    def test_set_missing_product_is_ignored(self):
        cart = Cart()
        cart.set(None, 3)
        assert len(cart) == 0


class TestCartRemoveAndClear:

    def test_remove_existing(self):
        cart = Cart()
        cart.add("1", 1)
        cart.add("2", 1)
        cart.remove("1")
        assert list(cart.snapshot()) == ["2"]

    def test_remove_absent_is_noop(self):
        cart = Cart()
        cart.add("1", 1)
        cart.remove("9")
        cart.remove(None)
        assert len(cart) == 1

    def test_clear(self):
        cart = Cart()
        cart.add("1", 1)
        cart.add("2", 1)
        cart.clear()
        assert cart.is_empty()


class TestCartSnapshot:

    def test_snapshot_is_read_only(self):
        cart = Cart()
        cart.add("1", 1)
        snap = cart.snapshot()
        with pytest.raises(TypeError):
            snap["1"] = 99  # type: ignore[index]
        assert cart.quantity_of("1") == 1

    def test_snapshot_does_not_follow_later_changes(self):
        cart = Cart()
        cart.add("1", 1)
        snap = cart.snapshot()
        cart.add("2", 1)
        assert dict(snap) == {"1": 1}


class TestCartInvariant:

    def test_random_operations_never_leave_non_positive_quantity(self):
        rng = random.Random(1234)
        cart = Cart()
        for _ in range(2000):
            op = rng.choice(["add", "set", "remove"])
            pid = rng.choice(["1", "2", "3", None])
            qty = rng.randint(-5, 5)
            if op == "add":
                cart.add(pid, qty)
            elif op == "set":
                cart.set(pid, qty)
            else:
                cart.remove(pid)
            assert all(q > 0 for q in cart.snapshot().values())


class TestStrictPolicy:
    """The lenient no-op is a design choice; a strict policy can replace it."""

    def test_strict_add_rejects_zero(self):
        cart = Cart(policy=StrictCartInputPolicy())
        with pytest.raises(ValidationError, match="must be positive"):
            cart.add("1", 0)

    def test_strict_rejects_missing_product(self):
        cart = Cart(policy=StrictCartInputPolicy())
        with pytest.raises(ValidationError, match="Product id is required"):
            cart.set(None, 1)

    def test_strict_set_zero_still_removes(self):
        cart = Cart(policy=StrictCartInputPolicy())
        cart.add("1", 1)
        cart.set("1", 0)
        assert cart.is_empty()


class TestCartConcurrency:

    def test_concurrent_adds_are_not_lost(self):
        cart = Cart()

        def worker():
            for _ in range(500):
                cart.add("1", 1)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert cart.quantity_of("1") == 4000
