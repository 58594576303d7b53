"""End-to-end tests of the click CLI against a temporary data directory."""

import json

import pytest
import structlog
from click.testing import CliRunner

from bakery.infrastructure.bootstrap import cart_session, customer_session
from bakery.infrastructure.cli.main import cli


@pytest.fixture(autouse=True)
def fresh_session():
    cart_session().clear()
    customer_session().logout()
    yield
    cart_session().clear()
    customer_session().logout()
    structlog.reset_defaults()


@pytest.fixture
def data_dir(tmp_path):
    (tmp_path / "catalog.json").write_text(json.dumps([
        {"id": "1", "name": "Cupcake", "base_price": "10.00"},
        {"id": "2", "name": "Carrot Cake", "base_price": "20.00", "size": {"name": "M", "price": "5.00"}},
    ]))
    (tmp_path / "customers.json").write_text(json.dumps([
        {"id": 1, "name": "Ana", "area": {"name": "Centro", "fee": "7.50"}},
    ]))
    return tmp_path


def _run(data_dir, *args):
    return CliRunner().invoke(cli, ["--data-dir", str(data_dir), *args])


class TestCli:

    def test_catalog_list(self, data_dir):
        result = _run(data_dir, "catalog", "list")
        assert result.exit_code == 0
        assert "Carrot Cake" in result.output
        assert "R$ 25.00" in result.output

    def test_cart_show(self, data_dir):
        result = _run(data_dir, "cart", "show", "--items", "1:2,2:1,99:1")
        assert result.exit_code == 0
        assert "R$ 45.00" in result.output
        assert "Cupcake" in result.output

    def test_checkout_then_history(self, data_dir):
        result = _run(
            data_dir, "checkout", "--customer", "1", "--mode", "delivery",
            "--notes", "  back door ", "--items", "1:2,2:1",
        )
        assert result.exit_code == 0, result.output
        assert "R$ 52.50" in result.output
        assert "Order #1 placed." in result.output
        assert cart_session().is_empty()

        orders = json.loads((data_dir / "orders.json").read_text())
        assert orders[0]["total"] == "52.50"
        assert orders[0]["notes"] == "back door"

        listing = _run(data_dir, "orders", "list", "--customer", "1")
        assert "DELIVERY" in listing.output
        items = _run(data_dir, "orders", "items", "--id", "1")
        assert "Cupcake" in items.output
        assert "R$ 20.00" in items.output

    def test_checkout_unknown_customer(self, data_dir):
        result = _run(data_dir, "checkout", "--customer", "5", "--mode", "pickup", "--items", "1:1")
        assert result.exit_code == 1
        assert "Customer #5 not found" in result.output

    def test_checkout_invalid_mode(self, data_dir):
        result = _run(data_dir, "checkout", "--customer", "1", "--mode", "drone", "--items", "1:1")
        assert result.exit_code == 1
        assert "Unknown fulfillment mode" in result.output
        assert not cart_session().is_empty()

    def test_checkout_bad_items(self, data_dir):
        result = _run(data_dir, "checkout", "--customer", "1", "--mode", "pickup", "--items", "oops")
        assert result.exit_code == 2

    def test_data_dir_from_environment(self, data_dir):
        result = CliRunner().invoke(cli, ["catalog", "list"], env={"BAKERY_DATA_DIR": str(data_dir)})
        assert result.exit_code == 0
        assert "Cupcake" in result.output

    def test_checkout_with_corrupt_customers_file(self, data_dir):
        (data_dir / "customers.json").write_text("{oops")
        result = _run(data_dir, "checkout", "--customer", "1", "--mode", "pickup", "--items", "1:1")
        assert result.exit_code == 1
        assert "Cannot read customers" in result.output
        assert not (data_dir / "orders.json").read_text().strip("[] \n")
