"""Tests for the CSV-backed repositories."""

import logging
from decimal import Decimal
from pathlib import Path

import pytest

from grocery_store import open_repositories
from grocery_store.config import DataFilesConfig
from grocery_store.exceptions import (
    DataFileError,
    InvalidEntityStateError,
    InvalidProductNameError,
    ReferentialIntegrityError,
)
from grocery_store.models import Customer, FulfillmentStatus, Order
from grocery_store.store import CustomerRepository, OrderRepository


def _order_tuples(repo: OrderRepository) -> set[tuple]:
    return {
        (o.order_id, tuple(sorted(o.products.items())), o.customer_id, o.fulfillment_status)
        for o in repo.all()
    }


class TestCustomerRepository:
    """Tests for CustomerRepository."""

    def test_all_returns_every_customer(self, customers: CustomerRepository) -> None:
        result = customers.all()

        assert len(result) == 35
        assert all(isinstance(c, Customer) for c in result)
        assert [c.customer_id for c in result] == list(range(1, 36))

    def test_find_returns_customer(self, customers: CustomerRepository) -> None:
        customer = customers.find(1)

        assert customer is not None
        assert customer.customer_id == 1
        assert customer.email == "omar.1@example.com"
        assert customer.address.street == "117 Oak St"
        assert customer.address.city == "Eugene"
        assert customer.address.state == "OR"
        assert customer.address.zip == "97131"

    def test_find_returns_none_for_unknown_id(self, customers: CustomerRepository) -> None:
        assert customers.find(500) is None

    def test_loads_once(self, customers: CustomerRepository) -> None:
        first = customers.find(2)
        assert customers.find(2) is first

    def test_missing_file(self, tmp_path: Path) -> None:
        repo = CustomerRepository(tmp_path / "nope.csv")
        with pytest.raises(DataFileError, match="not found"):
            repo.all()

    def test_missing_columns(self, tmp_path: Path) -> None:
        path = tmp_path / "customers.csv"
        path.write_text("id,email\n1,a@a.co\n", encoding="utf-8")

        with pytest.raises(DataFileError, match="street"):
            CustomerRepository(path).all()

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "customers.csv"
        path.write_text("", encoding="utf-8")

        with pytest.raises(DataFileError, match="header"):
            CustomerRepository(path).all()

    def test_duplicate_customer_id(self, tmp_path: Path) -> None:
        path = tmp_path / "customers.csv"
        path.write_text(
            "id,email,street,city,state,zip\n"
            "1,a@a.co,1 Main,Seattle,WA,98101\n"
            "1,b@b.co,2 Main,Seattle,WA,98101\n",
            encoding="utf-8",
        )

        with pytest.raises(DataFileError, match="duplicate customer id 1"):
            CustomerRepository(path).all()

    def test_blank_email_is_reported_with_location(self, tmp_path: Path) -> None:
        path = tmp_path / "customers.csv"
        path.write_text(
            "id,email,street,city,state,zip\n1,,1 Main,Seattle,WA,98101\n",
            encoding="utf-8",
        )

        with pytest.raises(DataFileError, match=r"customers\.csv:2"):
            CustomerRepository(path).all()

    def test_extra_field_is_reported_by_repository(self, tmp_path: Path) -> None:
        path = tmp_path / "customers.csv"
        path.write_text(
            "id,email,street,city,state,zip\n1,a@a.co,1 Main,Seattle,WA,98101,EXTRA\n",
            encoding="utf-8",
        )

        with pytest.raises(DataFileError, match="more fields than header"):
            CustomerRepository(path).all()

    def test_reload_rereads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "customers.csv"
        path.write_text("id,email,street,city,state,zip\n1,a@a.co,1 Main,Seattle,WA,98101\n", encoding="utf-8")
        repo = CustomerRepository(path)
        assert len(repo) == 1

        with path.open("a", encoding="utf-8") as handle:
            handle.write("2,b@b.co,2 Main,Seattle,WA,98101\n")
        assert len(repo) == 1

        repo.reload()
        assert len(repo) == 2


class TestOrderRepositoryAll:
    """Tests for OrderRepository.all."""

    def test_returns_all_orders(self, orders: OrderRepository) -> None:
        result = orders.all()

        assert len(result) == 100
        for order in result:
            assert isinstance(order, Order)
            assert isinstance(order.order_id, int)
            assert isinstance(order.products, dict)
            assert isinstance(order.customer, Customer)
            assert isinstance(order.fulfillment_status, FulfillmentStatus)

    def test_first_order(self, orders: OrderRepository) -> None:
        order = orders.all()[0]

        assert order.order_id == 1
        assert order.products == {
            "Lobster": Decimal("17.18"),
            "Annatto seed": Decimal("58.38"),
            "Camomile": Decimal("83.21"),
        }
        assert order.customer.customer_id == 25
        assert order.fulfillment_status is FulfillmentStatus.COMPLETE

    def test_last_order(self, orders: OrderRepository) -> None:
        order = orders.all()[-1]

        assert order.order_id == 100
        assert order.products == {
            "Amaranth": Decimal("83.81"),
            "Smoked Trout": Decimal("70.6"),
            "Cheddar": Decimal("5.63"),
        }
        assert order.customer.customer_id == 20
        assert order.fulfillment_status is FulfillmentStatus.PENDING

    def test_customers_are_shared_with_customer_repository(
        self, orders: OrderRepository, customers: CustomerRepository
    ) -> None:
        assert orders.all()[0].customer is customers.find(25)

    def test_summary(self, orders: OrderRepository) -> None:
        assert orders.summary() == {"orders": 100, "product_lines": 251}

    def test_logs_load(self, orders: OrderRepository, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="grocery_store"):
            orders.all()

        assert "Loaded 100 orders (251 rows)" in caplog.text

    def test_unknown_customer(self, tmp_path: Path, customers: CustomerRepository) -> None:
        path = tmp_path / "orders.csv"
        path.write_text(
            "id,product_name,product_price,customer_id,fulfillment_status\n1,Kale,2.50,999,paid\n",
            encoding="utf-8",
        )

        with pytest.raises(ReferentialIntegrityError, match="unknown customer 999"):
            OrderRepository(path, customers).all()

    def test_unknown_status(self, tmp_path: Path, customers: CustomerRepository) -> None:
        path = tmp_path / "orders.csv"
        path.write_text(
            "id,product_name,product_price,customer_id,fulfillment_status\n1,Kale,2.50,1,lost\n",
            encoding="utf-8",
        )

        with pytest.raises(DataFileError, match="lost"):
            OrderRepository(path, customers).all()


class TestOrderRepositoryFind:
    """Tests for OrderRepository.find."""

    def test_find_first_order(self, orders: OrderRepository) -> None:
        first = orders.find(1)

        assert isinstance(first, Order)
        assert first.order_id == 1

    def test_find_last_order(self, orders: OrderRepository) -> None:
        last = orders.find(100)

        assert isinstance(last, Order)
        assert last.order_id == 100

    def test_find_missing_order(self, orders: OrderRepository) -> None:
        assert orders.find(53145) is None


class TestOrderRepositoryFindByCustomer:
    """Tests for OrderRepository.find_by_customer."""

    def test_multiple_orders(self, orders: OrderRepository) -> None:
        result = orders.find_by_customer(30)

        assert [o.order_id for o in result] == [50, 60, 64]
        assert result[2].products == {
            "Polenta": Decimal("53.62"),
            "Cacao": Decimal("59.06"),
            "Hokkien Noodles": Decimal("10.06"),
            "Cumquat": Decimal("24.09"),
        }

    def test_single_order(self, orders: OrderRepository) -> None:
        result = orders.find_by_customer(1)

        assert len(result) == 1
        assert result[0].order_id == 19
        assert result[0].products == {"Wholewheat flour": Decimal("0.95")}

    def test_no_orders(self, orders: OrderRepository) -> None:
        assert orders.find_by_customer(500) == []


class TestOrderRepositoryMutation:
    """Tests for add, in-place mutation and reload."""

    def test_mutations_are_visible_through_repository(self, orders: OrderRepository) -> None:
        orders.find(1).add_product("Kale", "2.50")

        assert "Kale" in orders.find(1).products

    def test_add_new_order(self, orders: OrderRepository, customers: CustomerRepository) -> None:
        order = Order(101, {"Kale": 2.5}, customers.find(1), FulfillmentStatus.PAID)
        orders.add(order)

        assert orders.find(101) is order
        assert [o.order_id for o in orders.find_by_customer(1)] == [19, 101]
        assert len(orders) == 101

    def test_add_duplicate_id(self, orders: OrderRepository, customers: CustomerRepository) -> None:
        with pytest.raises(InvalidEntityStateError, match="already exists"):
            orders.add(Order(1, {}, customers.find(1)))

    def test_add_unknown_customer(self, orders: OrderRepository, customer: Customer) -> None:
        with pytest.raises(ReferentialIntegrityError):
            orders.add(Order(101, {}, customer))

    def test_reload_discards_mutations(self, orders: OrderRepository) -> None:
        orders.find(1).remove_product("Lobster")
        orders.reload()

        assert "Lobster" in orders.find(1).products


class TestOrderRepositorySave:
    """Tests for OrderRepository.save."""

    def test_file_is_created(self, orders: OrderRepository, tmp_path: Path) -> None:
        filename = tmp_path / "out" / "all_orders.csv"
        orders.all()

        orders.save(filename)

        assert filename.exists()

    def test_one_row_per_product(self, orders: OrderRepository, tmp_path: Path) -> None:
        filename = orders.save(tmp_path / "all_orders.csv")
        lines = filename.read_text(encoding="utf-8").splitlines()

        assert lines[0] == "id,product_name,product_price,customer_id,fulfillment_status"
        assert len(lines) == 1 + 251
        assert lines[1:4] == [
            "1,Lobster,17.18,25,complete",
            "1,Annatto seed,58.38,25,complete",
            "1,Camomile,83.21,25,complete",
        ]

    def test_round_trip(
        self, orders: OrderRepository, customers: CustomerRepository, tmp_path: Path
    ) -> None:
        filename = orders.save(tmp_path / "all_orders.csv")
        reloaded = OrderRepository(filename, customers)

        assert _order_tuples(reloaded) == _order_tuples(orders)

    def test_round_trip_keeps_mutations_and_empty_orders(
        self, orders: OrderRepository, customers: CustomerRepository, tmp_path: Path
    ) -> None:
        orders.find(19).remove_product("Wholewheat flour")
        orders.find(50).add_product("Miso", 6.4)
        orders.add(Order(200, {}, customers.find(3), FulfillmentStatus.SHIPPED))

        filename = orders.save(tmp_path / "all_orders.csv")
        reloaded = OrderRepository(filename, customers)

        assert _order_tuples(reloaded) == _order_tuples(orders)
        assert reloaded.find(19).products == {}
        assert reloaded.find(50).products["Miso"] == Decimal("6.4")
        assert reloaded.find(200).fulfillment_status is FulfillmentStatus.SHIPPED

    def test_round_trip_after_rejected_names(
        self, orders: OrderRepository, customers: CustomerRepository, tmp_path: Path
    ) -> None:
        first = orders.find(1)
        with pytest.raises(InvalidProductNameError):
            first.add_product(" Kale", 1)
        with pytest.raises(InvalidProductNameError):
            orders.find(2).add_product("", 1)
        first.add_product("Kale", 2)
        first.add_product('Salt, "flaky"', "3.25")

        reloaded = OrderRepository(orders.save(tmp_path / "all_orders.csv"), customers)

        assert _order_tuples(reloaded) == _order_tuples(orders)
        assert reloaded.find(1).products["Kale"] == Decimal("2")
        assert reloaded.find(1).products['Salt, "flaky"'] == Decimal("3.25")


class TestOpenRepositories:
    """Tests for the open_repositories helper."""

    def test_uses_configured_paths(self, data_dir: Path) -> None:
        customers, orders = open_repositories(DataFilesConfig(data_dir=data_dir))

        assert customers.source == data_dir / "customers.csv"
        assert orders.customers is customers
        assert len(orders) == 100
