"""Integration tests for SqlAlchemyOrderRepository against in-memory SQLite."""

from decimal import Decimal

import pytest
from sqlalchemy import event, func, select
from sqlalchemy.exc import IntegrityError, OperationalError

from ordercore.domain.exceptions import OrderNotFoundError, ValidationError
from ordercore.domain.model.order import Order, OrderItem
from ordercore.infrastructure.persistence.database import (
    build_engine,
    build_session_factory,
    create_schema,
)
from ordercore.infrastructure.persistence.models import OrderItemRecord, OrderRecord
from ordercore.infrastructure.persistence.sqlalchemy_order_repository import (
    SqlAlchemyOrderRepository,
)


@pytest.fixture
def engine():
    engine = build_engine("sqlite://")
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
def repo(session_factory):
    return SqlAlchemyOrderRepository(session_factory)


def _item(item_id: str, product_id: str, price: str, qty: int) -> OrderItem:
    return OrderItem(
        id=item_id, product_id=product_id, name=f"Product {product_id}", price=price, quantity=qty
    )


def _order(order_id: str = "123", customer_id: str = "1234") -> Order:
    return Order(order_id, customer_id, [_item("1", "12345", "10", 2)])


def _item_rows(session_factory, order_id: str) -> list[OrderItemRecord]:
    with session_factory() as session:
        stmt = (
            select(OrderItemRecord)
            .where(OrderItemRecord.order_id == order_id)
            .order_by(OrderItemRecord.position)
        )
        return list(session.scalars(stmt))


def _header(session_factory, order_id: str) -> OrderRecord | None:
    with session_factory() as session:
        return session.get(OrderRecord, order_id)


class TestCreate:

    def test_stores_header_and_items(self, repo, session_factory):
        order = _order()
        repo.create(order)

        header = _header(session_factory, "123")
        assert header.customer_id == "1234"
        assert header.total == Decimal("20")

        rows = _item_rows(session_factory, "123")
        assert [(r.id, r.product_id, r.name, r.price, r.quantity) for r in rows] == [
            ("1", "12345", "Product 12345", Decimal("10"), 2),
        ]

    def test_duplicate_create_fails_and_leaves_original(self, repo, session_factory):
        repo.create(_order())
        with pytest.raises(IntegrityError):
            repo.create(Order("123", "other", [_item("9", "p9", "1", 1)]))

        assert _header(session_factory, "123").customer_id == "1234"
        assert [r.id for r in _item_rows(session_factory, "123")] == ["1"]

    def test_duplicate_item_ids_fail_and_store_nothing(self, repo, session_factory):
        order = Order("55", "c", [_item("1", "p1", "1", 1), _item("1", "p2", "1", 1)])
        with pytest.raises(IntegrityError):
            repo.create(order)

        assert _header(session_factory, "55") is None
        assert _item_rows(session_factory, "55") == []


class TestFind:

    def test_round_trip(self, repo):
        order = Order("123", "1234", [
            _item("1", "12345", "10", 2),
            _item("2", "1234567", "20.50", 3),
        ])
        repo.create(order)

        found = repo.find("123")

        assert found == order
        assert found.total == order.total

    def test_cent_prices_round_trip_exactly(self, repo):
        order = Order("123", "1234", [_item("1", "p1", "0.33", 3), _item("2", "p2", "19.99", 1)])
        repo.create(order)

        found = repo.find("123")

        assert found == order
        assert found.total == Decimal("20.98")

    def test_sub_cent_price_never_reaches_storage(self, repo):
        with pytest.raises(ValidationError, match="more than 2 decimal places"):
            Order("123", "1234", [_item("1", "p1", "0.333", 3)])
        assert repo.find_all() == []

    def test_item_order_is_preserved(self, repo):
        order = Order("1", "c1", [_item("b", "p1", "1", 1), _item("a", "p2", "1", 1)])
        repo.create(order)
        assert [item.id for item in repo.find("1").items] == ["b", "a"]

    def test_not_found(self, repo):
        with pytest.raises(OrderNotFoundError, match="Order not found") as exc_info:
            repo.find("456ABC")
        assert exc_info.value.order_id == "456ABC"

    def test_other_storage_errors_propagate(self, repo, engine):
        with engine.begin() as conn:
            OrderItemRecord.__table__.drop(conn)
            OrderRecord.__table__.drop(conn)
        with pytest.raises(OperationalError):
            repo.find("123")


class TestFindAll:

    def test_returns_every_order(self, repo):
        order1 = _order("123", "1234")
        order2 = Order("12345678", "123456", [_item("2", "1234567", "10", 2)])
        repo.create(order1)
        repo.create(order2)

        orders = repo.find_all()

        assert len(orders) == 2
        assert order1 in orders
        assert order2 in orders

    def test_empty(self, repo):
        assert repo.find_all() == []


class TestUpdate:

    def test_change_customer(self, repo, session_factory):
        order = _order()
        repo.create(order)

        order.change_customer("123456")
        repo.update(order)

        assert _header(session_factory, "123").customer_id == "123456"
        assert repo.find("123") == order

    def test_scenario_replace_items(self, repo, session_factory):
        order = _order()
        repo.create(order)
        assert order.total == Decimal("20")

        order.change_items([_item("1", "12345", "10", 2), _item("2", "1234567", "20", 3)])
        repo.update(order)

        assert _header(session_factory, "123").total == Decimal("80")
        found = repo.find("123")
        assert len(found.items) == 2
        assert found == order

    def test_shrinking_item_set_removes_stale_rows(self, repo, session_factory):
        order = Order("123", "1234", [_item("1", "p1", "10", 1), _item("2", "p2", "10", 1)])
        repo.create(order)

        order.change_items([_item("3", "p3", "5", 4)])
        repo.update(order)

        assert [r.id for r in _item_rows(session_factory, "123")] == ["3"]
        assert _header(session_factory, "123").total == Decimal("20")

    def test_update_twice_does_not_duplicate_items(self, repo, session_factory):
        order = _order()
        repo.create(order)
        order.change_items([_item("1", "12345", "10", 2), _item("2", "1234567", "20", 3)])

        repo.update(order)
        repo.update(order)

        with session_factory() as session:
            count = session.scalar(select(func.count()).select_from(OrderItemRecord))
        assert count == 2
        assert _header(session_factory, "123").total == Decimal("80")

    def test_failed_insert_rolls_back_delete(self, repo, session_factory):
        order = _order()
        repo.create(order)

        # Same item id twice violates the (order_id, id) primary key in step 2.
        order.change_items([_item("1", "p1", "1", 1), _item("1", "p2", "1", 1)])
        with pytest.raises(IntegrityError):
            repo.update(order)

        assert repo.find("123") == _order()

    def test_unknown_order_rolls_back_and_leaves_no_orphans(self, repo, session_factory):
        with pytest.raises(OrderNotFoundError):
            repo.update(_order("999"))

        assert _item_rows(session_factory, "999") == []
        assert _header(session_factory, "999") is None

    def test_other_orders_untouched(self, repo):
        other = _order("777", "c7")
        repo.create(other)
        order = _order()
        repo.create(order)

        order.change_items([_item("5", "p5", "3", 3)])
        repo.update(order)

        assert repo.find("777") == other


class TestForeignKeysEnforced:

    @pytest.fixture
    def engine(self):
        engine = build_engine("sqlite://")

        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        create_schema(engine)
        yield engine
        engine.dispose()

    def test_update_of_unknown_order_reports_not_found(self, repo, session_factory):
        with pytest.raises(OrderNotFoundError, match="Order not found"):
            repo.update(_order("999"))

        assert _item_rows(session_factory, "999") == []

    def test_update_of_existing_order(self, repo):
        order = _order()
        repo.create(order)
        order.change_items([_item("2", "p2", "5", 1)])
        repo.update(order)

        assert repo.find("123") == order
