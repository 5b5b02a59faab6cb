"""SQLAlchemy-backed implementation of OrderRepository.

Orders are stored as a header row plus one child row per item.  The item
collection is treated as a value: ``update`` deletes every stored item
and re-inserts the current ones instead of diffing, all inside a single
transaction.
"""

from __future__ import annotations

import logging

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import NoResultFound
from sqlalchemy.orm import Session, selectinload, sessionmaker

from ordercore.domain.exceptions import OrderNotFoundError
from ordercore.domain.model.order import Order, OrderItem
from ordercore.domain.repository.order_repository import OrderRepository
from ordercore.infrastructure.persistence.models import OrderItemRecord, OrderRecord

logger = logging.getLogger(__name__)


class SqlAlchemyOrderRepository(OrderRepository):

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    # --- OrderRepository interface --------------------------------------------

    def create(self, order: Order) -> None:
        with self._session_factory.begin() as session:
            session.add(self._to_record(order))
        logger.info("Created order %s with %d item(s)", order.id, len(order.items))

    def update(self, order: Order) -> None:
        with self._session_factory.begin() as session:
            # Checked first so foreign-key enforcing backends never reach step 2.
            if session.get(OrderRecord, order.id) is None:
                raise OrderNotFoundError(order.id)
            # 1. drop the stored item set, whatever its size
            session.execute(
                delete(OrderItemRecord)
                .where(OrderItemRecord.order_id == order.id)
                .execution_options(synchronize_session=False)
            )
            # 2. insert the current item set
            session.execute(insert(OrderItemRecord), self._item_rows(order))
            # 3. header fields
            session.execute(
                update(OrderRecord)
                .where(OrderRecord.id == order.id)
                .values(customer_id=order.customer_id, total=order.total)
                .execution_options(synchronize_session=False)
            )
        logger.info("Updated order %s with %d item(s)", order.id, len(order.items))

    def find(self, order_id: str) -> Order:
        stmt = (
            select(OrderRecord)
            .where(OrderRecord.id == order_id)
            .options(selectinload(OrderRecord.items))
        )
        with self._session_factory() as session:
            try:
                record = session.scalars(stmt).one()
            except NoResultFound as exc:
                raise OrderNotFoundError(order_id) from exc
            return self._to_domain(record)

    def find_all(self) -> list[Order]:
        stmt = select(OrderRecord).options(selectinload(OrderRecord.items))
        with self._session_factory() as session:
            return [self._to_domain(record) for record in session.scalars(stmt)]

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _item_rows(order: Order) -> list[dict]:
        return [
            {
                "order_id": order.id,
                "id": item.id,
                "product_id": item.product_id,
                "name": item.name,
                "price": item.price,
                "quantity": item.quantity,
                "position": position,
            }
            for position, item in enumerate(order.items)
        ]

    @classmethod
    def _to_record(cls, order: Order) -> OrderRecord:
        return OrderRecord(
            id=order.id,
            customer_id=order.customer_id,
            total=order.total,
            items=[
                OrderItemRecord(
                    id=row["id"],
                    product_id=row["product_id"],
                    name=row["name"],
                    price=row["price"],
                    quantity=row["quantity"],
                    position=row["position"],
                )
                for row in cls._item_rows(order)
            ],
        )

    @staticmethod
    def _to_domain(record: OrderRecord) -> Order:
        # The Order constructor re-runs every invariant.
        return Order(
            id=record.id,
            customer_id=record.customer_id,
            items=[
                OrderItem(
                    id=item.id,
                    product_id=item.product_id,
                    name=item.name,
                    price=item.price,
                    quantity=item.quantity,
                )
                for item in record.items
            ],
        )
