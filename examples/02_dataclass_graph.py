"""
Example 02: Dataclass Graph

This example builds result maps with the fluent DSL, constructs dataclasses
through create_new, and uses an association, a computed property and a
post-processor.
"""

import sqlite3
from dataclasses import dataclass, field
from typing import Optional

from join_map import GraphMapper, MapperOptions, NotFoundError, result_map


@dataclass
class Customer:
    id: Optional[int] = None
    name: Optional[str] = None


@dataclass
class Line:
    id: Optional[int] = None
    product: Optional[str] = None
    price: Optional[float] = None
    quantity: Optional[int] = None


@dataclass
class Order:
    id: Optional[int] = None
    placed: Optional[str] = None
    customer: Optional[Customer] = None
    lines: list = field(default_factory=list)
    total: float = 0.0


def full_name(row, prefix):
    return f"{row[prefix + 'first']} {row[prefix + 'last']}"


def compute_total(order, row):
    order.total = sum(line.price * line.quantity for line in order.lines)


def main():
    conn = sqlite3.connect(":memory:")
    conn.row_factory = sqlite3.Row
    conn.executescript("""
        CREATE TABLE customers (id INTEGER PRIMARY KEY, first TEXT, last TEXT);
        CREATE TABLE orders (id INTEGER PRIMARY KEY, customer_id INTEGER, placed TEXT);
        CREATE TABLE lines (
            id INTEGER PRIMARY KEY, order_id INTEGER, product TEXT, price REAL, quantity INTEGER
        );
        INSERT INTO customers VALUES (1, 'Ada', 'Lovelace');
        INSERT INTO orders VALUES (10, 1, '2024-01-05'), (11, 1, '2024-02-11');
        INSERT INTO lines VALUES
            (1, 10, 'Notebook', 3.5, 4),
            (2, 10, 'Pen', 1.25, 10),
            (3, 11, 'Lamp', 24.0, 1);
    """)

    rows = [
        dict(row)
        for row in conn.execute("""
            SELECT o.id, o.placed,
                   c.id AS customer_id, c.first AS customer_first, c.last AS customer_last,
                   l.id AS line_id, l.product AS line_product,
                   l.price AS line_price, l.quantity AS line_quantity
            FROM orders o
            JOIN customers c ON c.id = o.customer_id
            LEFT JOIN lines l ON l.order_id = o.id
            ORDER BY o.id, l.id
        """)
    ]
    conn.close()

    mapper = GraphMapper(
        [
            result_map("Order")
            .property("placed")
            .association("customer", "Customer", prefix="customer_")
            .collection("lines", "Line", prefix="line_")
            .fn(compute_total)
            .create_new(Order)
            .build(),
            result_map("Customer")
            .property("name", fn=full_name)
            .create_new(Customer)
            .build(),
            result_map("Line")
            .properties("product", "price", "quantity")
            .create_new(Line)
            .build(),
        ],
        "Order",
        options=MapperOptions(skip_null_identities=True),
    )

    print("=== Dataclass Graph ===\n")
    for order in mapper.map_many(rows):
        print(f"Order #{order.id} placed {order.placed} by {order.customer.name}")
        for line in order.lines:
            print(f"  - {line.quantity} x {line.product} @ {line.price:.2f}")
        print(f"  Total: {order.total:.2f}\n")

    try:
        mapper.map_one([])
    except NotFoundError as e:
        print(f"map_one on an empty result set: NotFoundError({e.reason.value})")


if __name__ == "__main__":
    main()
