"""
Example 01: Basic Mapping

This example maps the rows of a one-to-many join onto nested dicts
using result maps declared as plain dictionaries.
"""

import sqlite3

from join_map import map_many, map_one


def main():
    conn = sqlite3.connect(":memory:")
    conn.row_factory = sqlite3.Row
    conn.executescript("""
        CREATE TABLE authors (id INTEGER PRIMARY KEY, name TEXT NOT NULL);
        CREATE TABLE books (
            id INTEGER PRIMARY KEY,
            author_id INTEGER NOT NULL REFERENCES authors(id),
            title TEXT NOT NULL
        );
        INSERT INTO authors VALUES (1, 'Ursula K. Le Guin'), (2, 'Stanislaw Lem');
        INSERT INTO books VALUES
            (1, 1, 'The Dispossessed'),
            (2, 1, 'The Left Hand of Darkness'),
            (3, 2, 'Solaris');
    """)

    rows = [
        dict(row)
        for row in conn.execute("""
            SELECT a.id, a.name, b.id AS book_id, b.title AS book_title
            FROM authors a
            JOIN books b ON b.author_id = a.id
            ORDER BY a.id, b.id
        """)
    ]
    conn.close()

    result_maps = [
        {
            "map_id": "Author",
            "properties": ["name"],
            "collections": [{"name": "books", "map_id": "Book", "column_prefix": "book_"}],
        },
        {"map_id": "Book", "properties": ["title"]},
    ]

    print("=== Basic Mapping ===\n")
    print(f"{len(rows)} rows in\n")

    authors = map_many(rows, result_maps, "Author")
    for author in authors:
        print(f"{author['name']}:")
        for book in author["books"]:
            print(f"  - {book['title']}")
    print()

    # map_one returns the first distinct top-level object
    first = map_one(rows, result_maps, "Author")
    print(f"First author: {first['name']} ({len(first['books'])} books)")


if __name__ == "__main__":
    main()
