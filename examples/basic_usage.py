"""
Basic usage examples for lazyiter.

This walks through the core functionality of the lazy sequence library.
"""

from lazyiter import fp, from_opener, seq_range, set_single_shot_policy, wrap

FOLDERS = {
    "name": "root",
    "content": [
        {"name": "system", "content": [{"name": "kernel", "size": 20}]},
        {
            "name": "documents",
            "content": [
                {"name": "photo1", "size": 50},
                {"name": "letter", "size": 5},
            ],
        },
        {"name": "photo editor", "size": 78},
    ],
}


def example_map_filter():
    """Example: Chaining transformations."""
    print("=== Map and Filter Example ===")

    numbers = wrap([5, 6, 7, 8])
    print(f"Plus one: {numbers.map(lambda x: x + 1).to_list()}")
    print(f"Greater than 6: {numbers.filter(lambda x: x > 6).to_list()}")

    # Nothing runs until a terminal operation pulls
    result = seq_range(0, 100_000).filter(lambda x: x % 2 == 0).map(lambda x: x * x).take(3).to_list()
    print(f"First three even squares: {result}")


def example_sorting():
    """Example: Sorting, distinct and reverse."""
    print("\n=== Sorting Example ===")

    data = wrap([5, 3, 3, 10, 5])
    print(f"Distinct: {data.distinct().to_list()}")
    print(f"Sorted descending: {data.sort(lambda a, b: b - a).to_list()}")
    print(f"Reversed: {data.reverse().to_list()}")


def example_orders():
    """Example: Grouping and aggregating records."""
    print("\n=== Orders Example ===")

    orders = wrap(
        [
            {"customer": "Peter", "total": 120},
            {"customer": "Jane", "total": 35},
            {"customer": "Peter", "total": 14},
            {"customer": "Paul", "total": 80},
        ]
    )

    for customer, items in orders.group_by(lambda o: o["customer"]):
        print(f"{customer}: {items.sum(lambda o: o['total'])}")

    big = orders.filter(lambda o: o["total"] > 50).map(lambda o: o["customer"])
    print(f"Customers with big orders: {big.distinct().to_separated_string()}")


def example_nested():
    """Example: Walking a folder tree."""
    print("\n=== Nested Structure Example ===")

    tree = wrap([FOLDERS])
    total = tree.flatten(lambda n, level: n.get("content")).sum(lambda n: n.get("size", 0))
    print(f"Total size: {total}")

    listing = tree.flatten_map(lambda n, level: n.get("content"), lambda n, level: "  " * level + n["name"])
    listing.for_each(print)


def example_generators():
    """Example: Restartable and single-shot sources."""
    print("\n=== Generator Example ===")

    def lines():
        yield from ("alpha", "beta", "gamma")

    # A generator function is called again on every traversal
    seq = from_opener(lines).map(str.upper)
    print(f"Twice: {seq.to_list()} {seq.to_list()}")

    # A generator object can only be traversed once
    set_single_shot_policy("empty")
    once = wrap(line for line in lines())
    print(f"Once: {once.length()}, again: {once.length()}")
    set_single_shot_policy("raise")


def example_pipe():
    """Example: The pipe-style API."""
    print("\n=== Pipe Example ===")

    result = fp.pipe(
        range(20),
        fp.filter(lambda x: x % 3 == 0),
        fp.map(lambda x: x * 10),
        fp.to_list,
    )
    print(f"Multiples of three times ten: {result}")

    # You can also set the default separator via environment variable:
    # export LAZYITER_SEPARATOR=" | "


def main():
    """Run all examples."""
    print("lazyiter - Lazy sequences for Python\n")

    example_map_filter()
    example_sorting()
    example_orders()
    example_nested()
    example_generators()
    example_pipe()

    print("\n=== All Examples Complete ===")


if __name__ == "__main__":
    main()
