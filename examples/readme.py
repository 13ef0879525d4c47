"""
fuzzy_string_distance — the README examples.

Run:  python examples/readme.py
"""

from __future__ import annotations

from fuzzy_string_distance import levenshtein_distance, local_levenshtein_distance, process


def main() -> None:
    assert levenshtein_distance("rust", "rusty") == 1  # insert y
    assert levenshtein_distance("bug", "") == 3  # delete all characters
    assert levenshtein_distance("typography", "typpgrapy") == 2  # fix both typos

    assert local_levenshtein_distance("long", "A long sentence") == 0
    assert local_levenshtein_distance("A long sentence", "long") == 11

    products = [
        "Apple iPhone 15 Pro Max",
        "Samsung Galaxy S24 Ultra",
        "Google Pixel 8 Pro",
        "Apple iPad Air M2",
        "Dell XPS 15",
    ]
    for choice, dist, idx in process.extract("iphone pro", products, limit=3):
        print(f"  [{idx}] {choice:<28} distance={dist}")


if __name__ == "__main__":
    main()
