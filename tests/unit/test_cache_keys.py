"""Unit tests for cache key generation."""

from news_api.application.services import generate_key


def test_key_starts_with_prefix():
    assert generate_key("news:", {"page": 1}).startswith("news:")


def test_parameter_order_does_not_matter():
    first = generate_key("news:", {"page": 1, "limit": 10, "search": "go"})
    second = generate_key("news:", {"search": "go", "limit": 10, "page": 1})
    assert first == second


def test_none_values_are_omitted():
    assert generate_key("news:", {"page": 1, "search": None}) == generate_key(
        "news:", {"page": 1}
    )


def test_different_values_give_different_keys():
    keys = {
        generate_key("news:", {"page": 1, "limit": 10}),
        generate_key("news:", {"page": 2, "limit": 10}),
        generate_key("news:", {"page": 1, "limit": 20}),
        generate_key("news:", {"page": 1, "limit": 10, "search": "x"}),
        generate_key("news:", {"page": 1, "limit": 10, "author": "x"}),
    }
    assert len(keys) == 5


def test_value_types_are_kept_apart():
    assert generate_key("news:", {"page": 1}) != generate_key("news:", {"page": "1"})


def test_prefix_partitions_key_space():
    params = {"page": 1}
    assert generate_key("news:", params) != generate_key("events:", params)


def test_empty_params():
    assert generate_key("news:", {}) == generate_key("news:", {"search": None})
