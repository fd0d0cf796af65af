from pathlib import Path

import pytest

from redblack import Node, RedBlackTree

# the key sequence the black-height of 4 was first checked against.
# repeated keys are rejected on insert
STATIC_KEYS = [
    26, 13, 53, 93, 97, 57, 60, 65, 39, 44, 28, 17, 22, 2, 93, 25, 2, 24, 5, 25, 20, 73,
    4, 89, 27, 60, 48, 20, 62, 22, 92, 14, 52, 90, 36, 6, 50, 44, 68, 2, 89, 87, 64, 19,
    92, 82, 76, 49, 59, 64, 62, 19, 3, 71, 85, 69, 56, 59, 74, 44, 57, 56, 96, 94,
]


def pytest_addoption(parser):
    parser.addoption("--benchmark", action="store_true", default=False, help="run benchmark tests")


def pytest_configure(config):
    config.addinivalue_line("markers", "benchmark: mark benchmark tests")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--benchmark"):
        return
    benchmark_skip_marker = pytest.mark.skip(reason="use --benchmark marker to run")
    for item in items:
        filename = Path(str(item.fspath)).name
        if "benchmark" in item.keywords or filename.startswith('test_benchmark'):
            item.add_marker(benchmark_skip_marker)


@pytest.fixture
def make_tree():
    def build(keys, tree_class=RedBlackTree):
        tree = tree_class()
        for key in keys:
            tree.insert(Node(key, f"value-{key}"))
        return tree
    return build


@pytest.fixture
def static_tree(make_tree):
    yield make_tree(STATIC_KEYS)


@pytest.fixture
def static_keys():
    yield list(STATIC_KEYS)
