pytest_plugins = [
    "tests.fixtures.faker",
    "tests.fixtures.repositories",
    "tests.fixtures.client",
]
