pytest_plugins = ["ginclient.testing.conftest"]
