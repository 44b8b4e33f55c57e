import logging
import os
import sys
from unittest.mock import patch

import pytest

# robot keyword libraries are not a package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "robot", "Lib")))

from report_app.main import create_app  # noqa: E402


@pytest.fixture
def deployment_root(tmp_path):
    """Empty deployment root with the WEB-INF/junit directory in place."""
    (tmp_path / "WEB-INF" / "junit").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def report_file(deployment_root):
    return deployment_root / "WEB-INF" / "junit" / "junit.xml"


@pytest.fixture
def app(deployment_root):
    return create_app({"DEPLOYMENT_ROOT": str(deployment_root)})


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def root_logger():
    """Stand-in root logger for tests that replace its handlers."""
    with patch.object(logging, "root", logging.RootLogger(logging.WARNING)) as root:
        yield root
