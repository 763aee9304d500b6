"""Tests for the service registry."""

import os
import subprocess
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from snackstore.core.core import Service, Services

SRC_DIR = Path(__file__).resolve().parents[3] / "src"

SERVICE_MODULES = [
    "snackstore.core.modules.access.service",
    "snackstore.core.modules.bulk_inquiry.service",
    "snackstore.core.modules.login_attempt.service",
    "snackstore.core.modules.order.service",
    "snackstore.core.modules.product.service",
    "snackstore.core.modules.seller.service",
    "snackstore.core.modules.session.service",
    "snackstore.core.modules.user.service",
]


@pytest.mark.parametrize("module", SERVICE_MODULES)
def test_service_module_imports_on_its_own(module):
    """Each service module must import cleanly in a fresh interpreter, before core.py is loaded."""
    env = {**os.environ, "PYTHONPATH": os.pathsep.join(filter(None, [str(SRC_DIR), os.environ.get("PYTHONPATH")]))}
    result = subprocess.run([sys.executable, "-c", f"import {module}"], env=env, capture_output=True, text=True)
    assert result.returncode == 0, result.stderr


def test_registry_builds_every_service():
    services = Services(MagicMock())
    for name in ("user", "session", "login_attempt", "seller", "access", "order", "bulk_inquiry", "product"):
        assert isinstance(getattr(services, name), Service)


def test_set_core_reaches_every_service():
    services = Services(MagicMock())
    core = MagicMock()
    services.set_core(core)
    assert services.seller.core is core
    assert services.product.core is core
