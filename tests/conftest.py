from __future__ import annotations

import pytest
from PySide6 import QtCore


@pytest.fixture(scope="session")
def qapp() -> QtCore.QCoreApplication:
    app = QtCore.QCoreApplication.instance()
    if app is None:
        app = QtCore.QCoreApplication([])
    return app


@pytest.fixture
def settings_dir(qapp, tmp_path):
    """Send INI settings to a temporary directory."""
    QtCore.QSettings.setPath(
        QtCore.QSettings.Format.IniFormat, QtCore.QSettings.Scope.UserScope, str(tmp_path)
    )
    return tmp_path
