import pytest

import glossa.flattening
import glossa.runtime
from glossa import Source


@pytest.fixture(autouse=True)
def isolated_globals(monkeypatch):
    # Each test gets the default delimiter and an empty default source
    monkeypatch.setattr(glossa.flattening, "_delimiter", glossa.flattening.DEFAULT_DELIMITER)
    monkeypatch.setattr(glossa.runtime, "source", Source())
    monkeypatch.delenv("GLOSSA_DELIMITER", raising=False)
