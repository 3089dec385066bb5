import os
import random

import pytest

# Qt tests run without a display.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def seeded_rng():
    """A deterministic random source."""
    return random.Random(1234)
