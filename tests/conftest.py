# Copyright (c) QuantCo and pydiverse contributors 2025-2025
# SPDX-License-Identifier: BSD-3-Clause
import logging

import pytest

from pydiverse.bimap import BiMap
from pydiverse.common.util.structlog import setup_logging

# Setup

setup_logging(log_level=logging.INFO)


# Fixtures


@pytest.fixture
def numbers() -> BiMap[str, int]:
    return BiMap([("one", 1), ("two", 2), ("three", 3)])


@pytest.fixture
def empty() -> BiMap:
    return BiMap()
