# Copyright (c) QuantCo and pydiverse contributors 2025-2025
# SPDX-License-Identifier: BSD-3-Clause

from ._internal.bimap import BiMap
from .version import __version__

__all__ = ["__version__", "BiMap"]
