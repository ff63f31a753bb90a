# SPDX-FileCopyrightText: 2025-present FileConverter contributors
#
# SPDX-License-Identifier: MIT

"""FileConverter - Path decomposition and media classification helpers."""

from fileconverter.__about__ import __version__

__all__ = ["__version__"]
