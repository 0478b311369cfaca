# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Centralized version patterns and remediation targets for CVE-2025-55182."""

import re

CVE_ID = "CVE-2025-55182"

# React 19.0.x - 19.2.x. Lexical match on a single minor digit, so "19.10.0" is not flagged.
REACT_VULNERABLE_PATTERN = re.compile(r"[\^~]?19\.[0-2]\.")

# Any Next.js 15.x declaration; patched 15.x releases are still flagged.
NEXT_VULNERABLE_PATTERN = re.compile(r"15\.")

REACT_SERVER_PACKAGES = ("react-server-dom-webpack", "react-server-dom-esm")

REACT_FIXED_VERSION = "19.2.1"
NEXT_FIXED_VERSION = "15.2.4"
ADVISORY_URL = "https://react.dev/blog/2025/12/03/critical-security-vulnerability-in-react-server-components"

__all__ = [
    "ADVISORY_URL",
    "CVE_ID",
    "NEXT_FIXED_VERSION",
    "NEXT_VULNERABLE_PATTERN",
    "REACT_FIXED_VERSION",
    "REACT_SERVER_PACKAGES",
    "REACT_VULNERABLE_PATTERN",
]
