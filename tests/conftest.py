"""Pytest configuration and fixtures for fhirtime tests."""

from __future__ import annotations

import sys
from pathlib import Path

# Put the project root on sys.path so fhirtime imports from the checkout
# without installing the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
