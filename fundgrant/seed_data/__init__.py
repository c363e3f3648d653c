"""
Demo dataset shipped with the package.

Each ``<name>.json`` file holds a list of documents for one collection.
"""

import json
from pathlib import Path
from typing import Any, Dict, List

FIXTURE_DIR = Path(__file__).resolve().parent


def load_fixture(name: str) -> List[Dict[str, Any]]:
    """Load ``<name>.json`` from the fixture directory."""
    path = FIXTURE_DIR / f"{name}.json"
    with path.open(encoding="utf-8") as handle:
        return json.load(handle)
