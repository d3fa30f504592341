# src/geologm/workflow/path/__init__.py
"""
Geodesic path workflow package.

Public API:
- load_config: read and validate a path.yaml
- run_path: sample the geodesic between two rotations and write JSON
"""

from .config import Config, load_config
from .workflow import run_path
