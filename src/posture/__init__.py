"""Security posture evaluation for component architecture diagrams.

Two engines work over the same directed graph of placed components:
  - connection risk: classifies each edge by enumerating the simple paths
    between its endpoints and checking them for required controls
  - posture scoring: aggregates tier coverage, connectivity and missing
    controls into a 0-100 risk score, a level and compliance readiness
"""

__version__ = "0.1.0"
