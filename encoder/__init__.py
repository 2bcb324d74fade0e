"""
Mission Encoder

Typed parsing of script-engine telemetry values and compact binary replay blobs
for mission event timelines.
"""

__version__ = "0.1.0"
