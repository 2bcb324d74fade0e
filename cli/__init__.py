"""
Mission Encoder CLI

Commands:
- mission-encoder parse - Parse one telemetry value token
- mission-encoder encode - Build a replay blob from a telemetry event file
- mission-encoder version - Show version information
"""

__version__ = "0.1.0"
