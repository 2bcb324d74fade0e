"""
Test suite for the mission encoder.

Focus areas:
- Value parser grammar and error taxonomy
- Event record byte layout
- Replay blob byte layout
- Blob stores and CLI
"""
