"""
DEMOCLICK - Demo Click Log Parser

Turns raw click-tracking event logs (pasted from an analytics tool's raw log
view) into spreadsheet-ready records.

Architecture:
- Intake Context: Line segmentation, block extraction, field normalization
- Export Context: Grouped clipboard lists and CSV serialization
"""

__version__ = "0.1.0"
