"""
Export Context

Responsibilities:
- Renders parsed click events as per-column lists for clipboard copy
- Renders parsed click events as a CSV table and writes export files

Owns: Output formats (column order, header, cell escaping)
Never: Parses raw log text
"""
