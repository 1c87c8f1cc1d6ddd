"""
Intake Context

Responsibilities:
- Splits pasted raw event logs into trimmed, non-empty lines
- Segments lines into fixed-size event blocks
- Extracts timestamp, workspace ID and account executive name per block

Owns: Click log parsing logic
Never: Formats output or writes files
"""
