"""
Meeting Cost - Source Package

Computes what a meeting costs from the billing rates of the people in it
and assembles an immutable record of that meeting.

DESIGN PRINCIPLES:
1. Raw numbers in, raw numbers out (formatting is a separate layer)
2. Inactive participants are excluded, never deleted
3. Calculation problems are reported as data, not raised
4. A finished meeting is a frozen snapshot
5. Free text is sanitized before it is stored
"""

__version__ = "1.0.0"
__author__ = "Meeting Cost Team"
