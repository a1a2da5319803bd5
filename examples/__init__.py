# examples/__init__.py
"""
Example scripts for the pyspeed toolkit.

Available examples:
- basic_example.py: Each technique of the guide called once
- performance_comparison.py: Timing every technique against its naive version
"""
