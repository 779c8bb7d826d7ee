"""
Root test package marker.

Only the root tests/ directory carries an __init__.py. Subdirectories are left as
implicit namespace packages (PEP 420), so test modules there need unique file names.
"""
