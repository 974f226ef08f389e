"""
Herd monitor: data access for a spreadsheet-backed farm (owners, cattle,
RFID gate logs, milk, health and treatment records, users).
"""
__version__ = "1.0.0"
