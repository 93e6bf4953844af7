"""
PV Calculator Package

Rent-to-own pricing for vehicle offers.
Derives buyout, daily rates and a market check for each candidate down payment (PV).
"""

__version__ = "1.0.0"
