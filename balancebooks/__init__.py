"""
BalanceBooks - bookkeeping and driver pay statements for independent truckers.
"""

__version__ = "1.3.0"
