"""
Vanity account search: mnemonic + address whose address carries a chosen prefix/suffix
"""

__version__ = "1.0.0"
