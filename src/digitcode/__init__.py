"""
Digit Code Conversion Package

Converts decimal numbers between digit-level numeral encodings:
    - plain decimal
    - BCD (8421)
    - Aiken (2421)
    - Stibitz (Excess-3)

ARCHITECTURAL GUARANTEE:
------------------------
Every decoder produces a CanonicalNumber.
Every encoder consumes a CanonicalNumber.

Decoders and encoders never talk to each other directly.
The batch driver and CLI are thin layers on top.
"""

__version__ = "0.1.0"
