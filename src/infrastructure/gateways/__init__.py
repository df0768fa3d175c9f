"""
Gateways Package - Infrastructure Layer

HTTP implementations of the domain gateway contracts.
"""

from .donki_gateway import DonkiError, DonkiGateway, DonkiSchemaError

__all__ = ["DonkiGateway", "DonkiError", "DonkiSchemaError"]
