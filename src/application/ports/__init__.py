"""Application ports package."""

from .database import DatabaseEnginePort
from .ledger_gateway import LedgerGatewayPort

__all__ = ["DatabaseEnginePort", "LedgerGatewayPort"]
