"""Services for the risk-field policy."""

from .navigator import Navigator
from .risk_field import RiskField
from .safety import SafetyManager
from .stamping import RiskStamper

__all__ = ["Navigator", "RiskField", "RiskStamper", "SafetyManager"]
