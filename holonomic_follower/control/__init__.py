from .coefficients import PIDCoefficients
from .pidf import PIDFController

__all__ = ["PIDCoefficients", "PIDFController"]
