"""
Arclara Token deployer: validate, deploy, verify and record a single ArclaraToken instance
"""

from arclara_deployer.errors import (
    DeployerError,
    ConfigurationError,
    DeploymentError,
    VerificationError,
    PersistenceError,
)

__version__ = "1.0.0"
