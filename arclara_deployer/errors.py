"""
Error types raised by the deployment pipeline
"""


class DeployerError(Exception):
    """Base class for all deployment pipeline failures"""


class ConfigurationError(DeployerError):
    """Invalid or missing configuration, detected before any network call"""


class DeploymentError(DeployerError):
    """Contract-creation transaction could not be submitted or confirmed"""


class VerificationError(DeployerError):
    """Deployed contract did not answer the post-deployment read queries"""


class PersistenceError(DeployerError):
    """Deployment record could not be written to disk (non-fatal)"""
