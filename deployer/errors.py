"""
Errors raised by the deployment helpers
"""


class DeployerError(Exception):
    """Base class for all deployment errors"""


class UnsupportedNetworkError(DeployerError):
    pass


class NetworkConnectionError(DeployerError):
    pass


class NoSignersError(DeployerError):
    pass


class ArtifactNotFoundError(DeployerError):
    pass


class NoBytecodeError(DeployerError):
    pass


class LibraryLinkingError(DeployerError):
    pass


class DeploymentError(DeployerError):
    pass
