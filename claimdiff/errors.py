"""Exception hierarchy for claimdiff."""

from __future__ import annotations


class ClaimDiffError(Exception):
    """Base class for all claimdiff errors."""


class ClaimLoadError(ClaimDiffError):
    """Raised when a claim file cannot be read, decoded, or mapped to the schema."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"failed to load claim file '{path}': {reason}")
        self.path = path
        self.reason = reason


class PluginIdentityError(ClaimDiffError):
    """Raised when a CNI plugin record has no string ``type`` field.

    The ``type`` field is the plugin's identity inside a network, so a record
    without it cannot be reconciled against the other claim.
    """

    def __init__(self, plugin: object, network: str = "") -> None:
        where = f" in network '{network}'" if network else ""
        super().__init__(f"CNI plugin{where} has no string 'type' field: {plugin!r}")
        self.plugin = plugin
        self.network = network
