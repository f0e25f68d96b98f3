class PackError(Exception):
    """Base class for every error raised while resolving packs."""


class UnknownPackError(PackError, LookupError):
    """A directly requested pack or asset is absent from the manifest."""

    def __init__(self, name: str, message: str):
        super().__init__(message)
        self.name = name


class PackUsageError(PackError):
    """Tags were appended or rendered out of order for the current page."""


class DependencyCycleError(PackError):
    """
    Chunk lists describe a cycle, so no load order exists.
    This only happens with a corrupt or hand-edited manifest.
    """

    def __init__(self, cycle):
        self.cycle = list(cycle)
        super().__init__("Chunk load order contains a cycle: " + " -> ".join(map(str, self.cycle)))


class ManifestError(PackError):
    """The manifest file exists but cannot be read as JSON."""
