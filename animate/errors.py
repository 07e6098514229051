"""Error taxonomy for model resolution failures."""


class ResolutionError(Exception):
    """Base class for every failure while resolving a model reference."""


class ModelNotFoundError(ResolutionError):
    """The input path does not exist or yields no machine files."""


class SecurityViolationError(ResolutionError):
    """An archive entry would be written outside the scratch directory."""


class MalformedInputError(ResolutionError):
    """A machine file or archive cannot be parsed."""


class IOFailureError(ResolutionError):
    """A filesystem operation failed while extracting or scanning."""


class CircularRefinementError(ResolutionError):
    """Every candidate machine is refined by another one."""

    def __init__(self, machines: list[str]) -> None:
        self.machines = sorted(machines)
        super().__init__(
            "Circular refinement detected among machines: " + ", ".join(self.machines)
        )


class AmbiguousBundleError(ResolutionError):
    """More than one machine is not refined by any other machine."""

    def __init__(self, leaves: list[str]) -> None:
        self.leaves = sorted(leaves)
        super().__init__(
            "Multiple independent refinement chains found, cannot auto-select. "
            "Leaf machines: " + ", ".join(self.leaves)
        )


class EngineError(Exception):
    """The external ProB engine could not be run or reported a failure."""
