"""Exception hierarchy for bezkit."""


class BezkitError(Exception):
    """Base exception for all bezkit errors."""

    pass


class InvalidInputError(BezkitError):
    """Input values that an operation cannot work with."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class IncompatibleTopologyError(BezkitError):
    """Two paths do not share the point structure an operation needs."""

    def __init__(self, first_count: int, second_count: int) -> None:
        self.first_count = first_count
        self.second_count = second_count
        super().__init__(
            f"Cannot interpolate due to incompatible anchor points: "
            f"{first_count} vs {second_count}"
        )


class NoSectionsError(BezkitError):
    """Section partitioning produced no sections."""

    def __init__(self, subpath_index: int) -> None:
        self.subpath_index = subpath_index
        super().__init__(f"No sections found in subpath {subpath_index}")


class MissingDependencyError(BezkitError):
    """A required collaborator could not be constructed or was not supplied."""

    def __init__(self, dependency: str, reason: str) -> None:
        self.dependency = dependency
        self.reason = reason
        super().__init__(f"Missing dependency '{dependency}': {reason}")


class PathDataError(BezkitError):
    """Path data from the host could not be read."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to read path data from '{source}': {reason}")
