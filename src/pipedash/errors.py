"""Exception types raised by pipedash."""


class PipedashError(Exception):
    """Base class for pipedash errors."""


class PartitionContractViolation(PipedashError, ValueError):
    """A partition was requested with no regions or a negative margin."""


class MissingStageName(PipedashError, ValueError):
    """A stage without a display name reached the panel renderer."""


class EmptyPipelineError(PipedashError):
    """The pipeline has no stage that can be displayed."""


class PipelineFetchError(PipedashError):
    """Pipeline state could not be fetched or parsed."""


class PipelineNotFoundError(PipelineFetchError):
    """No pipeline matches the requested name."""
