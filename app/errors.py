class BlogPipelineError(Exception):
    """Base class for errors surfaced to the user with a readable message."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidFileTypeError(BlogPipelineError):
    pass


class DraftValidationError(BlogPipelineError):
    pass


class SubmissionInProgressError(BlogPipelineError):
    pass


class PublishError(BlogPipelineError):
    """The remote store rejected or failed an insert."""
