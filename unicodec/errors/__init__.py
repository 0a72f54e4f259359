"""
This module holds all the errors a conversion can fail with.
"""
from .common import (
    TranscodeError, MalformedInputError, MalformedLeadError,
    UnexpectedTerminatorError, BadContinuationError, MismatchedSurrogateError,
    SurrogateScalarError, CodepointTooLargeError, OverlongEncodingError,
    AllocationError, MeasurementMismatchError
)
