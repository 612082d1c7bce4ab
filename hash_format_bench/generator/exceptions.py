"""
:Description: Exceptions thrown by `generator` modules.
"""


class SampleGeneratorException(Exception):
    """
    Base exception for all other sample generation exceptions. Should not be raised directly.
    """


class InvalidSampleSizeError(SampleGeneratorException):
    """
    Exception to be thrown when the number of samples to generate is not a positive integer.
    """

    def __init__(self, message: str):
        """
        Constructs an invalid sample size exception.

        :param message: String description of the issue encountered.
        """
        self.message = message if message else "Sample-Size has to be a positive!"
        super().__init__(self.message)
