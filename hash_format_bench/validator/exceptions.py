"""
:Description: Exceptions thrown by `validator` modules.
"""


class HashValidatorException(Exception):
    """
    Base exception for all other hash validator exceptions. Should not be raised directly.
    """


class InvalidHashLengthError(HashValidatorException, ValueError):
    """
    Exception to be thrown when a validator is configured with a length that no hash value can have.
    """

    def __init__(self, message: str):
        """
        Constructs an invalid hash length exception.

        :param message: String description of the issue encountered.
        """
        self.message = message if message else "The hash value length must be a non-negative integer."
        super().__init__(self.message)
