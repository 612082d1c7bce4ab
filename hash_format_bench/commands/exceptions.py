"""
:Description: Exceptions thrown by `commands` modules.
"""


class CommandArgumentError(Exception):
    """
    Exception to be thrown when the positional arguments given to a command cannot be used, regardless of their values.
    """

    def __init__(self, message: str):
        """
        Constructs a command argument exception.

        :param message: String description of the issue encountered.
        """
        self.message = message if message else "Invalid Arguments!"
        super().__init__(self.message)
