"""Errors raised while generating Swift models from a JSON document."""


class ModelGenerationError(ValueError):
    """Base class for model generation failures."""


class InputNotObjectError(ModelGenerationError):
    """The root JSON value is not an object.

    :ivar value_type: Python type name of the offending root value.
    :type value_type: str
    """

    def __init__(self, value_type: str):
        self.value_type = value_type
        super().__init__(f"Root JSON value must be an object, got {value_type}")


class NameCollisionError(ModelGenerationError):
    """Two different shapes requested the same record name and renaming is off.

    :ivar name: The contested record name.
    :type name: str
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Record name {name!r} is already used by a different shape"
        )
