class HashingError(Exception):
    """Base class for smthash errors."""


class InvalidEncodingError(HashingError):
    def __init__(self, text):
        super().__init__(f"This is not hex string: {text!r}")
        self.text = text


class InvalidInputError(HashingError):
    def __init__(self, value, position=None, reason=None):
        if reason is None:
            reason = (
                "must be an int >= 0, str, bytes, None or a typed input, "
                f"got {type(value).__name__}"
            )
        msg = f"Invalid input: {reason}"
        if position is not None:
            msg += f" at position {position}"
        super().__init__(msg)
        self.value = value
        self.position = position
        self.reason = reason


class NormalizationError(HashingError):
    pass
