"""Errors raised while parsing and rendering commit message templates."""


class TemplateError(ValueError):
    """Base class for every failure originating in the template engine."""


class InvalidTokenSyntaxError(TemplateError):
    """A marker body is not a variable reference."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"invalid token syntax: {token!r}")


class NoReplacementError(TemplateError):
    """The replacer has no value for a key and the variable has no default."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"no replacement for key {key!r}")


class InvalidValueError(TemplateError):
    """A looked-up value is not one of the variable's allowed values.

    ``allowed_values`` holds the choices declared in the marker, without the
    default value.
    """

    def __init__(self, key: str, value: str, allowed_values: tuple[str, ...]):
        self.key = key
        self.value = value
        self.allowed_values = tuple(allowed_values)
        allowed = ", ".join(self.allowed_values)
        super().__init__(f"invalid value for key {key!r} - {value!r}; allowed: {allowed}")
