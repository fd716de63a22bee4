"""Exception taxonomy raised by the signing and routing engine."""

from __future__ import annotations


class CodebirdError(Exception):
    """Base class for every failure detected before a request is sent."""


class MissingCredential(CodebirdError):
    """Consumer key/secret or user token absent when required."""


class MissingCapability(CodebirdError):
    """A required cryptographic primitive is unavailable in this runtime."""


class MissingParameter(CodebirdError, LookupError):
    """A templated path segment has no usable value in the parameters."""

    def __init__(self, method: str, parameter: str):
        self.method = method
        self.parameter = parameter
        super().__init__(
            f'To call the templated method "{method}", '
            f'specify the parameter value for "{parameter}".'
        )


class UnknownMethod(CodebirdError, LookupError):
    """The method identifier resolves to no known HTTP verb."""

    def __init__(self, method: str):
        self.method = method
        super().__init__(f'Can\'t find HTTP method to use for "{method}".')


class UnsupportedParameterShape(CodebirdError, ValueError):
    """An array was supplied where a scalar upload parameter is required."""


class InvalidArgument(CodebirdError, ValueError):
    """An argument is outside of its accepted range."""
