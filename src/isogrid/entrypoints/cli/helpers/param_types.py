"""Click parameter types for grid settings."""

import click

from isogrid.domain.errors import InvalidLengthError
from isogrid.domain.value_objects import Dimension, Length, Percentage, parse_length


class LengthParamType(click.ParamType):
    """Accept a CSS length such as ``2%`` or ``1.5rem``."""

    name = "length"

    def convert(
        self,
        value: object,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> Length:
        if isinstance(value, (Percentage, Dimension)):
            return value
        try:
            return parse_length(str(value))
        except InvalidLengthError as e:
            self.fail(str(e), param, ctx)


LENGTH = LengthParamType()
