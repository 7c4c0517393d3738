"""Project route arguments into OpenAPI parameter entries."""

from collections.abc import Iterable, Sequence

from dactyl_oas.generator.models import Parameter, ParameterSchema
from dactyl_oas.metadata.base import ArgsType, RouteArgument

# Bindings with no counterpart among OpenAPI parameters
HIDDEN_ARG_TYPES = frozenset({ArgsType.BODY, ArgsType.CONTEXT, ArgsType.REQUEST, ArgsType.RESPONSE})


def project_arguments(
    args: Iterable[RouteArgument],
    method_name: str,
    arg_types: Sequence[str] = (),
) -> list[Parameter]:
    """Build the ``parameters`` list for one route.

    ``arg_types`` is aligned by position with the retained arguments. An
    argument that declares its own ``schema_type`` uses that instead, and
    entries past the end of ``arg_types`` get no type.
    """
    retained = [
        arg for arg in args
        if arg.arg_for == method_name and arg.type not in HIDDEN_ARG_TYPES
    ]

    params = []
    for index, arg in enumerate(retained):
        location = "path" if arg.type == ArgsType.PARAM else arg.type.value
        schema_type = arg.schema_type
        if schema_type is None and index < len(arg_types):
            schema_type = arg_types[index]
        params.append(
            Parameter(name=arg.key, location=location, schema_=ParameterSchema(type=schema_type))
        )
    return params
