from datetime import datetime, timezone
from enum import Enum
from typing import Any

from graphql_defaults.error import GraphQLError
from graphql_defaults.type import (
    GraphQLBoolean,
    GraphQLEnumType,
    GraphQLFloat,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLInt,
    GraphQLNonNull,
    GraphQLScalarType,
    GraphQLString,
    TypeRegistry,
)

__all__ = [
    "dairy_animal_enum",
    "complex_input",
    "dairy_product_input",
    "dairy_registry",
    "time_scalar",
]


class DairyAnimal(Enum):
    COW = 1
    DONKEY = 2
    GOAT = 3
    REINDEER = 4
    SHEEP = 5
    YAK = 6


dairy_animal_enum = GraphQLEnumType("DairyAnimal", DairyAnimal)

dairy_product_input = GraphQLInputObjectType(
    "DairyProductInput",
    {
        "source": GraphQLInputField(GraphQLNonNull(dairy_animal_enum)),
        "originDairy": GraphQLInputField(
            GraphQLString, default_value="Sugar Hollow Dairy"
        ),
        "fatContent": GraphQLInputField(GraphQLFloat, default_value=0.3),
        "organic": GraphQLInputField(GraphQLBoolean, default_value=False),
    },
)

complex_input = GraphQLInputObjectType(
    "ComplexInput",
    {
        "requiredField": GraphQLInputField(GraphQLNonNull(GraphQLBoolean)),
        "intField": GraphQLInputField(GraphQLInt),
    },
)


def parse_time(value: Any) -> datetime:
    try:
        return datetime.fromtimestamp(float(value), tz=timezone.utc)
    except (TypeError, ValueError):
        raise GraphQLError("cannot coerce to Float")


time_scalar = GraphQLScalarType(
    "Time", parse_value=parse_time, description="Time since epoch in seconds"
)

dairy_registry = TypeRegistry([dairy_product_input, complex_input, time_scalar])
