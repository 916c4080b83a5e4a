from typing import Any

from graphql_defaults.error import GraphQLError
from graphql_defaults.language import OperationType, visit
from graphql_defaults.type import (
    GraphQLID,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLScalarType,
    TypeRegistry,
)
from graphql_defaults.validation import (
    ValidationContext,
    VariableDefaultValuesAreCorrectlyTypedRule,
)

from ..utils import dairy_registry, document, enum_value, operation, variable
from .harness import assert_default_value_errors, assert_fatal_error


def invalid_type(variable_name: str, type_name: str, line: int, column: int):
    return {
        "message": f"Default value for ${variable_name} doesn't match type {type_name}",
        "locations": [{"line": line, "column": column}],
        "path": ["query getCheese"],
        "extensions": {
            "code": "defaultValueInvalidType",
            "variableName": variable_name,
            "typeName": type_name,
        },
    }


def non_null(variable_name: str, line: int, column: int):
    return {
        "message": f"Non-null variable ${variable_name} can't have a default value",
        "locations": [{"line": line, "column": column}],
        "path": ["query getCheese"],
        "extensions": {
            "code": "defaultValueInvalidOnNonNullVariable",
            "variableName": variable_name,
        },
    }


def parse_odd(value: Any) -> int:
    if not isinstance(value, int):
        raise GraphQLError(f"Odd cannot represent '{value}'.")
    if not value % 2:
        raise GraphQLError(f"Odd cannot represent '{value}' since it is even.")
    return value


odd_scalar = GraphQLScalarType("Odd", parse_value=parse_odd)

odd_pair_input = GraphQLInputObjectType(
    "OddPair",
    {"first": GraphQLInputField(odd_scalar), "second": GraphQLInputField(odd_scalar)},
)

odd_registry = TypeRegistry([odd_pair_input])


def describe_validate_variable_default_values_are_correctly_typed():
    def finds_default_values_that_do_not_match_their_types():
        assert_default_value_errors(
            document(
                operation(
                    "getCheese",
                    variable("id", "Int", 1, (3, 7)),
                    variable("str", "String!"),
                    variable("badInt", "Int", "abc", (5, 7)),
                    variable(
                        "input",
                        "DairyProductInput",
                        {"source": enum_value("YAK"), "fatContent": 1},
                        (6, 7),
                    ),
                    variable(
                        "badInput",
                        "DairyProductInput",
                        {"source": enum_value("YAK"), "fatContent": True},
                        (7, 7),
                    ),
                    variable("nonNull", "Int!", 1, (8, 7)),
                )
            ),
            [
                invalid_type("badInt", "Int", 5, 7),
                invalid_type("badInput", "DairyProductInput", 7, 7),
                non_null("nonNull", 8, 7),
            ],
        )

    def variables_without_default_values_are_valid():
        assert_default_value_errors(
            document(
                operation(
                    "getCheese",
                    variable("a", "Int"),
                    variable("b", "String!"),
                    variable("c", "[DairyProductInput!]!"),
                )
            ),
            [],
        )

    def describe_null_default_values():
        def variables_with_valid_default_null_values():
            assert_default_value_errors(
                document(
                    operation(
                        "getCheese",
                        variable("a", "Int", None, (3, 11)),
                        variable("b", "String", None, (4, 11)),
                        variable(
                            "c",
                            "ComplexInput",
                            {"requiredField": True, "intField": None},
                            (5, 11),
                        ),
                    )
                ),
                [],
            )

        def variables_with_invalid_default_null_values():
            assert_default_value_errors(
                document(
                    operation(
                        "getCheese",
                        variable("a", "Int!", None, (3, 11)),
                        variable("b", "String!", None, (4, 11)),
                        variable(
                            "c",
                            "ComplexInput",
                            {"requiredField": None, "intField": None},
                            (5, 11),
                        ),
                    )
                ),
                [
                    non_null("a", 3, 11),
                    non_null("b", 4, 11),
                    invalid_type("c", "ComplexInput", 5, 11),
                ],
            )

        def null_items_in_lists():
            assert_default_value_errors(
                document(
                    operation(
                        "getCheese",
                        variable("a", "[Int]", [1, None], (3, 11)),
                        variable("b", "[Int!]", [1, None], (4, 11)),
                        variable("c", "[Int!]", None, (5, 11)),
                    )
                ),
                [invalid_type("b", "[Int!]", 4, 11)],
            )

    def describe_custom_error_messages():
        def sets_error_message_from_a_coercion_error():
            assert_default_value_errors(
                document(operation(None, variable("value", "Time", "a", (3, 9)))),
                [
                    {
                        "message": "cannot coerce to Float",
                        "locations": [{"line": 3, "column": 9}],
                        "path": ["query"],
                        "extensions": {
                            "code": "defaultValueInvalidType",
                            "variableName": "value",
                            "typeName": "Time",
                        },
                    }
                ],
            )

        def accepts_values_the_scalar_can_coerce():
            assert_default_value_errors(
                document(
                    operation(
                        None,
                        variable("a", "Time", "1.5", (3, 9)),
                        variable("b", "Time", 1, (4, 9)),
                        variable("c", "[Time]", [2.5, "3"], (5, 9)),
                    )
                ),
                [],
            )

        def reports_custom_message_found_inside_a_list():
            assert_default_value_errors(
                document(
                    operation(None, variable("value", "[Time]", [1, "a"], (3, 9)))
                ),
                [
                    {
                        "message": "cannot coerce to Float",
                        "locations": [{"line": 3, "column": 9}],
                        "path": ["query"],
                        "extensions": {
                            "code": "defaultValueInvalidType",
                            "variableName": "value",
                            "typeName": "[Time]",
                        },
                    }
                ],
            )

        def reports_message_of_first_failing_field_in_declaration_order():
            result_errors = [
                {
                    "message": "Odd cannot represent '2' since it is even.",
                    "locations": [{"line": 2, "column": 20}],
                    "path": ["query pair"],
                    "extensions": {
                        "code": "defaultValueInvalidType",
                        "variableName": "pair",
                        "typeName": "OddPair",
                    },
                }
            ]
            assert_default_value_errors(
                document(
                    operation(
                        "pair",
                        variable("pair", "OddPair", {"second": 4, "first": 2}, (2, 20)),
                    )
                ),
                result_errors,
                odd_registry,
            )

        def scalar_failing_without_graphql_error_has_no_custom_message():
            def parse_strict(value: Any) -> Any:
                raise ValueError(f"Not accepted: {value}")

            strict_registry = TypeRegistry(
                [GraphQLScalarType("Strict", parse_value=parse_strict)]
            )
            assert_default_value_errors(
                document(
                    operation("getCheese", variable("value", "Strict", 1, (2, 5)))
                ),
                [invalid_type("value", "Strict", 2, 5)],
                strict_registry,
            )

    def describe_undefined_types():
        def returns_a_fatal_error_when_the_type_is_not_found():
            assert_fatal_error(
                document(operation("GetCheese", variable("msg", "IDX", 1, (1, 29)))),
                "IDX isn't a defined input type (on $msg)",
            )

        def names_the_innermost_type_of_wrapped_types():
            assert_fatal_error(
                document(operation("GetCheese", variable("ids", "[IDX!]!"))),
                "IDX isn't a defined input type (on $ids)",
            )

        def discards_errors_found_before_the_undefined_type():
            assert_fatal_error(
                document(
                    operation(
                        "getCheese",
                        variable("badInt", "Int", "abc", (2, 5)),
                        variable("msg", "IDX", 1, (3, 5)),
                        variable("nonNull", "Int!", 1, (4, 5)),
                    )
                ),
                "IDX isn't a defined input type (on $msg)",
            )

        def stops_at_the_first_undefined_type():
            assert_fatal_error(
                document(
                    operation("first", variable("a", "Unknown1")),
                    operation("second", variable("b", "Unknown2")),
                ),
                "Unknown1 isn't a defined input type (on $a)",
            )

        def undefined_type_is_fatal_even_on_non_null_variables():
            assert_fatal_error(
                document(operation("getCheese", variable("msg", "IDX!", 1, (1, 5)))),
                "IDX isn't a defined input type (on $msg)",
            )

    def describe_paths():
        def uses_operation_type_and_name():
            assert_default_value_errors(
                document(
                    operation(
                        "addCheese",
                        variable("a", "Int", "x", (1, 5)),
                        operation_type=OperationType.MUTATION,
                    ),
                    operation("getCheese", variable("b", "Int", "y", (2, 5))),
                    operation(None, variable("c", "Int", "z", (3, 5))),
                ),
                [
                    {**invalid_type("a", "Int", 1, 5), "path": ["mutation addCheese"]},
                    invalid_type("b", "Int", 2, 5),
                    {**invalid_type("c", "Int", 3, 5), "path": ["query"]},
                ],
            )

    def describe_rule_with_custom_context():
        def forwards_errors_to_on_error_callback():
            doc = document(
                operation(
                    "getCheese",
                    variable("badInt", "Int", "abc", (5, 7)),
                    variable("nonNull", "Int!", 1, (8, 7)),
                )
            )
            reported = []
            context = ValidationContext(dairy_registry, doc, reported.append)
            visit(doc, VariableDefaultValuesAreCorrectlyTypedRule(context))
            assert reported == [
                invalid_type("badInt", "Int", 5, 7),
                non_null("nonNull", 8, 7),
            ]
            assert context.errors == []
            assert context.fatal_error is None

        def records_fatal_error_in_context():
            doc = document(
                operation(
                    "getCheese",
                    variable("msg", "IDX", 1),
                    variable("badInt", "Int", "abc", (5, 7)),
                )
            )
            context = ValidationContext(dairy_registry, doc)
            visit(doc, VariableDefaultValuesAreCorrectlyTypedRule(context))
            assert context.errors == []
            assert context.fatal_error == {
                "message": "IDX isn't a defined input type (on $msg)"
            }

        def checks_against_registry_of_the_context():
            id_input = GraphQLInputObjectType(
                "IdInput", {"id": GraphQLInputField(GraphQLID)}
            )
            doc = document(
                operation(
                    "getCheese",
                    variable("a", "IdInput", {"id": 1}, (1, 1)),
                    variable("b", "IdInput", {"id": 1.5}, (2, 1)),
                )
            )
            context = ValidationContext(TypeRegistry([id_input]), doc)
            visit(doc, VariableDefaultValuesAreCorrectlyTypedRule(context))
            assert context.errors == [invalid_type("b", "IdInput", 2, 1)]
