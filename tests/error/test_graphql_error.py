from graphql_defaults.error import ErrorCode, GraphQLError
from graphql_defaults.language import SourceLocation

from ..utils import literal

int_node = literal(1, (2, 7))
string_node = literal("abc", (5, 11))
no_loc_node = literal(True)


def describe_graphql_error():
    def is_a_class_and_is_a_subclass_of_exception():
        assert type(GraphQLError) is type
        assert issubclass(GraphQLError, Exception)
        assert isinstance(GraphQLError("str"), Exception)
        assert isinstance(GraphQLError("str"), GraphQLError)

    def has_a_name_message_extensions_and_stack_trace():
        e = GraphQLError("msg")
        assert e.__class__.__name__ == "GraphQLError"
        assert e.message == "msg"
        assert e.extensions == {}
        assert e.__traceback__ is None
        assert str(e) == "msg"

    def uses_the_stack_of_an_original_error():
        try:
            raise RuntimeError("original")
        except RuntimeError as runtime_error:
            original = runtime_error
        e = GraphQLError("msg", original_error=original)
        assert e.__traceback__ is original.__traceback__
        assert e.message == "msg"
        assert e.original_error is original
        assert str(e.original_error) == "original"

    def uses_extensions_of_an_original_error():
        original = GraphQLError("original", extensions={"code": "original"})
        e = GraphQLError("msg", original_error=original)
        assert e.extensions == {"code": "original"}

    def converts_a_single_node_to_a_list_of_nodes():
        e = GraphQLError("msg", int_node)
        assert e.nodes == [int_node]
        assert e.locations == [SourceLocation(2, 7)]

    def converts_node_locations_to_locations():
        e = GraphQLError("msg", [int_node, no_loc_node, string_node])
        assert e.nodes == [int_node, no_loc_node, string_node]
        assert e.locations == [(2, 7), (5, 11)]

    def has_no_locations_without_located_nodes():
        e = GraphQLError("msg", [no_loc_node])
        assert e.nodes == [no_loc_node]
        assert e.locations is None

    def converts_path_to_a_list():
        e = GraphQLError("msg", path=("query getCheese",))
        assert e.path == ["query getCheese"]

    def prints_locations_after_the_message():
        e = GraphQLError("msg", [int_node, string_node])
        assert str(e) == "msg (2:7) (5:11)"

    def has_a_repr_with_all_parts():
        e = GraphQLError(
            "msg", int_node, ["query"], extensions={"code": "defaultValueInvalidType"}
        )
        assert repr(e) == (
            "GraphQLError('msg', locations=[SourceLocation(line=2, column=7)],"
            " path=['query'], extensions={'code': 'defaultValueInvalidType'})"
        )

    def is_comparable():
        e1 = GraphQLError("msg", int_node, ["query"])
        assert e1 == e1
        e2 = GraphQLError("msg", int_node, ["query"])
        assert e2 == e1
        assert not e2 != e1
        e3 = GraphQLError("other", int_node, ["query"])
        assert e3 != e1
        assert not e3 == e1

    def describe_formatted():
        def formats_an_error_with_only_a_message():
            assert GraphQLError("msg").formatted == {"message": "msg"}

        def uses_default_message():
            # noinspection PyTypeChecker
            formatted = GraphQLError(None).formatted  # type: ignore
            assert formatted == {"message": "An unknown error occurred."}

        def formats_an_error_with_all_parts():
            e = GraphQLError(
                "Default value for $badInt doesn't match type Int",
                string_node,
                ["query getCheese"],
                extensions={
                    "code": ErrorCode.DEFAULT_VALUE_INVALID_TYPE.value,
                    "variableName": "badInt",
                    "typeName": "Int",
                },
            )
            assert e.formatted == {
                "message": "Default value for $badInt doesn't match type Int",
                "locations": [{"line": 5, "column": 11}],
                "path": ["query getCheese"],
                "extensions": {
                    "code": "defaultValueInvalidType",
                    "variableName": "badInt",
                    "typeName": "Int",
                },
            }

        def compares_with_formatted_dict():
            e = GraphQLError("msg", int_node, ["query"])
            assert e == {
                "message": "msg",
                "locations": [{"line": 2, "column": 7}],
                "path": ["query"],
            }
            assert e != {"message": "msg"}
            assert e != "msg"


def describe_error_code():
    def has_the_wire_values_of_the_codes():
        assert ErrorCode.DEFAULT_VALUE_INVALID_TYPE.value == "defaultValueInvalidType"
        assert (
            ErrorCode.DEFAULT_VALUE_INVALID_ON_NON_NULL_VARIABLE.value
            == "defaultValueInvalidOnNonNullVariable"
        )
