from graphql_defaults.error import GraphQLError
from graphql_defaults.validation import ValidationContext

from ..utils import dairy_registry, document


def describe_validation_context():
    def holds_registry_and_document():
        doc = document()
        context = ValidationContext(dairy_registry, doc)
        assert context.registry is dairy_registry
        assert context.document is doc
        assert context.errors == []
        assert context.fatal_error is None

    def collects_errors_in_reporting_order():
        context = ValidationContext(dairy_registry, document())
        first_error, second_error = GraphQLError("first"), GraphQLError("second")
        context.report_error(first_error)
        context.report_error(second_error)
        assert context.errors == [first_error, second_error]
        assert repr(context) == "<ValidationContext errors=2>"

    def forwards_errors_to_on_error_callback():
        reported = []
        context = ValidationContext(dairy_registry, document(), reported.append)
        error = GraphQLError("error")
        context.report_error(error)
        assert reported == [error]
        assert context.errors == []

    def keeps_only_the_first_fatal_error():
        context = ValidationContext(dairy_registry, document())
        first_error, second_error = GraphQLError("first"), GraphQLError("second")
        context.report_fatal_error(first_error)
        context.report_fatal_error(second_error)
        assert context.fatal_error is first_error
        assert context.errors == []
