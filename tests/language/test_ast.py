from copy import copy, deepcopy
import weakref

from graphql_defaults.language import (
    IntValueNode,
    ListValueNode,
    NameNode,
    Node,
    NullValueNode,
    ObjectFieldNode,
    ObjectValueNode,
    OperationType,
    SourceLocation,
    VariableDefinitionNode,
)


class SampleTestNode(Node):
    __slots__ = "alpha", "beta"

    alpha: int
    beta: int


def describe_node_class():
    def initializes_with_keywords():
        node = SampleTestNode(alpha=1, beta=2, loc=(1, 2))
        assert node.alpha == 1
        assert node.beta == 2
        assert node.loc == (1, 2)
        node = SampleTestNode(alpha=1, loc=None)
        assert node.loc is None
        assert node.alpha == 1
        assert node.beta is None
        node = SampleTestNode(alpha=1, beta=2, gamma=3)
        assert node.alpha == 1
        assert node.beta == 2
        assert not hasattr(node, "gamma")

    def converts_location_tuples_to_source_locations():
        node = SampleTestNode(alpha=1, loc=(3, 4))
        assert isinstance(node.loc, SourceLocation)
        assert node.loc.line == 3
        assert node.loc.column == 4

    def converts_lists_to_tuples():
        node = ListValueNode(values=[IntValueNode(value="1")])
        assert node.values == (IntValueNode(value="1"),)

    def has_representation_with_loc():
        node = SampleTestNode(alpha=1, beta=2)
        assert repr(node) == "SampleTestNode"
        node = SampleTestNode(alpha=1, beta=2, loc=(3, 5))
        assert repr(node) == "SampleTestNode at 3:5"

    def can_check_equality():
        node = SampleTestNode(alpha=1, beta=2)
        node2 = SampleTestNode(alpha=1, beta=2)
        assert node2 == node
        assert not node2 != node
        node2 = SampleTestNode(alpha=1, beta=1)
        assert node2 != node
        node3 = Node(alpha=1, beta=2)
        assert node3 != node

    def can_hash():
        node = SampleTestNode(alpha=1, beta=2)
        node2 = SampleTestNode(alpha=1, beta=2)
        assert node == node2
        assert node2 is not node
        assert hash(node2) == hash(node)
        node3 = SampleTestNode(alpha=1, beta=3)
        assert node3 != node
        assert hash(node3) != hash(node)

    def resets_hash_when_changed():
        node = SampleTestNode(alpha=1, beta=2)
        hashed = hash(node)
        node.beta = 3
        assert hash(node) != hashed
        assert hash(node) == hash(SampleTestNode(alpha=1, beta=3))

    def can_create_weak_reference():
        node = SampleTestNode(alpha=1, beta=2)
        ref = weakref.ref(node)
        assert ref() is node

    def can_create_custom_attribute():
        node = SampleTestNode(alpha=1, beta=2)
        node.gamma = 3  # type: ignore
        assert node.gamma == 3  # type: ignore

    def can_create_shallow_copy():
        node = SampleTestNode(alpha=1, beta=2)
        node2 = copy(node)
        assert node2 is not node
        assert node2 == node

    def shallow_copy_is_really_shallow():
        node = SampleTestNode(alpha=1, beta=2)
        node2 = SampleTestNode(alpha=node, beta=node)
        node3 = copy(node2)
        assert node3 is not node2
        assert node3 == node2
        assert node3.alpha is node2.alpha
        assert node3.beta is node2.beta

    def can_create_deep_copy():
        alpha = SampleTestNode(alpha=1, beta=2)
        beta = SampleTestNode(alpha=3, beta=4)
        node = SampleTestNode(alpha=alpha, beta=beta)
        node2 = deepcopy(node)
        assert node2 is not node
        assert node2 == node
        assert node2.alpha == alpha
        assert node2.alpha is not alpha
        assert node2.beta is not beta

    def provides_snake_cased_kind_as_class_attribute():
        assert SampleTestNode.kind == "sample_test"
        assert VariableDefinitionNode.kind == "variable_definition"
        assert NullValueNode.kind == "null_value"

    def provides_keys_as_class_attribute():
        assert SampleTestNode.keys == ["loc", "alpha", "beta"]
        assert ObjectFieldNode.keys == ["loc", "name", "value"]
        assert VariableDefinitionNode.keys == [
            "loc",
            "variable",
            "type",
            "default_value",
        ]

    def compares_nested_literals():
        def make_object():
            return ObjectValueNode(
                fields=[
                    ObjectFieldNode(
                        name=NameNode(value="fat"), value=IntValueNode(value="1")
                    )
                ]
            )

        assert make_object() == make_object()
        other = ObjectValueNode(
            fields=[
                ObjectFieldNode(
                    name=NameNode(value="fat"), value=IntValueNode(value="2")
                )
            ]
        )
        assert other != make_object()


def describe_operation_type():
    def has_the_keywords_as_values():
        assert OperationType.QUERY.value == "query"
        assert OperationType.MUTATION.value == "mutation"
        assert OperationType.SUBSCRIPTION.value == "subscription"
