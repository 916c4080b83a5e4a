import pickle

from pytest import warns

from graphql_defaults.pyutils import Undefined, UndefinedType


def describe_undefined():
    def has_repr_and_str():
        assert repr(Undefined) == "Undefined"
        assert str(Undefined) == "Undefined"

    def is_hashable():
        assert hash(Undefined) == hash(Undefined)
        assert hash(Undefined) != hash(None)

    def as_bool_is_false():
        assert bool(Undefined) is False

    def only_equal_to_itself():
        assert Undefined == Undefined
        assert not Undefined != Undefined
        none_object = None
        assert Undefined != none_object
        false_object = False
        assert Undefined != false_object

    def cannot_be_redefined():
        with warns(RuntimeWarning, match="Redefinition of 'Undefined'"):
            redefined_undefined = UndefinedType()
        assert redefined_undefined is Undefined

    def can_be_pickled():
        assert pickle.loads(pickle.dumps(Undefined)) is Undefined
