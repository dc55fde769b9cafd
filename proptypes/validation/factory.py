"""
Public checker namespace.

``PropTypes`` bundles the primitive checkers and the combinator factories::

    from proptypes import PropTypes as T

    schema = {
        'name': T.string,
        'retries': T.array_of(T.number).is_optional,
        'mode': T.one_of(['fast', 'safe']),
    }
"""
from typing import Any, Mapping, Optional, Sequence

from .checkers import (
    Checker,
    RequiredChecker,
    WarningCallback,
    create_any_checker,
    create_array_of_checker,
    create_enum_checker,
    create_instance_checker,
    create_object_of_checker,
    create_primitive_checker,
    create_shape_checker,
    create_strict_shape_checker,
    create_union_checker,
)


class CheckerNamespace:
    """
    Namespace of checkers.

    Primitive checkers are shared; combinators build a new checker per call.
    Warnings about malformed ``one_of`` / ``one_of_type`` arguments are logged
    and forwarded to ``on_warning`` when one is given.
    """

    array = create_primitive_checker('array')
    bool = create_primitive_checker('boolean')
    func = create_primitive_checker('function')
    number = create_primitive_checker('number')
    object = create_primitive_checker('object')
    string = create_primitive_checker('string')
    symbol = create_primitive_checker('symbol')

    any = create_any_checker()

    def __init__(self, on_warning: Optional[WarningCallback] = None):
        self.on_warning = on_warning

    def array_of(self, type_checker: Any) -> RequiredChecker:
        return create_array_of_checker(type_checker)

    def object_of(self, type_checker: Any) -> RequiredChecker:
        return create_object_of_checker(type_checker)

    def one_of(self, expected_values: Sequence[Any]) -> Checker:
        return create_enum_checker(expected_values, self.on_warning)

    def one_of_type(self, type_checkers: Sequence[Any]) -> Checker:
        return create_union_checker(type_checkers, self.on_warning)

    def shape(self, shape_types: Mapping[str, Any]) -> RequiredChecker:
        return create_shape_checker(shape_types)

    def exact(self, shape_types: Mapping[str, Any]) -> RequiredChecker:
        return create_strict_shape_checker(shape_types)

    def instance_of(self, expected_class: Any) -> RequiredChecker:
        return create_instance_checker(expected_class)


def create_prop_types(on_warning: Optional[WarningCallback] = None) -> CheckerNamespace:
    """Build a checker namespace that reports construction warnings to ``on_warning``."""
    return CheckerNamespace(on_warning)


PropTypes = create_prop_types()

array_of = PropTypes.array_of
object_of = PropTypes.object_of
one_of = PropTypes.one_of
one_of_type = PropTypes.one_of_type
shape = PropTypes.shape
exact = PropTypes.exact
instance_of = PropTypes.instance_of
