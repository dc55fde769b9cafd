"""
Checkers, dispatch and boundary helpers.
"""
from .kinds import (
    MISSING,
    Symbol,
    coarse_kind,
    precise_kind,
    same_value
)
from .results import (
    CheckFailure,
    FailureKind
)
from .checkers import (
    Checker,
    ChainableChecker,
    RequiredChecker,
    OptionalChecker,
    PassthroughChecker,
    create_chainable_checker
)
from .factory import (
    CheckerNamespace,
    PropTypes,
    create_prop_types,
    array_of,
    object_of,
    one_of,
    one_of_type,
    shape,
    exact,
    instance_of
)
from .dispatch import (
    check_prop_types,
    check_value_type
)
from .schema import Schema
from .type_checking import (
    check_params,
    ensure_value
)

__all__ = [
    'MISSING',
    'Symbol',
    'coarse_kind',
    'precise_kind',
    'same_value',
    'CheckFailure',
    'FailureKind',
    'Checker',
    'ChainableChecker',
    'RequiredChecker',
    'OptionalChecker',
    'PassthroughChecker',
    'create_chainable_checker',
    'CheckerNamespace',
    'PropTypes',
    'create_prop_types',
    'array_of',
    'object_of',
    'one_of',
    'one_of_type',
    'shape',
    'exact',
    'instance_of',
    'check_prop_types',
    'check_value_type',
    'Schema',
    'check_params',
    'ensure_value',
]
