"""
Checker combinators.

Every checker is a callable with the signature::

    checker(container, key, subject_name, location, full_path) -> Optional[CheckFailure]

``container[key]`` is the value under test, ``subject_name`` names what owns
the value (a function, a payload), ``location`` is a free-text tag such as
``"param"`` and ``full_path`` is the dotted/bracketed locator used in messages.

Library checkers are built by wrapping a validation function in a
requiredness gate. Each one comes as a required/optional pair; the required
variant is the default and ``.is_optional`` gives the relaxed sibling.
"""
import json
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Callable, NamedTuple, Optional

from ..utils.exceptions import InvariantViolation
from ..utils.logging_config import get_logger
from .kinds import (
    ANONYMOUS,
    MISSING,
    PRIMITIVE_KINDS,
    class_name,
    coarse_kind,
    lookup,
    own_keys,
    postfix_for_type_warning,
    precise_kind,
    same_value,
    serialize_values,
    to_serializable,
    type_name,
)
from .results import CheckFailure, invariant_failure, is_failure, validation_failure

logger = get_logger(__name__)

WarningCallback = Callable[[str], None]


class CheckContext(NamedTuple):
    """Everything a validation function knows about the value it checks."""
    container: Any
    key: Any
    subject_name: str
    location: str
    full_path: str


ValidateFn = Callable[[Any, CheckContext], Optional[CheckFailure]]


class Checker(ABC):
    """Base class for library-built checkers."""

    description: str = "checker"

    @abstractmethod
    def check(
        self,
        container: Any,
        key: Any,
        subject_name: Optional[str] = None,
        location: str = "",
        full_path: Optional[str] = None
    ) -> Optional[CheckFailure]:
        """Check ``container[key]``; return ``None`` when it is valid."""

    @property
    @abstractmethod
    def is_optional(self) -> "Checker":
        """Sibling checker that lets absent values through."""

    @property
    @abstractmethod
    def is_required(self) -> "Checker":
        """Sibling checker that rejects absent values."""

    def __call__(
        self,
        container: Any,
        key: Any,
        subject_name: Optional[str] = None,
        location: str = "",
        full_path: Optional[str] = None
    ) -> Optional[CheckFailure]:
        return self.check(container, key, subject_name, location, full_path)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.description}>"


class ChainableChecker(Checker):
    """Requiredness gate around a shared validation function."""

    required = True

    def __init__(self, validate: ValidateFn, description: str):
        self._validate = validate
        self.description = description
        self._sibling: Optional[ChainableChecker] = None

    def check(self, container, key, subject_name=None, location="", full_path=None):
        """
        Look the value up and reject absent values when required.

        Present values are handed to the wrapped validation function. The
        subject falls back to ``<<anonymous>>`` and the path to the key.
        """
        subject_name = subject_name or ANONYMOUS
        if full_path is None:
            full_path = str(key)

        value = lookup(container, key)
        if value is None or value is MISSING:
            if not self.required:
                return None
            shown = "null" if value is None else "undefined"
            return validation_failure(
                f"The {location} `{full_path}` is marked as required in `{subject_name}`, "
                f"but its value is `{shown}`.",
                full_path
            )

        return self._validate(value, CheckContext(container, key, subject_name, location, full_path))

    @property
    def is_optional(self) -> "ChainableChecker":
        return self._sibling if self.required else self

    @property
    def is_required(self) -> "ChainableChecker":
        return self if self.required else self._sibling


class RequiredChecker(ChainableChecker):
    """Absent values fail."""
    required = True


class OptionalChecker(ChainableChecker):
    """Absent values pass."""
    required = False


class PassthroughChecker(Checker):
    """Accepts everything, absent values included."""

    description = "passthrough"

    def check(self, container, key, subject_name=None, location="", full_path=None):
        """Always valid."""
        return None

    @property
    def is_optional(self) -> "PassthroughChecker":
        return self

    @property
    def is_required(self) -> "PassthroughChecker":
        return self


def create_chainable_checker(validate: ValidateFn, description: str) -> RequiredChecker:
    """Wrap ``validate`` in a linked required/optional pair and return the required one."""
    required = RequiredChecker(validate, description)
    optional = OptionalChecker(validate, description)
    required._sibling = optional
    optional._sibling = required
    return required


def _warn(message: str, on_warning: Optional[WarningCallback]) -> None:
    """Log a construction warning and forward it to the callback, if any."""
    logger.warning(f"Warning: {message}")
    if on_warning is not None:
        on_warning(message)


def _describe(checker: Any) -> str:
    """Short label for a checker, used in descriptions."""
    return getattr(checker, "description", None) or getattr(checker, "__name__", None) or repr(checker)


def _bad_notation(combinator: str, ctx: CheckContext, path: Optional[str] = None) -> CheckFailure:
    """Invariant failure for a combinator member that is not a checker."""
    path = path or ctx.full_path
    return invariant_failure(
        f"Property `{path}` of `{ctx.subject_name}` has invalid checker notation inside {combinator}.",
        path
    )


def create_primitive_checker(expected_kind: str) -> RequiredChecker:
    """
    Build a checker that accepts values of one coarse kind.

    Args:
        expected_kind: One of the primitive kind names, e.g. ``"number"``

    Raises:
        InvariantViolation: ``expected_kind`` is not a primitive kind
    """
    if expected_kind not in PRIMITIVE_KINDS:
        raise InvariantViolation(
            f"Unknown primitive kind {expected_kind!r}, expected one of {list(PRIMITIVE_KINDS)}.",
            details={"kind": expected_kind}
        )

    def validate(value, ctx):
        if coarse_kind(value) != expected_kind:
            # date/regexp pass the object check, but the message can say more
            return validation_failure(
                f"Invalid {ctx.location} `{ctx.full_path}` of type `{precise_kind(value)}` "
                f"supplied to `{ctx.subject_name}`, expected `{expected_kind}`.",
                ctx.full_path
            )
        return None
    return create_chainable_checker(validate, expected_kind)


def create_any_checker() -> RequiredChecker:
    """Build a checker that accepts any present value."""
    return create_chainable_checker(lambda value, ctx: None, "any")


def create_array_of_checker(type_checker: Any) -> RequiredChecker:
    """Every element of a sequence must satisfy ``type_checker``."""
    def validate(value, ctx):
        if not callable(type_checker):
            return _bad_notation("array_of", ctx)
        if coarse_kind(value) != "array":
            return validation_failure(
                f"Invalid {ctx.location} `{ctx.full_path}` of type `{coarse_kind(value)}` "
                f"supplied to `{ctx.subject_name}`, expected an array.",
                ctx.full_path
            )
        for index in range(len(value)):
            error = type_checker(value, index, ctx.subject_name, ctx.location, f"{ctx.full_path}[{index}]")
            if is_failure(error):
                return error
        return None
    return create_chainable_checker(validate, f"array_of({_describe(type_checker)})")


def create_object_of_checker(type_checker: Any) -> RequiredChecker:
    """Every own value of a mapping or object must satisfy ``type_checker``."""
    def validate(value, ctx):
        if not callable(type_checker):
            return _bad_notation("object_of", ctx)
        kind = coarse_kind(value)
        if kind != "object":
            return validation_failure(
                f"Invalid {ctx.location} `{ctx.full_path}` of type `{kind}` "
                f"supplied to `{ctx.subject_name}`, expected an object.",
                ctx.full_path
            )
        for key in own_keys(value):
            error = type_checker(value, key, ctx.subject_name, ctx.location, f"{ctx.full_path}.{key}")
            if is_failure(error):
                return error
        return None
    return create_chainable_checker(validate, f"object_of({_describe(type_checker)})")


def create_enum_checker(expected_values: Any, on_warning: Optional[WarningCallback] = None) -> Checker:
    """The value must be same-value equal to one of ``expected_values``."""
    if not isinstance(expected_values, (list, tuple)):
        _warn("Invalid argument supplied to one_of, expected an instance of list.", on_warning)
        return PassthroughChecker()

    allowed = tuple(expected_values)

    def validate(value, ctx):
        for candidate in allowed:
            if same_value(value, candidate):
                return None

        values_string = json.dumps(serialize_values(allowed), default=repr)
        return validation_failure(
            f"Invalid {ctx.location} `{ctx.full_path}` of value `{value}` "
            f"supplied to `{ctx.subject_name}`, expected one of {values_string}.",
            ctx.full_path
        )
    return create_chainable_checker(validate, f"one_of({list(allowed)!r})")


def create_union_checker(type_checkers: Any, on_warning: Optional[WarningCallback] = None) -> Checker:
    """The value must satisfy at least one of ``type_checkers``, tried in order."""
    if not isinstance(type_checkers, (list, tuple)):
        _warn("Invalid argument supplied to one_of_type, expected an instance of list.", on_warning)
        return PassthroughChecker()

    for index, checker in enumerate(type_checkers):
        if not callable(checker):
            _warn(
                "Invalid argument supplied to one_of_type. Expected a list of check functions, "
                f"but received {postfix_for_type_warning(checker)} at index {index}.",
                on_warning
            )
            return PassthroughChecker()

    members = tuple(type_checkers)

    def validate(value, ctx):
        for checker in members:
            if checker(ctx.container, ctx.key, ctx.subject_name, ctx.location, ctx.full_path) is None:
                return None

        return validation_failure(
            f"Invalid {ctx.location} `{ctx.full_path}` supplied to `{ctx.subject_name}`.",
            ctx.full_path
        )
    return create_chainable_checker(validate, f"one_of_type([{', '.join(_describe(c) for c in members)}])")


def _freeze_schema(shape_types: Any, combinator: str) -> dict:
    """Copy a field schema, rejecting anything that is not a mapping."""
    if not isinstance(shape_types, Mapping):
        raise InvariantViolation(
            f"Invalid argument supplied to {combinator}, expected a mapping of field names "
            f"to checkers but received {postfix_for_type_warning(shape_types)}.",
            details={"combinator": combinator}
        )
    return dict(shape_types)


def _not_an_object(value: Any, ctx: CheckContext) -> Optional[CheckFailure]:
    """Failure for structural checks on values that are not objects."""
    kind = coarse_kind(value)
    if kind != "object":
        return validation_failure(
            f"Invalid {ctx.location} `{ctx.full_path}` of type `{kind}` "
            f"supplied to `{ctx.subject_name}`, expected `object`.",
            ctx.full_path
        )
    return None


def _check_field(combinator: str, checker: Any, value: Any, key: Any, ctx: CheckContext) -> Any:
    """Run one field checker of a shape at ``<path>.<key>``."""
    path = f"{ctx.full_path}.{key}"
    if not callable(checker):
        return _bad_notation(combinator, ctx, path)
    return checker(value, key, ctx.subject_name, ctx.location, path)


def create_shape_checker(shape_types: Any) -> RequiredChecker:
    """Declared fields must match; undeclared fields are ignored."""
    fields = _freeze_schema(shape_types, "shape")

    def validate(value, ctx):
        error = _not_an_object(value, ctx)
        if error is not None:
            return error
        for key, checker in fields.items():
            if not checker:
                continue
            error = _check_field("shape", checker, value, key, ctx)
            if error is not None:
                return error
        return None
    return create_chainable_checker(validate, f"shape({list(fields)!r})")


def create_strict_shape_checker(shape_types: Any) -> RequiredChecker:
    """Like ``shape`` but undeclared fields fail."""
    fields = _freeze_schema(shape_types, "exact")

    def validate(value, ctx):
        error = _not_an_object(value, ctx)
        if error is not None:
            return error
        # value keys first so unknown keys are reported in the value's own order
        all_keys = dict.fromkeys([*own_keys(value), *fields])
        for key in all_keys:
            checker = fields.get(key)
            if not checker:
                return validation_failure(
                    f"Invalid {ctx.location} `{ctx.full_path}` key `{key}` "
                    f"supplied to `{ctx.subject_name}`."
                    f"\nBad object: {json.dumps(to_serializable(value), indent=2, default=repr)}"
                    f"\nValid keys: {json.dumps([str(k) for k in fields], indent=2)}",
                    ctx.full_path
                )
            error = _check_field("exact", checker, value, key, ctx)
            if error is not None:
                return error
        return None
    return create_chainable_checker(validate, f"exact({list(fields)!r})")


def create_instance_checker(expected_class: Any) -> RequiredChecker:
    """
    Build a checker that accepts instances of ``expected_class``.

    Args:
        expected_class: Class, or tuple of classes, passed to ``isinstance``
    """
    def validate(value, ctx):
        if not isinstance(value, expected_class):
            return validation_failure(
                f"Invalid {ctx.location} `{ctx.full_path}` of type `{class_name(value)}` "
                f"supplied to `{ctx.subject_name}`, expected instance of `{type_name(expected_class)}`.",
                ctx.full_path
            )
        return None
    return create_chainable_checker(validate, f"instance_of({type_name(expected_class)})")
