"""
Schema validation for dictionaries and plain objects.
"""
from typing import Any, Dict, List, Mapping

from ..utils.error_handlers import handle_errors
from ..utils.exceptions import ProptypesError
from ..utils.logging_config import get_logger
from .dispatch import check_prop_types
from .factory import exact, shape
from .kinds import coarse_kind, own_keys

logger = get_logger(__name__)


class Schema:
    """Named collection of checkers for validating a payload."""

    def __init__(
        self,
        type_specs: Mapping[str, Any],
        strict: bool = False,
        name: str = "value",
        location: str = "field"
    ):
        """
        Initialize schema.

        Args:
            type_specs: Mapping of field name to checker
            strict: If True, reject keys that are not in the schema
            name: Name the payload is reported under, the root of every path
            location: Location tag used in messages
        """
        self.type_specs: Dict[str, Any] = dict(type_specs)
        self.strict = strict
        self.name = name
        self.location = location
        self._checker = exact(self.type_specs) if strict else shape(self.type_specs)

    def validate(self, data: Any) -> Any:
        """Validate data against the schema and return it unchanged."""
        check_prop_types({self.name: self._checker}, {self.name: data}, self.location, self.name)
        return data

    @handle_errors(default_return=False)
    def is_valid(self, data: Any) -> bool:
        """Validate without raising."""
        self.validate(data)
        return True

    def errors(self, data: Any) -> List[str]:
        """
        Collect the failure of every field instead of stopping at the first.

        Fields are checked one at a time in schema order. In strict mode each
        undeclared key is reported too.
        """
        try:
            self.validate(data)
            return []
        except ProptypesError as e:
            first = e

        if data is None or coarse_kind(data) != 'object':
            # the payload itself is absent or of the wrong kind
            return [first.message]

        messages: List[str] = []
        subject = {self.name: data}
        for field, checker in self.type_specs.items():
            if not checker:
                continue
            try:
                check_prop_types({self.name: shape({field: checker})}, subject, self.location, self.name)
            except ProptypesError as e:
                messages.append(e.message)

        if self.strict:
            for key in own_keys(data):
                if key not in self.type_specs:
                    messages.append(
                        f'Invalid {self.location} `{self.name}` key `{key}` supplied to `{self.name}`.'
                    )

        logger.debug(f"Schema {self.name!r} collected {len(messages)} error(s)")
        return messages or [first.message]
