"""
Serialization interop for Vec1.

A Vec1 has exactly the external shape of the list it wraps: a JSON
array, or a list-typed field in a pydantic model. Decoding always
re-validates non-emptiness, so an empty array is rejected through the
format-error channel of the framework in use (``ValueError`` for json,
``pydantic.ValidationError`` for pydantic).
"""

import json
from typing import IO, Any, List, get_args

from .container import Vec1
from .logging import get_logger

logger = get_logger(__name__)


class Vec1JSONEncoder(json.JSONEncoder):
    """JSON encoder that writes every Vec1, nested or not, as an array."""

    def default(self, o: Any) -> Any:
        if isinstance(o, Vec1):
            return o.into_vec()
        return super().default(o)


def dumps(value: Vec1, **kwargs) -> str:
    """Encode a Vec1 as a JSON array string."""
    kwargs.setdefault("cls", Vec1JSONEncoder)
    return json.dumps(value, **kwargs)


def dump(value: Vec1, fp: IO[str], **kwargs) -> None:
    """Write a Vec1 to a text file object as a JSON array."""
    kwargs.setdefault("cls", Vec1JSONEncoder)
    json.dump(value, fp, **kwargs)


def loads(text: str, **kwargs) -> Vec1:
    """
    Decode a JSON array into a Vec1.

    Raises:
        json.JSONDecodeError: If text is not valid JSON
        ValueError: If the document is not an array
        EmptyInputError: If the array is empty
    """
    return _from_decoded(json.loads(text, **kwargs))


def load(fp: IO[str], **kwargs) -> Vec1:
    """Read a JSON array from a text file object into a Vec1."""
    return _from_decoded(json.load(fp, **kwargs))


def _from_decoded(data: Any) -> Vec1:
    if not isinstance(data, list):
        logger.debug(f"Refused to decode a Vec1 from JSON {type(data).__name__}")
        raise ValueError(f"expected a JSON array, got {type(data).__name__}")
    return Vec1.from_sequence(data)


def _unwrap_instance(value: Any) -> Any:
    if isinstance(value, Vec1):
        return value.into_vec()
    return value


def _to_list(value: Vec1) -> List[Any]:
    return value.into_vec()


def vec1_core_schema(cls: type, source_type: Any, handler: Any) -> Any:
    """
    Build the pydantic-core schema for ``Vec1`` and ``Vec1[T]`` fields.

    Input is validated as a list of T (any item type when unparametrized)
    and then handed to ``from_sequence``, whose EmptyInputError pydantic
    reports as a ValidationError. Output is the plain list.
    """
    from pydantic_core import core_schema

    args = get_args(source_type)
    item_schema = handler.generate_schema(args[0]) if args else core_schema.any_schema()
    list_schema = core_schema.list_schema(item_schema)

    return core_schema.no_info_before_validator_function(
        _unwrap_instance,
        core_schema.no_info_after_validator_function(cls.from_sequence, list_schema),
        serialization=core_schema.plain_serializer_function_ser_schema(
            _to_list,
            return_schema=list_schema,
        ),
    )
