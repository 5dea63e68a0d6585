"""Records of the social network data set and their CSV readers."""

import csv
import dataclasses
import enum
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from itertools import zip_longest
from os import PathLike
from typing import Any, Iterable, Optional, Union

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_I64 = (-(2**63), 2**63 - 1)
_U32 = {"range": (0, 2**32 - 1)}
_INTEGER = re.compile(r"[+-]?[0-9]+")

PathType = Union[str, "PathLike[str]"]


class EarlyExit(Exception):
    """Raised by a computation that decides to stop resolving early."""


class RecordError(ValueError):
    """Raised when a record cannot be read from its fields."""


@dataclass(frozen=True)
class User:
    id: int
    name: Optional[str]


@dataclass(frozen=True)
class Post:
    id: int
    ts: datetime
    content: str
    submitted_id: int


@dataclass(frozen=True)
class Comment:
    id: int
    ts: datetime
    content: str
    submitted_id: int
    parent_id: int


@dataclass(frozen=True)
class Like:
    user_id: int
    comment_id: int


@dataclass(frozen=True)
class Friend:
    user_1_id: int
    user_2_id: int


@dataclass(frozen=True)
class ExpectedResult:
    view: str
    changeset: int = field(metadata=_U32)
    iteration: int = field(metadata=_U32)
    phase_name: str = field()
    metric_value: str = field()


class UpdateKind(enum.Enum):
    """The type of record carried by a line of a change set."""

    USERS = "Users"
    POSTS = "Posts"
    COMMENTS = "Comments"
    LIKES = "Likes"
    FRIENDS = "Friends"

    @property
    def model(self) -> type:
        return _MODELS[self]


_MODELS = {
    UpdateKind.USERS: User,
    UpdateKind.POSTS: Post,
    UpdateKind.COMMENTS: Comment,
    UpdateKind.LIKES: Like,
    UpdateKind.FRIENDS: Friend,
}


@dataclass(frozen=True)
class Update:
    """One change to apply to the data set."""

    kind: UpdateKind
    record: Any


def parse_timestamp(text: str) -> datetime:
    """Parse a ``YYYY-MM-DD HH:MM:SS`` timestamp as UTC."""
    try:
        parsed = datetime.strptime(text, TIMESTAMP_FORMAT)
    except ValueError as err:
        raise RecordError(f"invalid timestamp {text!r}: {err}") from err
    return parsed.replace(tzinfo=timezone.utc)


def _parse_int(text: str, name: str, bounds: tuple) -> int:
    if not _INTEGER.fullmatch(text):
        raise RecordError(f"field {name!r}: invalid integer {text!r}")
    value = int(text)
    low, high = bounds
    if not low <= value <= high:
        raise RecordError(f"field {name!r}: integer {text!r} out of range")
    return value


def _convert(spec: dataclasses.Field, text: str) -> Any:
    if spec.type is int:
        return _parse_int(text, spec.name, spec.metadata.get("range", _I64))
    if spec.type is str:
        return text
    if spec.type is datetime:
        return parse_timestamp(text)
    if spec.type == Optional[str]:
        return text or None
    raise TypeError(f"unsupported field type {spec.type!r}")


def model_from_fields(model: type, fields: Iterable[str]) -> Any:
    """Build an instance of the record class ``model`` from positional text fields."""
    values = list(fields)
    specs = dataclasses.fields(model)
    if len(values) > len(specs):
        raise RecordError(
            f"{model.__name__}: expected {len(specs)} fields, found {len(values)}"
        )
    kwargs = {}
    for spec, text in zip_longest(specs, values):
        if text is None:
            if spec.type == Optional[str]:
                kwargs[spec.name] = None
                continue
            raise RecordError(f"{model.__name__}: missing field {spec.name!r}")
        kwargs[spec.name] = _convert(spec, text)
    return model(**kwargs)


def parse_update(fields: Iterable[str]) -> Update:
    """Parse a change-set line whose first field names the record type."""
    iterator = iter(fields)
    type_str = next(iterator, None)
    if type_str is None:
        raise RecordError("Missing type string")
    try:
        kind = UpdateKind(type_str)
    except ValueError:
        raise RecordError(f"Unknown type string {type_str}") from None
    return Update(kind, model_from_fields(kind.model, iterator))


def _rows(path: PathType, delimiter: str):
    with open(path, newline="", encoding="utf-8") as handle:
        reader = csv.reader(handle, delimiter=delimiter)
        for row in reader:
            if row:
                yield reader.line_num, row


def read_csv_file(path: PathType, model: type, delimiter: str = ",") -> list:
    """Read a header-less CSV file of equal-length records into ``model`` instances."""
    records = []
    expected_length = None
    for line, row in _rows(path, delimiter):
        if expected_length is None:
            expected_length = len(row)
        elif len(row) != expected_length:
            raise RecordError(
                f"line {line}: found record with {len(row)} fields, "
                f"but the previous record has {expected_length} fields"
            )
        try:
            records.append(model_from_fields(model, row))
        except RecordError as err:
            raise RecordError(f"line {line}: {err}") from err
    return records


def read_csv_update(path: PathType) -> list:
    """Read a ``|``-separated change set of mixed record types."""
    updates = []
    for line, row in _rows(path, "|"):
        try:
            updates.append(parse_update(row))
        except RecordError as err:
            raise RecordError(f"line {line}: {err}") from err
    return updates


def expected_results(path: PathType) -> dict:
    """Read expected results, keyed by view, then change set, then iteration."""
    results: dict = {}
    for result in read_csv_file(path, ExpectedResult, ";"):
        by_changeset = results.setdefault(result.view, {})
        by_changeset.setdefault(result.changeset, {})[result.iteration] = result
    return results